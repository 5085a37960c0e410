"""Tests for loading cluster metadata from files and CloudFormation."""
from __future__ import annotations

import datetime
from typing import Any

import pytest
from botocore.stub import Stubber

from elbctl.ecs.cluster_metadata import cluster_metadata_from_dict, get_cluster_metadata
from elbctl.utils import ResolutionError


def test_from_dict_accepts_lists_and_csv() -> None:
    cluster_metadata = cluster_metadata_from_dict(
        {"publicSubnets": "subnet-a, subnet-b", "elbSecurityGroups": ["sg-elb"], "unknown": "x"}
    )
    assert cluster_metadata == {
        "publicSubnets": ["subnet-a", "subnet-b"],
        "elbSubnets": [],
        "elbSecurityGroups": ["sg-elb"],
        "akamaiSecurityGroup": [],
        "clusterCftStackTags": [],
    }


def test_from_cloudformation_stack(cf_client: Any) -> None:
    with Stubber(cf_client) as stub:
        stub.add_response(
            "describe_stacks",
            {
                "Stacks": [
                    {
                        "StackName": "shared-cluster",
                        "CreationTime": datetime.datetime(2026, 1, 1),
                        "StackStatus": "UPDATE_COMPLETE",
                        "Outputs": [
                            {"OutputKey": "PublicSubnets", "OutputValue": "subnet-pub-a,subnet-pub-b"},
                            {"OutputKey": "ElbSubnets", "OutputValue": "subnet-elb-a"},
                            {"OutputKey": "ElbSecurityGroups", "OutputValue": "sg-elb"},
                            {"OutputKey": "AkamaiSecurityGroup", "OutputValue": "sg-akamai"},
                            {"OutputKey": "ClusterArn", "OutputValue": "arn:aws:ecs:us-east-1:1:cluster/x"},
                        ],
                        "Tags": [{"Key": "Name", "Value": "shared-cluster"}],
                    }
                ]
            },
            {"StackName": "shared-cluster"},
        )
        cluster_metadata = get_cluster_metadata(cf_client, "shared-cluster")
    assert cluster_metadata == {
        "publicSubnets": ["subnet-pub-a", "subnet-pub-b"],
        "elbSubnets": ["subnet-elb-a"],
        "elbSecurityGroups": ["sg-elb"],
        "akamaiSecurityGroup": ["sg-akamai"],
        "clusterCftStackTags": [{"Key": "Name", "Value": "shared-cluster"}],
    }


def test_missing_stack_is_a_resolution_error(cf_client: Any) -> None:
    with Stubber(cf_client) as stub:
        stub.add_client_error("describe_stacks", service_error_code="ValidationError")
        with pytest.raises(ResolutionError):
            get_cluster_metadata(cf_client, "missing")


def test_empty_cluster_file_is_a_resolution_error() -> None:
    with pytest.raises(ResolutionError):
        cluster_metadata_from_dict(None)
