"""Shared fixtures: stubbed AWS clients and push definitions."""
from __future__ import annotations

import copy
from collections.abc import Iterator
from typing import Any

import boto3
import pytest
from botocore.stub import Stubber

ELB_DNS_NAME = "internal-billing-123456.us-east-1.elb.amazonaws.com"

CLUSTER_METADATA: dict[str, Any] = {
    "publicSubnets": ["subnet-pub-a", "subnet-pub-b"],
    "elbSubnets": ["subnet-elb-a", "subnet-elb-b"],
    "elbSecurityGroups": ["sg-elb"],
    "akamaiSecurityGroup": ["sg-akamai"],
    "clusterCftStackTags": [
        {"Key": "Name", "Value": "shared-cluster"},
        {"Key": "CostCenter", "Value": "1234"},
    ],
}

DEFINITION: dict[str, Any] = {
    "appName": "billing",
    "service": {
        "urlSuffix": "example.com",
        "healthCheck": {"target": "/health"},
    },
    "containerDefinitions": [
        {"name": "sidecar", "image": "sidecar:1"},
        {
            "name": "web",
            "image": "billing:1",
            "portMappings": [{"hostPort": 31000, "containerPort": 8080}],
        },
    ],
}

SSL_CERTIFICATES: list[dict[str, Any]] = [
    {"urlSuffix": "example.com", "arn": "arn:aws:acm:us-east-1:111111111111:certificate/internal"},
    {
        "urlSuffix": "example.org",
        "arn": "arn:aws:acm:us-east-1:111111111111:certificate/public",
        "internetFacing": True,
    },
]


def _client(service_name: str) -> Any:
    return boto3.client(
        service_name,
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


class RecordingRegistrar:
    """Stands in for the DNS registrar callable and records its calls."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, str, list[dict[str, str]]]] = []

    def __call__(self, fqdn: str, elb_dns_name: str, app_name: str, tags: list[dict[str, str]]) -> None:
        self.calls.append((fqdn, elb_dns_name, app_name, tags))


@pytest.fixture
def cluster_metadata() -> dict[str, Any]:
    return copy.deepcopy(CLUSTER_METADATA)


@pytest.fixture
def definition() -> dict[str, Any]:
    return copy.deepcopy(DEFINITION)


@pytest.fixture
def options() -> dict[str, Any]:
    return {"cluster_tag_key": "ClusterName", "ssl_certificates": copy.deepcopy(SSL_CERTIFICATES)}


@pytest.fixture
def registrar() -> RecordingRegistrar:
    return RecordingRegistrar()


@pytest.fixture
def elb_client() -> Any:
    return _client("elb")


@pytest.fixture
def elb_stub(elb_client: Any) -> Iterator[Stubber]:
    with Stubber(elb_client) as stub:
        yield stub
        stub.assert_no_pending_responses()


@pytest.fixture
def route53_client() -> Any:
    return _client("route53")


@pytest.fixture
def cf_client() -> Any:
    return _client("cloudformation")
