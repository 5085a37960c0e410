# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0
import botocore.exceptions
from pick import pick
from ..elb import elb_objects
from ..utils import ResolutionError, split_csv
import copy
import logging

logger = logging.getLogger(__name__)


def cluster_metadata_from_dict(values):
    if not isinstance(values, dict):
        raise ResolutionError("Cluster metadata must be a mapping, got %s"%(type(values).__name__))
    cluster_metadata = copy.deepcopy(elb_objects.CLUSTER_METADATA)
    for key in cluster_metadata:
        value = values.get(key)
        if value is None: continue
        if isinstance(value, str):
            value = split_csv(value)
        cluster_metadata[key] = value
    return cluster_metadata

# the ECS cluster is provisioned by a CloudFormation stack of the same name,
# its outputs hold the subnets and security groups for ELBs
def get_cluster_metadata(cf_client, stack_name):
    try:
        response = cf_client.describe_stacks(StackName=stack_name)
    except botocore.exceptions.ClientError as error:
        raise ResolutionError("Unable to describe cluster stack %s: %s"%(stack_name, error)) from error
    stacks = response.get("Stacks",[])
    if len(stacks)<=0:
        raise ResolutionError("Cluster stack %s not found"%(stack_name))
    stack = stacks[0]
    cluster_metadata = copy.deepcopy(elb_objects.CLUSTER_METADATA)
    for output in stack.get("Outputs",[]):
        key = elb_objects.CLUSTER_STACK_OUTPUTS.get(output.get("OutputKey"))
        if key is None: continue
        cluster_metadata[key] = split_csv(output.get("OutputValue"))
    cluster_metadata["clusterCftStackTags"] = [{"Key":t["Key"], "Value":t["Value"]} for t in stack.get("Tags",[])]
    logger.info("Loaded cluster metadata from %s stack"%(stack_name))
    return cluster_metadata

def pick_ecs_cluster(ecs_client):
    cluster_list = []
    paginator = ecs_client.get_paginator('list_clusters')
    response_iterator = paginator.paginate(
        PaginationConfig={
            'MaxItems': 5000,
            'PageSize': 100,
        }
    )
    for i in response_iterator:
        cluster_list = cluster_list+i["clusterArns"]
    if len(cluster_list)<=0:
        raise ResolutionError("No ECS clusters found. Check AWS_REGION setting or pass --region_name")
    option, _ = pick(cluster_list, title="Pick the ECS cluster to push to",
                     default_index=0)
    logger.info("Selected ECS cluster is %s"%(option))
    return(option.split("cluster/")[1])
