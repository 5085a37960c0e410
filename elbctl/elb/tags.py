# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0
from .elb_objects import NAME_TAG


# cluster stack tags are copied to the ELB. The cluster's Name tag is kept
# under cluster_tag_key and Name is set to the application instead
def build_tags(cluster_tags, app_name, cluster_tag_key):
    tags = []
    for tag in cluster_tags or []:
        if tag.get("Key") == NAME_TAG:
            tags.append({"Key": cluster_tag_key, "Value": tag.get("Value")})
            tags.append({"Key": NAME_TAG, "Value": app_name})
        else:
            tags.append({"Key": tag.get("Key"), "Value": tag.get("Value")})
    return tags
