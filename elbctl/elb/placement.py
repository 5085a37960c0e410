# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0
from .elb_objects import HTTPS, INTERNET_FACING, INTERNAL
import logging

logger = logging.getLogger(__name__)

# public HTTPS traffic arrives through Akamai, which has its own allow list.
# the two security group sets are never merged
def get_security_groups(scheme, protocol, cluster_metadata):
    if scheme == INTERNET_FACING and protocol == HTTPS:
        return list(cluster_metadata.get("akamaiSecurityGroup",[]))
    return list(cluster_metadata.get("elbSecurityGroups",[]))

# decides where the ELB lives from the resolved url scheme and the
# service's elbSchemeOverride. first match wins:
#   internet facing url scheme or override -> public subnets
#   everything else                        -> internal elb subnets
def decide_placement(service, internet_facing_url_scheme, cluster_metadata, protocol):
    if internet_facing_url_scheme or service.get("elbSchemeOverride") == INTERNET_FACING:
        placement = {
            "scheme": INTERNET_FACING,
            "subnets": list(cluster_metadata.get("publicSubnets",[])),
            "usingInternalSubnets": False
        }
    else:
        placement = {
            "scheme": INTERNAL,
            "subnets": list(cluster_metadata.get("elbSubnets",[])),
            "usingInternalSubnets": True
        }
    placement["securityGroups"] = get_security_groups(placement["scheme"], protocol, cluster_metadata)
    logger.debug("ELB placement %s in subnets %s with security groups %s"%(placement["scheme"], placement["subnets"], placement["securityGroups"]))
    return placement
