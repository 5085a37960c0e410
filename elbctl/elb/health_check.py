# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0
from . import elb_objects
import copy


def health_check_target(target, instance_port):
    if target == elb_objects.TCP:
        return "TCP:%s"%(instance_port)
    return "HTTPS:%s%s"%(instance_port, target)

# builds the ELB HealthCheck from the push definition's healthCheck.
# the descriptor is not modified, unset fields take the defaults
def build_health_check(health_check, instance_port):
    health_check = health_check or {}
    elb_health_check = copy.deepcopy(elb_objects.HEALTH_CHECK)
    elb_health_check["Target"] = health_check_target(health_check.get("target"), instance_port)
    for key, (elb_key, default) in elb_objects.HEALTH_CHECK_DEFAULTS.items():
        value = health_check.get(key)
        elb_health_check[elb_key] = default if value is None else value
    return elb_health_check
