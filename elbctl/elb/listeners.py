# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0
from . import elb_objects
from ..utils import list_check
import copy


def build_listener(elb_port, instance_port, protocol, cert_arn):
    listener = copy.deepcopy(elb_objects.LISTENER)
    listener["LoadBalancerPort"] = elb_port
    listener["InstancePort"] = instance_port
    listener["Protocol"] = protocol
    listener["InstanceProtocol"] = protocol
    # the API rejects a null certificate id, a plain protocol just ignores a set one
    if cert_arn is None:
        listener.pop("SSLCertificateId")
    else:
        listener["SSLCertificateId"] = cert_arn
    return listener

# one listener per source port in the given order, 443 when there are none.
# repeated ports are passed through and left for the ELB API to reject
def build_listeners(source_ports, instance_port, protocol, cert_arn):
    if not list_check(source_ports):
        return [build_listener(elb_objects.DEFAULT_ELB_PORT, instance_port, protocol, cert_arn)]
    return [build_listener(port, instance_port, protocol, cert_arn) for port in source_ports]

# ports whose listeners get replaced when an existing ELB is updated
def listener_ports(source_ports):
    if not list_check(source_ports):
        return [elb_objects.DEFAULT_ELB_PORT]
    return list(source_ports)
