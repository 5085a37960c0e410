# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0
import botocore.exceptions
import copy
from . import elb_objects
from .cert_handler import derive_cert, is_internet_facing_url_scheme
from .health_check import build_health_check
from .listeners import build_listeners, listener_ports
from .placement import decide_placement
from .tags import build_tags
from ..ecs.port_handler import find_exposed_container
from ..utils import ElbError, ResolutionError, dict_check
import logging

logger = logging.getLogger(__name__)

# level used for the lines that belong in the deployment's build log
BUILD_LOG = 100


def get_protocol(service):
    protocol = service.get("protocol")
    if protocol is None:
        return elb_objects.HTTPS
    protocol = protocol.upper()
    if protocol not in elb_objects.PROTOCOLS:
        raise ResolutionError("Unsupported ELB protocol %s"%(protocol))
    return protocol

def get_url_prefix(definition):
    url_prefix = definition["service"].get("urlPrefixOverride")
    if url_prefix is None:
        return definition["appName"]
    return url_prefix

def elb_call(method, action, **request):
    try:
        return method(**request)
    except botocore.exceptions.ClientError as error:
        raise ElbError("Error %s ELB %s: %s"%(action, request.get("LoadBalancerName", request.get("LoadBalancerNames")), request)) from error

# create is the only call whose failure is expected: a name already taken
# means the ELB is being redeployed and has to be updated instead
def create_elb(elb_client, request):
    try:
        elb_client.create_load_balancer(**request)
    except botocore.exceptions.ClientError as error:
        if error.response["Error"]["Code"] == elb_objects.DUPLICATE_NAME_ERROR_CODE:
            logger.debug("Error creating ELB: %s %s"%(request["LoadBalancerName"], error))
            return elb_objects.ALREADY_EXISTS
        raise ElbError("Error creating ELB: %s"%(request)) from error
    return elb_objects.CREATED

# every step is its own call, a failure leaves the earlier ones applied
def update_elb(elb_client, request, source_ports):
    name = request["LoadBalancerName"]
    elb_call(elb_client.delete_load_balancer_listeners, "deleting listeners of",
             LoadBalancerName=name, LoadBalancerPorts=listener_ports(source_ports))
    elb_call(elb_client.create_load_balancer_listeners, "creating listeners of",
             LoadBalancerName=name, Listeners=request["Listeners"])
    elb_call(elb_client.apply_security_groups_to_load_balancer, "applying security groups to",
             LoadBalancerName=name, SecurityGroups=request["SecurityGroups"])
    elb_call(elb_client.add_tags, "tagging",
             LoadBalancerNames=[name], Tags=request["Tags"])
    elb_call(elb_client.attach_load_balancer_to_subnets, "attaching subnets to",
             LoadBalancerName=name, Subnets=request["Subnets"])

def set_stickiness(elb_client, name, cookie_name):
    elb_call(elb_client.create_app_cookie_stickiness_policy, "creating stickiness policy for",
             LoadBalancerName=name, PolicyName=elb_objects.STICKY_POLICY_NAME, CookieName=cookie_name)
    elb_call(elb_client.set_load_balancer_policies_of_listener, "setting listener policies of",
             LoadBalancerName=name, LoadBalancerPort=elb_objects.STICKY_POLICY_PORT,
             PolicyNames=[elb_objects.STICKY_POLICY_NAME])

def describe_elb(elb_client, name):
    response = elb_call(elb_client.describe_load_balancers, "describing", LoadBalancerNames=[name])
    descriptions = response.get("LoadBalancerDescriptions",[])
    if len(descriptions)<=0:
        raise ElbError("ELB %s not found after create"%(name))
    return descriptions[0]

# creates or updates the classic ELB in front of the service described by
# definition (appName, service, containerDefinitions) and returns the ECS
# loadBalancers entry that points the service at it.
# register_dns(fqdn, elb_dns_name, app_name, tags) is only called for
# internal ELBs, public ones are published through Akamai
def create_load_balancer(elb_client, register_dns, cluster_metadata, definition, options):
    app_name = definition["appName"]
    service = definition.get("service",{})
    if not dict_check(service.get("healthCheck")) or service["healthCheck"].get("target") is None:
        raise ResolutionError("%s service has no healthCheck target"%(app_name))

    protocol = get_protocol(service)
    url_prefix = get_url_prefix(definition)
    url_suffix = service.get("urlSuffix")
    if url_suffix is None or len(url_suffix)<=0:
        raise ResolutionError("%s service has no urlSuffix"%(app_name))
    cert = derive_cert(options.get("ssl_certificates",[]), protocol, url_suffix, url_prefix)
    container = find_exposed_container(definition)
    host_port = container["hostPort"]

    internet_facing_url_scheme = is_internet_facing_url_scheme(cert["sslCertificate"], service.get("urlSchemeOverride"))
    placement = decide_placement(service, internet_facing_url_scheme, cluster_metadata, protocol)

    source_ports = service.get("elbSourcePorts")
    listeners = build_listeners(source_ports, host_port, protocol, cert["certArn"])
    tags = build_tags(cluster_metadata.get("clusterCftStackTags",[]), app_name, options.get("cluster_tag_key"))
    request = {
        "LoadBalancerName": app_name,
        "Listeners": listeners,
        "Subnets": placement["subnets"],
        "SecurityGroups": placement["securityGroups"],
        "Scheme": placement["scheme"],
        "Tags": tags
    }

    if create_elb(elb_client, request) == elb_objects.ALREADY_EXISTS:
        logger.log(BUILD_LOG, "Updating ELB: %s"%(app_name))
        update_elb(elb_client, request, source_ports)
    else:
        logger.log(BUILD_LOG, "Created ELB: %s"%(app_name))

    cookie_name = service.get("appStickinessCookie")
    if cookie_name is not None:
        set_stickiness(elb_client, app_name, cookie_name)

    health_check = build_health_check(service["healthCheck"], host_port)
    elb_call(elb_client.configure_health_check, "configuring health check of",
             LoadBalancerName=app_name, HealthCheck=health_check)

    elb_description = describe_elb(elb_client, app_name)
    elb_dns_name = elb_description.get("DNSName")

    registered_url = url_prefix+"."+url_suffix
    scheme = protocol.lower()
    if placement["usingInternalSubnets"]:
        register_dns(registered_url, elb_dns_name, app_name, cluster_metadata.get("clusterCftStackTags",[]))
        logger.log(BUILD_LOG, "... URL Registered: %s://%s"%(scheme, registered_url))
    else:
        logger.log(BUILD_LOG, "... Raw ELB DNS for Akamai: %s://%s"%(scheme, elb_dns_name))
        logger.log(BUILD_LOG, "... Expected Akamai url: %s://%s"%(scheme, registered_url))

    logger.log(BUILD_LOG, "... ELB updates complete")
    load_balancer = copy.deepcopy(elb_objects.LOAD_BALANCER)
    load_balancer["containerName"] = container["containerName"]
    load_balancer["containerPort"] = container["containerPort"]
    load_balancer["loadBalancerName"] = app_name
    return load_balancer
