# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0
from ..utils import ResolutionError, list_check
import logging

logger = logging.getLogger(__name__)

# the ELB forwards to exactly one container, the one that maps a port.
# its first port mapping gives the instance (host) port for the listeners
def find_exposed_container(definition):
    exposed = []
    for container in definition.get("containerDefinitions",[]):
        if list_check(container.get("portMappings")):
            exposed.append(container)
    if len(exposed) != 1:
        names = [c.get("name") for c in exposed]
        raise ResolutionError("Expected one container with port mappings in %s, found %d %s"%(definition.get("appName"), len(exposed), names))
    container = exposed[0]
    port_mapping = container["portMappings"][0]
    host_port = port_mapping.get("hostPort")
    if not host_port:
        raise ResolutionError("Container %s has no host port to put behind the ELB"%(container.get("name")))
    container_port = port_mapping.get("containerPort", host_port)
    logger.debug("Exposed container %s %s:%s"%(container.get("name"), host_port, container_port))
    return {
        "containerName": container.get("name"),
        "hostPort": host_port,
        "containerPort": container_port
    }
