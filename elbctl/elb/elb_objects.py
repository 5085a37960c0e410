# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0
HTTPS = "HTTPS"
TCP = "TCP"
PROTOCOLS = ["HTTP", "HTTPS", "TCP", "SSL"]
# protocols that terminate TLS on the ELB and need a certificate
TLS_PROTOCOLS = ["HTTPS", "SSL"]

INTERNET_FACING = "internet-facing"
INTERNAL = "internal"

DEFAULT_ELB_PORT = 443
NAME_TAG = "Name"
STICKY_POLICY_NAME = "StickyElbPolicy"
# stickiness is bound to this listener port, whatever elbSourcePorts says
STICKY_POLICY_PORT = 443

# outcomes of the create call
CREATED = "created"
ALREADY_EXISTS = "already_exists"
DUPLICATE_NAME_ERROR_CODE = "DuplicateLoadBalancerName"

LISTENER = {
    "Protocol": "",
    "LoadBalancerPort": DEFAULT_ELB_PORT,
    "InstanceProtocol": "",
    "InstancePort": 0,
    "SSLCertificateId": ""
}

# push definition key -> ELB HealthCheck key and its default
HEALTH_CHECK_DEFAULTS = {
    "interval": ("Interval", 30),
    "healthyThreshold": ("HealthyThreshold", 2),
    "timeout": ("Timeout", 10),
    "unhealthyThreshold": ("UnhealthyThreshold", 10)
}

HEALTH_CHECK = {
    "Target": "",
    "Interval": 30,
    "Timeout": 10,
    "UnhealthyThreshold": 10,
    "HealthyThreshold": 2
}

# same shape as an entry of ECS service "loadBalancers"
LOAD_BALANCER = {
    "containerName": "",
    "containerPort": 0,
    "loadBalancerName": ""
}

CLUSTER_METADATA = {
    "publicSubnets": [],
    "elbSubnets": [],
    "elbSecurityGroups": [],
    "akamaiSecurityGroup": [],
    "clusterCftStackTags": []
}

# CloudFormation output key -> cluster metadata key
CLUSTER_STACK_OUTPUTS = {
    "PublicSubnets": "publicSubnets",
    "ElbSubnets": "elbSubnets",
    "ElbSecurityGroups": "elbSecurityGroups",
    "AkamaiSecurityGroup": "akamaiSecurityGroup"
}
