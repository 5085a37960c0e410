# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0


class ResolutionError(Exception):
    """A value the push needs (certificate, port, health check) could not be resolved."""


class ElbError(RuntimeError):
    """A load balancer control plane call failed."""


class DnsRegistrationError(RuntimeError):
    """The load balancer endpoint could not be published in DNS."""


# simple util functions
def dict_check(dict):
    if dict is None or len(dict)==0: return False
    return True

def list_check(lst):
    if lst is None or len(lst)==0: return False
    return True

# CloudFormation outputs carry lists as comma separated strings
def split_csv(value):
    if value is None: return []
    return [v.strip() for v in value.split(",") if len(v.strip())>0]
