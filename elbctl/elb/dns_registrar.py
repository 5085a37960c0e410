# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0
import botocore.exceptions
from ..utils import DnsRegistrationError
import logging

logger = logging.getLogger(__name__)

DNS_TTL = 60
# Route53 rejects change batch comments longer than this
MAX_COMMENT_LENGTH = 256


# parent domains of fqdn, longest first, never a bare top level domain.
# api.v2.example.com -> v2.example.com., example.com.
def candidate_zone_names(fqdn):
    labels = fqdn.rstrip(".").split(".")
    return [".".join(labels[i:])+"." for i in range(1, len(labels)-1)]

def find_hosted_zone_id(route53_client, fqdn):
    zone_names = candidate_zone_names(fqdn)
    for zone_name in zone_names:
        response = route53_client.list_hosted_zones_by_name(DNSName=zone_name, MaxItems="1")
        zones = response.get("HostedZones",[])
        if len(zones)>0 and zones[0].get("Name") == zone_name:
            # Id comes back as /hostedzone/XXXX
            return zones[0]["Id"].split("/")[-1]
    raise DnsRegistrationError("No hosted zone found for %s in %s"%(fqdn, zone_names))

# points fqdn at the ELB with a CNAME. cluster tags are only used to
# describe the change, Route53 records cannot carry tags
def register_dns(route53_client, fqdn, elb_dns_name, app_name, tags):
    cluster = ",".join(["%s=%s"%(t.get("Key"), t.get("Value")) for t in tags or []])
    change_batch = {
        "Comment": ("ELB for %s (%s)"%(app_name, cluster))[:MAX_COMMENT_LENGTH],
        "Changes": [
            {
                "Action": "UPSERT",
                "ResourceRecordSet": {
                    "Name": fqdn,
                    "Type": "CNAME",
                    "TTL": DNS_TTL,
                    "ResourceRecords": [{"Value": elb_dns_name}]
                }
            }
        ]
    }
    try:
        zone_id = find_hosted_zone_id(route53_client, fqdn)
        route53_client.change_resource_record_sets(HostedZoneId=zone_id, ChangeBatch=change_batch)
    except botocore.exceptions.ClientError as error:
        raise DnsRegistrationError("Error registering %s -> %s: %s"%(fqdn, elb_dns_name, error)) from error
    logger.info("Registered %s CNAME %s"%(fqdn, elb_dns_name))
