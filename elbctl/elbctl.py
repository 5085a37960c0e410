# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0
import click
import json
import yaml
import boto3
from botocore.config import Config
from functools import partial
from os.path import isfile

from .ecs.cluster_metadata import cluster_metadata_from_dict, get_cluster_metadata, pick_ecs_cluster
from .elb.dns_registrar import register_dns
from .elb.elb_handler import create_load_balancer
from .utils import ResolutionError

import logging
import logging.config
LOGGING_CONFIG = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'standard': {
            'format': '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
        },
    },
    'handlers': {
        'default': {
            'level': 'INFO',
            'formatter': 'standard',
            'class': 'logging.StreamHandler',
            'stream': 'ext://sys.stdout',  # Default is stderr
        },
    },
    'loggers': {
        '': {  # root logger
            'handlers': ['default'],
            'level': 'WARNING',
            'propagate': False
        }
    }
}
logging.config.dictConfig(LOGGING_CONFIG)
logger = logging.getLogger()

# reads the first document of a yaml file
def yaml_reader(source):
    if not isfile(source) or not source.lower().endswith(('.yaml','yml')):
        raise ResolutionError("%s is not a YAML file"%(source))
    logger.info("Reading YAML from %s file"%(source))
    with open(source, 'r') as input_stream:
        return yaml.safe_load(input_stream)

def aws_client(service_name, region_name):
    if len(region_name) > 0:
        return boto3.client(service_name, config=Config(region_name = region_name))
    return boto3.client(service_name)

def load_cluster_metadata(cluster_file, cluster_stack, region_name):
    if len(cluster_file) > 0:
        return cluster_metadata_from_dict(yaml_reader(cluster_file))
    if len(cluster_stack) <= 0:
        cluster_stack = pick_ecs_cluster(aws_client("ecs", region_name))
    return get_cluster_metadata(aws_client("cloudformation", region_name), cluster_stack)

def write_json(filename, obj):
    logger.info("Writing load balancer to %s"%(filename))
    with open(filename, 'w') as of:
        of.write(json.dumps(obj, sort_keys=True, indent=2, separators=(',', ': ')))
        of.write("\n")


# Click cli entry point function
@click.command()
@click.option("-d", "--definition", required=True, type=str, help="Path to the push definition YAML (appName, service, containerDefinitions)")
@click.option("-c", "--cluster_file", default="", type=str, help="Path to a YAML file with the cluster subnets, security groups and tags")
@click.option("-s", "--cluster_stack", default="", type=str, help="CloudFormation stack of the ECS cluster to read cluster metadata from")
@click.option("--ssl_certificates_file", default="", type=str, help="Path to a YAML list of SSL certificates by urlSuffix/urlPrefix")
@click.option("--cluster_tag_key", default="ClusterName", type=str, help="Tag key that keeps the cluster's Name tag on the ELB")
@click.option("--region_name", default="", type=str, help="AWS region of the cluster")
@click.option("-o", "--output_file", default="", type=str, help="File to write the ECS load balancer json")
@click.option("-l", "--log_level", default="WARNING", type=click.Choice(["DEBUG","INFO","WARNING","ERROR","CRITICAL"], case_sensitive=False), help="Select log level")
def push(definition, cluster_file, cluster_stack, ssl_certificates_file, cluster_tag_key, region_name, output_file, log_level):
    logger.setLevel(getattr(logging,log_level.upper()))
    for handler in logger.handlers:
        handler.setLevel(getattr(logging,log_level.upper()))

    push_definition = yaml_reader(definition)
    cluster_metadata = load_cluster_metadata(cluster_file, cluster_stack, region_name)
    ssl_certificates = []
    if len(ssl_certificates_file) > 0:
        ssl_certificates = yaml_reader(ssl_certificates_file) or []
    options = {
        "cluster_tag_key": cluster_tag_key,
        "ssl_certificates": ssl_certificates
        }
    elb_client = aws_client("elb", region_name)
    dns_registrar = partial(register_dns, aws_client("route53", region_name))
    load_balancer = create_load_balancer(elb_client, dns_registrar, cluster_metadata, push_definition, options)
    if len(output_file) > 0:
        write_json(output_file, load_balancer)
    logger.log(100, "ELB %s forwards to %s:%s"%(load_balancer["loadBalancerName"], load_balancer["containerName"], load_balancer["containerPort"]))
