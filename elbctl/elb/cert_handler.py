# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0
from .elb_objects import INTERNET_FACING, TLS_PROTOCOLS
from ..utils import ResolutionError
import logging

logger = logging.getLogger(__name__)

# ssl_certificates comes from the --ssl_certificates_file, e.g.
# - urlSuffix: example.com
#   arn: arn:aws:acm:us-east-1:111111111111:certificate/abc
#   internetFacing: true
# - urlSuffix: example.com
#   urlPrefix: admin
#   arn: arn:aws:acm:us-east-1:111111111111:certificate/def
# an entry with a matching urlPrefix wins over a suffix-only entry
def find_ssl_certificate(ssl_certificates, url_suffix, url_prefix):
    suffix_match = None
    for cert in ssl_certificates or []:
        if cert.get("urlSuffix") != url_suffix:
            continue
        cert_prefix = cert.get("urlPrefix")
        if cert_prefix is None:
            if suffix_match is None:
                suffix_match = cert
            continue
        if cert_prefix == url_prefix:
            return cert
    return suffix_match

def derive_cert(ssl_certificates, protocol, url_suffix, url_prefix):
    cert = find_ssl_certificate(ssl_certificates, url_suffix, url_prefix)
    if cert is None:
        if protocol in TLS_PROTOCOLS:
            raise ResolutionError("No SSL certificate found for %s.%s"%(url_prefix, url_suffix))
        logger.debug("No SSL certificate for %s.%s, continuing without one for %s"%(url_prefix, url_suffix, protocol))
        return {"certArn": None, "sslCertificate": None}
    cert_arn = cert.get("arn")
    if cert_arn is None or len(cert_arn)<=0:
        raise ResolutionError("SSL certificate for %s has no arn"%(url_suffix))
    logger.info("Using SSL certificate %s for %s.%s"%(cert_arn, url_prefix, url_suffix))
    return {"certArn": cert_arn, "sslCertificate": cert}

# urlSchemeOverride decides when given, otherwise the certificate does
def is_internet_facing_url_scheme(ssl_certificate, url_scheme_override):
    if url_scheme_override is not None:
        return url_scheme_override == INTERNET_FACING
    if ssl_certificate is None:
        return False
    return bool(ssl_certificate.get("internetFacing", False))
