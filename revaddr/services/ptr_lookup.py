"""PTR lookup service for reverse DNS names."""

import dns.exception
import dns.resolver

from revaddr.models.ptr_result import PTRResult, PTRStatus
from revaddr.services.logger import log_ptr_failure


def categorize_failure(exception: Exception) -> str:
    """Categorize DNS failure into a specific failure type.

    Args:
        exception: The DNS exception that occurred.

    Returns:
        str: One of: timeout, no_nameservers, no_resolver_configuration,
             unknown_error.
    """
    if isinstance(exception, dns.exception.Timeout):
        return "timeout"
    elif isinstance(exception, dns.resolver.NoNameservers):
        return "no_nameservers"
    elif isinstance(exception, dns.resolver.NoResolverConfiguration):
        return "no_resolver_configuration"
    else:
        return "unknown_error"


def lookup_ptr(name: str, timeout: int = 5) -> PTRResult:
    """Query PTR records for a reverse DNS name.

    Args:
        name: Reverse domain name, e.g. "1.0.0.127.in-addr.arpa".
        timeout: Total query lifetime in seconds.

    Returns:
        PTRResult: RESOLVED with sorted hostnames, NOT_FOUND for NXDOMAIN or
        an empty answer, UNKNOWN for transient failures.

    Example:
        >>> result = lookup_ptr("8.8.8.8.in-addr.arpa")
        >>> result.hostnames
        ['dns.google.']
    """
    try:
        resolver = dns.resolver.Resolver()
        resolver.lifetime = timeout
        answers = resolver.resolve(name, "PTR")
        hostnames = sorted(str(rdata.target) for rdata in answers)

        if not hostnames:
            return PTRResult(name=name, status=PTRStatus.NOT_FOUND)

        return PTRResult(name=name, status=PTRStatus.RESOLVED, hostnames=hostnames)

    except (dns.resolver.NXDOMAIN, dns.resolver.NoAnswer):
        # Definitive "no PTR record" response
        return PTRResult(name=name, status=PTRStatus.NOT_FOUND)

    except dns.exception.DNSException as e:
        response_data = categorize_failure(e)
        log_ptr_failure(name, response_data)
        return PTRResult(
            name=name, status=PTRStatus.UNKNOWN, response_data=response_data
        )
