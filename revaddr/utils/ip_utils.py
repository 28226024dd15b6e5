"""IP address utilities for textual and ipaddress-based callers."""

import ipaddress

import dns.name

from revaddr.models.errors import ADDR_KIND_IP, AddrError
from revaddr.utils.reversed_addr import ip_from_reversed_addr, ip_to_reversed_addr


IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address


def is_ip_address(text: str) -> bool:
    """Validate if string is a valid IPv4 or IPv6 address.

    Args:
        text: IP address string to validate.

    Returns:
        bool: True if valid IPv4 or IPv6, False otherwise.

    Examples:
        >>> is_ip_address("203.0.113.45")
        True
        >>> is_ip_address("2001:db8::1")
        True
        >>> is_ip_address("256.0.0.1")
        False
    """
    try:
        ipaddress.ip_address(text)
        return True
    except ValueError:
        return False


def to_address(address: str | IPAddress) -> IPAddress:
    """Parse a textual address, passing ipaddress objects through.

    Raises:
        AddrError: If address is not a valid IPv4 or IPv6 address.
    """
    if isinstance(address, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
        return address

    try:
        return ipaddress.ip_address(address)
    except ValueError as e:
        raise AddrError(ADDR_KIND_IP, str(address)) from e


def reverse_pointer(address: str | IPAddress) -> str:
    """Convert an IP address to its reverse DNS domain name.

    IPv4-mapped IPv6 addresses stay in ip6.arpa.

    Args:
        address: Textual address or ipaddress object.

    Returns:
        str: Canonical lower-case name without a trailing dot.

    Raises:
        AddrError: If address is not a valid IPv4 or IPv6 address.

    Examples:
        >>> reverse_pointer("203.0.113.45")
        '45.113.0.203.in-addr.arpa'
    """
    return ip_to_reversed_addr(to_address(address).packed)


def address_from_reverse_pointer(arpa: str) -> IPAddress:
    """Convert a reverse DNS domain name to an ipaddress object.

    Args:
        arpa: Name under in-addr.arpa or ip6.arpa.

    Returns:
        IPv4Address or IPv6Address.

    Raises:
        AddrError: If arpa is not a well-formed reverse name.

    Examples:
        >>> address_from_reverse_pointer("1.0.0.127.in-addr.arpa.")
        IPv4Address('127.0.0.1')
    """
    return ipaddress.ip_address(ip_from_reversed_addr(arpa))


def reverse_name(address: str | IPAddress) -> dns.name.Name:
    """Build the absolute reverse DNS name of address for dnspython queries.

    Raises:
        AddrError: If address is not a valid IPv4 or IPv6 address.
    """
    return dns.name.from_text(reverse_pointer(address))
