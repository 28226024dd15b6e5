"""Conversion between IP addresses and their reverse DNS domain names.

IPv4 addresses map to names under in-addr.arpa (RFC 1035 section 3.5),
IPv6 addresses to names under ip6.arpa (RFC 3596 section 2.5). Both
directions are pure functions of their input.
"""

import ipaddress
import string

from revaddr.models.errors import (
    ADDR_KIND_ARPA,
    ADDR_KIND_IP,
    ADDR_KIND_IPV4,
    NIL_ADDR,
    AddrError,
    LengthError,
    NotReversedIPError,
    RevAddrError,
    RuneError,
)
from revaddr.utils.labels import validate_domain_name_label


IPV4_LEN = 4
IPV6_LEN = 16

ARPA_V4_SUFFIX = ".in-addr.arpa"
ARPA_V6_SUFFIX = ".ip6.arpa"

# One single-nibble label per half-byte
ARPA_V6_LABEL_COUNT = IPV6_LEN * 2

# len("0." * 32 + "ip6.arpa")
ARPA_V6_LEN = ARPA_V6_LABEL_COUNT * 2 + len(ARPA_V6_SUFFIX) - 1

_HEX_DIGITS = frozenset(string.hexdigits)


def format_ip(ip: bytes | None) -> str:
    """Render raw address bytes for error messages.

    Args:
        ip: Raw address bytes of any length, or None.

    Returns:
        str: "<nil>" for absent or empty input, the canonical text form for
        4 and 16 bytes, otherwise "?" followed by the hex encoding of every
        byte.

    Examples:
        >>> format_ip(None)
        '<nil>'
        >>> format_ip(bytes([32, 1, 13, 184]) + bytes(12))
        '2001:db8::'
        >>> format_ip(bytes([1, 2, 3, 4, 5]))
        '?0102030405'
    """
    if not ip:
        return NIL_ADDR

    if len(ip) in (IPV4_LEN, IPV6_LEN):
        return str(ipaddress.ip_address(bytes(ip)))

    return "?" + bytes(ip).hex()


def ip_to_reversed_addr(ip: bytes | bytearray | memoryview | None) -> str:
    """Convert raw address bytes to the reverse DNS domain name.

    The result is lower-case and has no trailing dot.

    Args:
        ip: 4-byte IPv4 or 16-byte IPv6 address in network order.

    Returns:
        str: Name under in-addr.arpa or ip6.arpa.

    Raises:
        AddrError: If ip is None or not 4 or 16 bytes long.

    Examples:
        >>> ip_to_reversed_addr(bytes([127, 0, 0, 1]))
        '1.0.0.127.in-addr.arpa'
    """
    if ip is None or len(ip) not in (IPV4_LEN, IPV6_LEN):
        raise AddrError(ADDR_KIND_IP, format_ip(ip))

    ip = bytes(ip)
    if len(ip) == IPV4_LEN:
        labels = [str(b) for b in reversed(ip)]
        suffix = ARPA_V4_SUFFIX
    else:
        # Low nibble comes first once the address is reversed
        labels = [nibble for b in reversed(ip) for nibble in f"{b:02x}"[::-1]]
        suffix = ARPA_V6_SUFFIX

    return ".".join(labels) + suffix


def ip_from_reversed_addr(arpa: str) -> bytes:
    """Convert a reverse DNS domain name to raw address bytes.

    The name is matched case-insensitively and may end with a single dot.

    Args:
        arpa: Name under in-addr.arpa or ip6.arpa.

    Returns:
        bytes: 4-byte IPv4 or 16-byte IPv6 address in network order.

    Raises:
        AddrError: If arpa is not a well-formed reverse name. The message
            quotes arpa and the cause names the exact problem: an invalid
            label, a bad IPv4 octet, a bad hex rune, a wrong length or an
            unknown suffix.

    Examples:
        >>> list(ip_from_reversed_addr("1.0.0.127.in-addr.arpa"))
        [127, 0, 0, 1]
    """
    try:
        return _parse_reversed_addr(arpa)
    except RevAddrError as e:
        raise AddrError(ADDR_KIND_ARPA, arpa, e) from e


def is_reversed_addr(arpa: str) -> bool:
    """Check if arpa is a full, well-formed reverse DNS domain name."""
    try:
        ip_from_reversed_addr(arpa)
    except AddrError:
        return False
    return True


def _parse_reversed_addr(arpa: str) -> bytes:
    if arpa.endswith("."):
        arpa = arpa[:-1]

    if _has_suffix_fold(arpa, ARPA_V6_SUFFIX):
        return _parse_ipv6_labels(arpa, arpa[: -len(ARPA_V6_SUFFIX)])
    elif _has_suffix_fold(arpa, ARPA_V4_SUFFIX):
        return _parse_ipv4_labels(arpa[: -len(ARPA_V4_SUFFIX)])

    raise NotReversedIPError()


def _has_suffix_fold(s: str, suffix: str) -> bool:
    # Only the tail is folded; fragments in errors come from s as received
    return len(s) >= len(suffix) and s[-len(suffix) :].lower() == suffix


def _split_labels(value: str) -> list[str]:
    labels = value.split(".")
    for label in labels:
        validate_domain_name_label(label)

    return labels


def _parse_ipv4_labels(value: str) -> bytes:
    labels = _split_labels(value)

    # The value reads as a dotted-decimal address with reversed octets
    octets = [_parse_octet(label) for label in labels]
    if len(octets) != IPV4_LEN or None in octets:
        raise AddrError(ADDR_KIND_IPV4, value)

    return bytes(reversed(octets))


def _parse_octet(label: str) -> int | None:
    if not label.isascii() or not label.isdigit() or len(label) > 3:
        return None

    # Leading zeros are ambiguous (octal in some parsers)
    if len(label) > 1 and label[0] == "0":
        return None

    octet = int(label)
    return octet if octet <= 0xFF else None


def _parse_ipv6_labels(arpa: str, value: str) -> bytes:
    labels = _split_labels(value)

    if len(arpa) != ARPA_V6_LEN:
        raise LengthError(ADDR_KIND_ARPA, len(arpa), allowed=ARPA_V6_LEN)

    if len(labels) != ARPA_V6_LABEL_COUNT:
        raise NotReversedIPError()

    nibbles = [_parse_nibble(label) for label in labels]
    nibbles.reverse()

    return bytes(
        nibbles[i] << 4 | nibbles[i + 1] for i in range(0, ARPA_V6_LABEL_COUNT, 2)
    )


def _parse_nibble(label: str) -> int:
    # Length and count checks guarantee single-character labels here
    if label not in _HEX_DIGITS:
        raise RuneError(ADDR_KIND_ARPA, label)

    return int(label, 16)
