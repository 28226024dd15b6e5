"""Domain name label validation."""

import string

from revaddr.models.errors import (
    ADDR_KIND_LABEL,
    AddrError,
    LabelEmptyError,
    LengthError,
    RuneError,
)


# RFC 1035 section 2.3.4
MAX_DOMAIN_LABEL_LEN = 63

_OUTER_RUNES = frozenset(string.ascii_letters + string.digits)
_INNER_RUNES = _OUTER_RUNES | {"-"}


def is_valid_outer_rune(rune: str) -> bool:
    """Check if rune may start or end a label (ASCII letter or digit)."""
    return rune in _OUTER_RUNES


def is_valid_inner_rune(rune: str) -> bool:
    """Check if rune may appear inside a label (letter, digit or hyphen)."""
    return rune in _INNER_RUNES


def validate_domain_name_label(label: str) -> None:
    """Validate a single dot-separated domain name label.

    Checks, in order: length, emptiness, first character, inner characters
    and last character. The first failure wins.

    Args:
        label: Label text without dots.

    Raises:
        AddrError: If the label is invalid. The cause is a LengthError,
            a LabelEmptyError or a RuneError naming the first illegal
            character.

    Examples:
        >>> validate_domain_name_label("in-addr")
        >>> validate_domain_name_label(" ")
        Traceback (most recent call last):
        ...
        revaddr.models.errors.AddrError: bad domain name label " ": bad domain name label rune ' '
    """
    length = len(label)
    if length > MAX_DOMAIN_LABEL_LEN:
        cause = LengthError(ADDR_KIND_LABEL, length, max_len=MAX_DOMAIN_LABEL_LEN)
        raise AddrError(ADDR_KIND_LABEL, label, cause) from cause

    if length == 0:
        cause = LabelEmptyError()
        raise AddrError(ADDR_KIND_LABEL, label, cause) from cause

    rune = _first_invalid_rune(label)
    if rune is not None:
        cause = RuneError(ADDR_KIND_LABEL, rune)
        raise AddrError(ADDR_KIND_LABEL, label, cause) from cause


def _first_invalid_rune(label: str) -> str | None:
    if not is_valid_outer_rune(label[0]):
        return label[0]

    for rune in label[1:-1]:
        if not is_valid_inner_rune(rune):
            return rune

    if len(label) > 1 and not is_valid_outer_rune(label[-1]):
        return label[-1]

    return None
