"""Reverse-address error models.

Every failure raised by the codec is a RevAddrError. Errors nest: an outer
AddrError for the whole arpa name wraps the specific cause (a label error,
a rune error, a length error or a plain validation error), so callers can
both print one precise message and branch on the kind of any error in the
chain.
"""

import json
from enum import Enum
from typing import Iterator, Type, TypeVar


# Address kinds used in error messages ("bad <kind> ...")
ADDR_KIND_ARPA = "arpa domain name"
ADDR_KIND_IP = "ip address"
ADDR_KIND_IPV4 = "ipv4 address"
ADDR_KIND_LABEL = "domain name label"

# Renders an absent or empty address in messages
NIL_ADDR = "<nil>"


E = TypeVar("E", bound="RevAddrError")


def quote(value: str) -> str:
    """Render value in double quotes, escaping quotes and control characters.

    Examples:
        >>> quote("1.0.z.127")
        '"1.0.z.127"'
        >>> quote('1"2\\n')
        '"1\\\\"2\\\\n"'
    """
    return json.dumps(value, ensure_ascii=False)


def quote_rune(rune: str) -> str:
    """Render a single character in single quotes, escaped like quote()."""
    if rune == "'":
        return "'\\''"

    return "'" + quote(rune)[1:-1].replace('\\"', '"') + "'"


class ErrorKind(Enum):
    """Classification of reverse-address failures."""

    ADDRESS = "address"  # Malformed address or arpa name shape
    RUNE = "rune"  # Character illegal in its position
    LENGTH = "length"  # Length differs from the mandated one
    VALIDATION = "validation"  # Empty label or unknown suffix


class RevAddrError(ValueError):
    """Base class for all reverse-address errors.

    Attributes:
        kind: Classification of the error.
        err: Wrapped cause, or None for leaf errors.
    """

    kind: ErrorKind = ErrorKind.VALIDATION
    err: "RevAddrError | None" = None

    def unwrap_all(self) -> Iterator["RevAddrError"]:
        """Iterate over this error and every wrapped cause, outermost first."""
        current: RevAddrError | None = self
        while current is not None:
            yield current
            current = current.err

    @property
    def root_cause(self) -> "RevAddrError":
        """Return the innermost error of the chain."""
        *_, last = self.unwrap_all()
        return last


class ValidationError(RevAddrError):
    """Generic validation failure carrying a fixed message."""

    kind = ErrorKind.VALIDATION
    message = "validation failed"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class LabelEmptyError(ValidationError):
    """A domain name label has no characters."""

    message = "label is empty"


class NotReversedIPError(ValidationError):
    """A name does not end with a known reverse-address suffix."""

    message = "not a full reversed ip address"


class AddrError(RevAddrError):
    """An address, arpa name or label is malformed.

    Attributes:
        addr_kind: What was being parsed (e.g. "arpa domain name").
        addr: The offending input, quoted as received.
        err: Optional underlying cause.

    Examples:
        >>> str(AddrError(ADDR_KIND_IP, NIL_ADDR))
        'bad ip address "<nil>"'
        >>> str(AddrError(ADDR_KIND_LABEL, "", LabelEmptyError()))
        'bad domain name label "": label is empty'
    """

    kind = ErrorKind.ADDRESS

    def __init__(self, addr_kind: str, addr: str, err: RevAddrError | None = None):
        self.addr_kind = addr_kind
        self.addr = addr
        self.err = err

        msg = f"bad {addr_kind} {quote(addr)}"
        if err is not None:
            msg = f"{msg}: {err}"

        super().__init__(msg)

    def __reduce__(self):
        return type(self), (self.addr_kind, self.addr, self.err)


class RuneError(RevAddrError):
    """A character is not allowed in its position.

    Attributes:
        addr_kind: What was being parsed.
        rune: The offending character, as received.
    """

    kind = ErrorKind.RUNE

    def __init__(self, addr_kind: str, rune: str):
        self.addr_kind = addr_kind
        self.rune = rune
        super().__init__(f"bad {addr_kind} rune {quote_rune(rune)}")

    def __reduce__(self):
        return type(self), (self.addr_kind, self.rune)


class LengthError(RevAddrError):
    """A value is longer or shorter than allowed.

    Exactly one of allowed or max_len is expected: allowed for fixed-length
    values, max_len for bounded ones.

    Attributes:
        addr_kind: What was being parsed.
        length: Actual length.
        allowed: Required exact length, if fixed.
        max_len: Maximum length, if bounded.
    """

    kind = ErrorKind.LENGTH

    def __init__(
        self,
        addr_kind: str,
        length: int,
        allowed: int | None = None,
        max_len: int | None = None,
    ):
        self.addr_kind = addr_kind
        self.length = length
        self.allowed = allowed
        self.max_len = max_len

        if allowed is not None:
            msg = f"bad {addr_kind} length {length}, allowed: {allowed}"
        else:
            msg = f"bad {addr_kind} length {length}, max: {max_len}"

        super().__init__(msg)

    def __reduce__(self):
        return type(self), (self.addr_kind, self.length, self.allowed, self.max_len)


def find_error(err: BaseException, error_type: Type[E]) -> E | None:
    """Find the first error of the given type in the chain of err.

    Args:
        err: Error to inspect.
        error_type: RevAddrError subclass to look for.

    Returns:
        The outermost matching error, or None if the chain has none.

    Examples:
        >>> outer = AddrError(ADDR_KIND_ARPA, "x", RuneError(ADDR_KIND_ARPA, "z"))
        >>> find_error(outer, RuneError).rune
        'z'
    """
    if not isinstance(err, RevAddrError):
        return None

    for e in err.unwrap_all():
        if isinstance(e, error_type):
            return e

    return None


def has_error(err: BaseException, error_type: Type[RevAddrError]) -> bool:
    """Check whether any error in the chain of err is of error_type."""
    return find_error(err, error_type) is not None
