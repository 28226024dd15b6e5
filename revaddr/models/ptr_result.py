"""PTR lookup result models."""

from dataclasses import dataclass, field
from enum import Enum


class PTRStatus(Enum):
    """PTR query result classification."""

    RESOLVED = "RESOLVED"  # PTR records returned
    NOT_FOUND = "NOT_FOUND"  # NXDOMAIN or no PTR records
    UNKNOWN = "UNKNOWN"  # Timeout, SERVFAIL, or other non-definitive response


@dataclass
class PTRResult:
    """Result of a single PTR query.

    Attributes:
        name: Reverse domain name that was queried.
        status: Classification of the query result.
        hostnames: Sorted PTR targets, empty unless RESOLVED.
        response_data: Error description for UNKNOWN results.
    """

    name: str
    status: PTRStatus
    hostnames: list[str] = field(default_factory=list)
    response_data: str = ""

    def is_resolved(self) -> bool:
        """Check if the query returned at least one hostname.

        Returns:
            bool: True if status is RESOLVED, False otherwise.
        """
        return self.status == PTRStatus.RESOLVED

    def is_unknown(self) -> bool:
        """Check if query result is unknown (transient failure).

        Returns:
            bool: True if status is UNKNOWN, False otherwise.
        """
        return self.status == PTRStatus.UNKNOWN

    def to_json(self) -> dict:
        return {
            "name": self.name,
            "status": self.status.value,
            "hostnames": list(self.hostnames),
            "response_data": self.response_data,
        }
