"""Conversion result and report models.

This module provides data structures for recording the outcome of each
address/name conversion and for rendering a run's report as JSON or YAML.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List

import yaml

from revaddr.models.ptr_result import PTRResult


class Direction(Enum):
    """Which way an input was converted."""

    TO_ARPA = "TO_ARPA"  # IP address -> reverse name
    FROM_ARPA = "FROM_ARPA"  # Reverse name -> IP address


class ConversionStatus(Enum):
    OK = "OK"
    ERROR = "ERROR"


@dataclass
class ConversionResult:
    """Outcome of converting one input.

    Attributes:
        input: Input exactly as received.
        direction: Detected conversion direction.
        status: OK if the conversion succeeded.
        output: Converted value (reverse name or textual address).
        arpa_name: Canonical reverse name of the address, for PTR queries.
        error_kind: Kind of the innermost error, e.g. "rune" or "length".
        error_message: Full error message.
        ptr: PTR lookup result, if lookups were enabled.

    Invariants:
        - status == OK implies output and arpa_name are set, errors are None.
        - status == ERROR implies output is None and error_message is set.
    """

    input: str
    direction: Direction
    status: ConversionStatus
    output: str | None = None
    arpa_name: str | None = None
    error_kind: str | None = None
    error_message: str | None = None
    ptr: PTRResult | None = None

    def is_ok(self) -> bool:
        """Check if the conversion succeeded.

        Returns:
            bool: True if status is OK, False otherwise.
        """
        return self.status == ConversionStatus.OK

    def to_json(self) -> dict:
        """Serialize to JSON-compatible dict.

        Returns:
            dict: JSON-serializable representation.
        """
        return {
            "input": self.input,
            "direction": self.direction.value,
            "status": self.status.value,
            "output": self.output,
            "arpa_name": self.arpa_name,
            "error_kind": self.error_kind,
            "error_message": self.error_message,
            "ptr": self.ptr.to_json() if self.ptr else None,
        }


@dataclass
class ConversionReport:
    """Aggregated conversion results of one run.

    Attributes:
        timestamp: Report generation timestamp (UTC).
        execution_duration_ms: Time spent converting (milliseconds).
        results: Per-input results in input order.
        ptr_enabled: Whether PTR lookups were performed.

    Computed Properties:
        total_inputs, converted, failed, ptr_resolved.

    Invariants:
        - total_inputs == converted + failed
        - results keep input order
    """

    timestamp: datetime
    execution_duration_ms: int
    results: List[ConversionResult] = field(default_factory=list)
    ptr_enabled: bool = False

    @property
    def total_inputs(self) -> int:
        return len(self.results)

    @property
    def converted(self) -> int:
        return sum(1 for r in self.results if r.is_ok())

    @property
    def failed(self) -> int:
        return self.total_inputs - self.converted

    @property
    def ptr_resolved(self) -> int:
        return sum(1 for r in self.results if r.ptr and r.ptr.is_resolved())

    def to_json(self) -> dict:
        """Serialize to JSON-compatible dict.

        Returns:
            dict: JSON-serializable representation matching
            conversion-report-schema.json.
        """
        return {
            "summary": {
                "timestamp": self.timestamp.isoformat(),
                "total_inputs": self.total_inputs,
                "converted": self.converted,
                "failed": self.failed,
                "ptr_enabled": self.ptr_enabled,
                "ptr_resolved": self.ptr_resolved,
                "execution_duration_ms": self.execution_duration_ms,
            },
            "results": [r.to_json() for r in self.results],
        }

    def to_yaml(self) -> str:
        """Generate YAML-formatted report.

        Returns:
            str: YAML string with header comments followed by the report.
        """
        header = [
            "# Reverse address conversion report",
            f"# Generated: {self.timestamp.isoformat()}",
            f"# Converted: {self.converted}/{self.total_inputs}",
        ]

        yaml_output = yaml.safe_dump(
            self.to_json(), default_flow_style=False, sort_keys=False
        )

        return "\n".join(header) + "\n" + yaml_output
