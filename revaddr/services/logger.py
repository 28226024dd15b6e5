"""Structured JSON logging."""

import logging
import sys
import uuid
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger


# Run ID for correlation across log entries of one invocation
RUN_ID = str(uuid.uuid4())


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter that adds run_id and standardized fields."""

    def add_fields(
        self,
        log_record: Dict[str, Any],
        record: logging.LogRecord,
        message_dict: Dict[str, Any],
    ) -> None:
        """Add custom fields to log record.

        Args:
            log_record: The log record to modify.
            record: The original logging.LogRecord.
            message_dict: Additional fields from the logging call.
        """
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = (
            datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
        )
        log_record["run_id"] = RUN_ID
        log_record["level"] = record.levelname
        log_record["logger"] = record.name


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure structured JSON logging for the application.

    Logs go to stderr so that reports printed to stdout stay parseable.

    Args:
        verbose: Log per-input records (DEBUG) as well as the summary.

    Returns:
        logging.Logger: Configured root logger.
    """
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    json_handler = logging.StreamHandler(sys.stderr)
    json_handler.setFormatter(CustomJsonFormatter("%(message)s"))
    logger.addHandler(json_handler)

    return logger


def log_conversion(
    value: str,
    direction: str,
    status: str,
    error_kind: str | None,
    duration_ms: int,
) -> None:
    """Log structured per-input conversion result.

    Args:
        value: Input that was converted.
        direction: TO_ARPA or FROM_ARPA.
        status: OK or ERROR.
        error_kind: Kind of the innermost error, None on success.
        duration_ms: Processing time in milliseconds.
    """
    logger = logging.getLogger(__name__)
    logger.debug(
        "Conversion completed",
        extra={
            "input": value,
            "direction": direction,
            "status": status,
            "error_kind": error_kind,
            "duration_ms": duration_ms,
        },
    )


def log_batch_summary(
    total_inputs: int,
    converted: int,
    failed: int,
    ptr_resolved: int,
    duration_sec: float,
) -> None:
    """Log run completion summary.

    Args:
        total_inputs: Total number of inputs processed.
        converted: Number of successful conversions.
        failed: Number of failed conversions.
        ptr_resolved: Number of PTR lookups that returned hostnames.
        duration_sec: Total execution time in seconds.
    """
    logger = logging.getLogger(__name__)
    logger.info(
        "Batch completed",
        extra={
            "total_inputs": total_inputs,
            "converted": converted,
            "failed": failed,
            "ptr_resolved": ptr_resolved,
            "duration_sec": duration_sec,
        },
    )


def log_ptr_failure(name: str, response_data: str) -> None:
    """Log a PTR lookup that could not be answered definitively.

    Args:
        name: Reverse domain name that was queried.
        response_data: Error description.
    """
    logger = logging.getLogger(__name__)
    logger.warning(
        "PTR lookup failed",
        extra={"arpa_name": name, "response_data": response_data},
    )
