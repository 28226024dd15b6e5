"""Unit tests for structured JSON logging."""

import io
import json
import logging

import pytest

from revaddr.services.logger import (
    RUN_ID,
    CustomJsonFormatter,
    log_batch_summary,
    log_conversion,
    setup_logging,
)


@pytest.fixture
def json_stream():
    """Capture revaddr logger output as JSON lines."""
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(CustomJsonFormatter("%(message)s"))

    logger = logging.getLogger("revaddr.services.logger")
    logger.addHandler(handler)
    old_level = logger.level
    logger.setLevel(logging.DEBUG)
    yield stream
    logger.removeHandler(handler)
    logger.setLevel(old_level)


def _records(stream):
    return [json.loads(line) for line in stream.getvalue().splitlines()]


def test_log_conversion_fields(json_stream):
    log_conversion(
        value="127.0.0.1",
        direction="TO_ARPA",
        status="OK",
        error_kind=None,
        duration_ms=0,
    )

    (record,) = _records(json_stream)
    assert record["message"] == "Conversion completed"
    assert record["input"] == "127.0.0.1"
    assert record["level"] == "DEBUG"
    assert record["run_id"] == RUN_ID
    assert record["timestamp"].endswith("Z")


def test_log_batch_summary_fields(json_stream):
    log_batch_summary(
        total_inputs=3, converted=2, failed=1, ptr_resolved=0, duration_sec=0.5
    )

    (record,) = _records(json_stream)
    assert record["message"] == "Batch completed"
    assert record["failed"] == 1
    assert record["logger"] == "revaddr.services.logger"


def test_setup_logging_replaces_handlers():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level

    try:
        setup_logging()
        setup_logging(verbose=True)

        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, CustomJsonFormatter)
        assert root.level == logging.DEBUG
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)
