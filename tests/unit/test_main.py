"""Unit tests for the command-line entry point."""

import io
import json
import logging
from unittest.mock import patch

import pytest
import yaml

from revaddr.main import main, read_inputs
from revaddr.models.ptr_result import PTRResult, PTRStatus


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo the handler changes made by setup_logging()."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_read_inputs_prefers_arguments():
    stdin = io.StringIO("10.0.0.1\n")
    assert read_inputs(["127.0.0.1"], stdin) == ["127.0.0.1"]


def test_read_inputs_skips_blank_lines():
    stdin = io.StringIO("127.0.0.1\n\n  ::1  \n")
    assert read_inputs([], stdin) == ["127.0.0.1", "::1"]


def test_main_json_success(clean_env):
    stdout = io.StringIO()

    exit_code = main(["127.0.0.1", "1.0.0.127.in-addr.arpa"], stdout=stdout)

    assert exit_code == 0
    report = json.loads(stdout.getvalue())
    assert report["summary"]["converted"] == 2
    assert [r["output"] for r in report["results"]] == [
        "1.0.0.127.in-addr.arpa",
        "127.0.0.1",
    ]


def test_main_reads_stdin(clean_env):
    stdout = io.StringIO()

    exit_code = main([], stdin=io.StringIO("::1\n"), stdout=stdout)

    assert exit_code == 0
    assert json.loads(stdout.getvalue())["summary"]["total_inputs"] == 1


def test_main_failure_exit_code(clean_env):
    """Test any failed conversion makes the run fail."""
    stdout = io.StringIO()

    exit_code = main(["127.0.0.1", "1.2.3.4.example.com"], stdout=stdout)

    assert exit_code == 1
    report = json.loads(stdout.getvalue())
    assert report["summary"]["failed"] == 1
    assert report["results"][1]["error_message"] == (
        'bad arpa domain name "1.2.3.4.example.com": '
        "not a full reversed ip address"
    )


def test_main_yaml_output(clean_env):
    clean_env.setenv("OUTPUT_FORMAT", "yaml")
    stdout = io.StringIO()

    exit_code = main(["::1"], stdout=stdout)

    assert exit_code == 0
    assert stdout.getvalue().startswith("# Reverse address conversion report")
    assert yaml.safe_load(stdout.getvalue())["results"][0]["output"] == (
        "1" + ".0" * 31 + ".ip6.arpa"
    )


def test_main_invalid_config(clean_env):
    clean_env.setenv("DNS_TIMEOUT", "0")
    stdout = io.StringIO()

    assert main(["127.0.0.1"], stdout=stdout) == 1
    assert stdout.getvalue() == ""


@patch("revaddr.services.converter.lookup_ptr")
def test_main_resolves_ptr(mock_lookup, clean_env):
    clean_env.setenv("RESOLVE_PTR", "yes")
    mock_lookup.return_value = PTRResult(
        name="1.0.0.127.in-addr.arpa",
        status=PTRStatus.RESOLVED,
        hostnames=["localhost."],
    )
    stdout = io.StringIO()

    exit_code = main(["127.0.0.1"], stdout=stdout)

    assert exit_code == 0
    report = json.loads(stdout.getvalue())
    assert report["summary"]["ptr_enabled"] is True
    assert report["summary"]["ptr_resolved"] == 1
    mock_lookup.assert_called_once_with("1.0.0.127.in-addr.arpa", 5)
