"""pytest fixtures for testing."""

import pytest


@pytest.fixture
def ip4() -> bytes:
    """127.0.0.1 in network order."""
    return bytes([127, 0, 0, 1])


@pytest.fixture
def ip6() -> bytes:
    """::abcd:1234 in network order."""
    return bytes(12) + bytes([0xAB, 0xCD, 0x12, 0x34])


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every environment variable read by Config."""
    for key in (
        "OUTPUT_FORMAT",
        "RESOLVE_PTR",
        "DNS_TIMEOUT",
        "DNS_CONCURRENCY",
        "VERBOSE",
    ):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch
