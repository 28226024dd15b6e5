"""Unit tests for the conversion service."""

from unittest.mock import patch

from revaddr.models.conversion import ConversionStatus, Direction
from revaddr.models.ptr_result import PTRResult, PTRStatus
from revaddr.services.converter import convert, convert_batch, detect_direction


def test_detect_direction():
    assert detect_direction("127.0.0.1") == Direction.TO_ARPA
    assert detect_direction("::1") == Direction.TO_ARPA
    assert detect_direction("1.0.0.127.in-addr.arpa") == Direction.FROM_ARPA
    assert detect_direction("garbage") == Direction.FROM_ARPA


def test_convert_address_to_arpa():
    result = convert("127.0.0.1")

    assert result.is_ok() is True
    assert result.direction == Direction.TO_ARPA
    assert result.output == "1.0.0.127.in-addr.arpa"
    assert result.arpa_name == "1.0.0.127.in-addr.arpa"
    assert result.error_kind is None


def test_convert_arpa_to_address():
    """Test decoding canonicalizes the reverse name for later lookups."""
    result = convert(" 4.3.2.1.D.C.B.A" + ".0" * 24 + ".IP6.ARPA. ")

    assert result.is_ok() is True
    assert result.direction == Direction.FROM_ARPA
    assert result.output == "::abcd:1234"
    assert result.arpa_name == "4.3.2.1.d.c.b.a" + ".0" * 24 + ".ip6.arpa"


def test_convert_keeps_original_input():
    result = convert(" 127.0.0.1\n")
    assert result.input == " 127.0.0.1\n"


def test_convert_error_kinds():
    """Test failures report the innermost error kind."""
    cases = {
        "1.2.3.4.example.com": "validation",
        ".0.0.127.in-addr.arpa": "validation",
        "1.0.z.127.in-addr.arpa": "address",
        "3.2.1.d.c.b.a.z" + ".0" * 23 + ".ip6.arpa": "length",
        "4.3.2.1.d.c.b.a.z" + ".0" * 23 + ".ip6.arpa": "rune",
    }

    for value, kind in cases.items():
        result = convert(value)

        assert result.status == ConversionStatus.ERROR, value
        assert result.error_kind == kind, value
        assert result.output is None
        assert result.error_message.startswith(f'bad arpa domain name "{value}"')


@patch("revaddr.services.converter.lookup_ptr")
def test_convert_batch_without_ptr(mock_lookup):
    results = convert_batch(["127.0.0.1", "bad"])

    assert [r.status for r in results] == [ConversionStatus.OK, ConversionStatus.ERROR]
    assert all(r.ptr is None for r in results)
    mock_lookup.assert_not_called()


@patch("revaddr.services.converter.lookup_ptr")
def test_convert_batch_with_ptr(mock_lookup):
    """Test PTR lookups run only for successful conversions, in input order."""
    mock_lookup.side_effect = lambda name, timeout: PTRResult(
        name=name, status=PTRStatus.RESOLVED, hostnames=[f"host-{name}."]
    )

    results = convert_batch(
        ["8.8.8.8", "nope", "1.0.0.127.in-addr.arpa"],
        resolve_ptr=True,
        concurrency=2,
        timeout=3,
    )

    assert [r.input for r in results] == ["8.8.8.8", "nope", "1.0.0.127.in-addr.arpa"]
    assert results[0].ptr.name == "8.8.8.8.in-addr.arpa"
    assert results[1].ptr is None
    assert results[2].ptr.hostnames == ["host-1.0.0.127.in-addr.arpa."]
    assert mock_lookup.call_count == 2


@patch("revaddr.services.converter.lookup_ptr")
def test_convert_batch_unexpected_lookup_error(mock_lookup):
    """Test unexpected lookup errors are recorded as UNKNOWN."""
    mock_lookup.side_effect = RuntimeError("boom")

    results = convert_batch(["127.0.0.1"], resolve_ptr=True)

    assert results[0].ptr.status == PTRStatus.UNKNOWN
    assert results[0].ptr.response_data == "Exception: boom"
