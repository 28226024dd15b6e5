"""Conversion service for batches of addresses and reverse names."""

import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Iterable

from revaddr.models.conversion import ConversionResult, ConversionStatus, Direction
from revaddr.models.errors import RevAddrError
from revaddr.models.ptr_result import PTRResult, PTRStatus
from revaddr.services.logger import log_conversion
from revaddr.services.ptr_lookup import lookup_ptr
from revaddr.utils.ip_utils import (
    address_from_reverse_pointer,
    is_ip_address,
    reverse_pointer,
)


logger = logging.getLogger(__name__)


def detect_direction(value: str) -> Direction:
    """Detect conversion direction: addresses go to arpa, anything else from it."""
    return Direction.TO_ARPA if is_ip_address(value) else Direction.FROM_ARPA


def convert(value: str) -> ConversionResult:
    """Convert one input, never raising for malformed input.

    Args:
        value: Textual IP address or reverse domain name. Surrounding
            whitespace is ignored.

    Returns:
        ConversionResult: OK with the converted value, or ERROR with the
        innermost error kind and the full message.

    Examples:
        >>> convert("127.0.0.1").output
        '1.0.0.127.in-addr.arpa'
        >>> convert("1.2.3.4.example.com").error_message
        'bad arpa domain name "1.2.3.4.example.com": not a full reversed ip address'
    """
    start = time.time()
    text = value.strip()
    direction = detect_direction(text)

    try:
        if direction == Direction.TO_ARPA:
            output = reverse_pointer(text)
            arpa_name = output
        else:
            address = address_from_reverse_pointer(text)
            output = str(address)
            arpa_name = reverse_pointer(address)

        result = ConversionResult(
            input=value,
            direction=direction,
            status=ConversionStatus.OK,
            output=output,
            arpa_name=arpa_name,
        )
    except RevAddrError as e:
        result = ConversionResult(
            input=value,
            direction=direction,
            status=ConversionStatus.ERROR,
            error_kind=e.root_cause.kind.value,
            error_message=str(e),
        )

    log_conversion(
        value=value,
        direction=result.direction.value,
        status=result.status.value,
        error_kind=result.error_kind,
        duration_ms=int((time.time() - start) * 1000),
    )

    return result


def resolve_ptr_concurrent(
    results: list[ConversionResult],
    concurrency: int = 10,
    timeout: int = 5,
) -> None:
    """Attach PTR lookup results to every successful conversion.

    Uses ThreadPoolExecutor for concurrent DNS queries. Failed conversions
    are left without a PTR result.

    Args:
        results: Conversion results, updated in place.
        concurrency: Max concurrent DNS queries.
        timeout: Per-query timeout in seconds.
    """
    pending = [r for r in results if r.is_ok()]
    if not pending:
        return

    with ThreadPoolExecutor(max_workers=concurrency) as executor:
        futures = {
            executor.submit(lookup_ptr, result.arpa_name, timeout): result
            for result in pending
        }

        for future in as_completed(futures):
            result = futures[future]
            try:
                result.ptr = future.result()
            except Exception as e:
                # Unexpected error - treat as UNKNOWN
                logger.error(f"Unexpected error resolving {result.arpa_name}: {e}")
                result.ptr = PTRResult(
                    name=result.arpa_name,
                    status=PTRStatus.UNKNOWN,
                    response_data=f"Exception: {e}",
                )


def convert_batch(
    values: Iterable[str],
    resolve_ptr: bool = False,
    concurrency: int = 10,
    timeout: int = 5,
) -> list[ConversionResult]:
    """Convert many inputs, optionally resolving their PTR records.

    Args:
        values: Textual IP addresses and/or reverse domain names.
        resolve_ptr: Query PTR records for successful conversions.
        concurrency: Max concurrent DNS queries.
        timeout: Per-query timeout in seconds.

    Returns:
        list[ConversionResult]: One result per input, in input order.
    """
    results = [convert(value) for value in values]

    if resolve_ptr:
        resolve_ptr_concurrent(results, concurrency, timeout)

    return results
