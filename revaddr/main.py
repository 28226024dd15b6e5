"""Main entry point for the revaddr conversion tool.

Converts IP addresses to reverse DNS names and back. Inputs come from the
command line or, when none are given, from stdin (one per line).
"""

import logging
import sys
import time
from datetime import datetime, timezone
from typing import Sequence, TextIO

from revaddr.config import Config
from revaddr.models.conversion import ConversionReport
from revaddr.services.converter import convert_batch
from revaddr.services.logger import log_batch_summary, setup_logging
from revaddr.services.reporter import Reporter


logger = logging.getLogger(__name__)


def read_inputs(argv: Sequence[str], stdin: TextIO) -> list[str]:
    """Collect inputs from arguments, falling back to non-blank stdin lines.

    Args:
        argv: Command-line arguments without the program name.
        stdin: Stream read when argv is empty.

    Returns:
        list[str]: Inputs in order.
    """
    if argv:
        return list(argv)

    return [line.strip() for line in stdin if line.strip()]


def main(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Main execution function.

    Returns:
        int: Exit code (0 if every input converted, 1 otherwise or on a
        fatal error).
    """
    start_time = time.time()

    if argv is None:
        argv = sys.argv[1:]
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    try:
        config = Config.from_env()
    except ValueError as e:
        setup_logging()
        logger.error(f"Invalid configuration: {e}")
        return 1

    setup_logging(config.verbose)

    try:
        values = read_inputs(argv, stdin)
        logger.info(f"Converting {len(values)} input(s)")

        results = convert_batch(
            values,
            resolve_ptr=config.resolve_ptr,
            concurrency=config.dns_concurrency,
            timeout=config.dns_timeout,
        )

        duration_sec = time.time() - start_time
        report = ConversionReport(
            timestamp=datetime.now(timezone.utc),
            execution_duration_ms=int(duration_sec * 1000),
            results=results,
            ptr_enabled=config.resolve_ptr,
        )

        stdout.write(Reporter.generate_report(report, config.output_format))
        stdout.write("\n")

        log_batch_summary(
            total_inputs=report.total_inputs,
            converted=report.converted,
            failed=report.failed,
            ptr_resolved=report.ptr_resolved,
            duration_sec=duration_sec,
        )

        return 0 if report.failed == 0 else 1

    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
