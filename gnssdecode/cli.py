"""Command-line decoder: NMEA sentences in, JSON lines out.

Usage::

    gnssdecode capture.nmea
    cat capture.nmea | gnssdecode --verify-checksum --skip-invalid

Each non-blank input line is decoded independently and printed as one JSON
object. Lines that fail to decode are logged and printed as
``{"type": "error", ...}`` objects unless ``--skip-invalid`` is given.
"""

import argparse
import logging
import sys
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import IO

from gnssdecode.formatters import format_error_message, format_sentence_message
from gnssdecode.nmea import NMEAError, parse

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gnssdecode",
        description="Decode NMEA 0183 sentences into JSON lines",
    )
    parser.add_argument(
        "files",
        nargs="*",
        type=Path,
        help="Files with one sentence per line (default: stdin)",
    )
    parser.add_argument(
        "--verify-checksum",
        action="store_true",
        help="Reject sentences whose checksum does not match",
    )
    parser.add_argument(
        "--skip-invalid",
        action="store_true",
        help="Drop lines that fail to decode instead of reporting them",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    return parser.parse_args(argv)


def _iter_stream(stream: IO[str]) -> Iterator[str]:
    for line in stream:
        line = line.strip()
        if line:
            yield line


def _iter_lines(paths: list[Path]) -> Iterator[str]:
    if not paths:
        yield from _iter_stream(sys.stdin)
        return
    for path in paths:
        with path.open(encoding="ascii", errors="replace") as stream:
            yield from _iter_stream(stream)


def decode_lines(
    lines: Iterable[str],
    output: IO[str],
    verify_checksum: bool = False,
    skip_invalid: bool = False,
) -> int:
    """Decode each line and write one JSON message per line to ``output``.

    Returns:
        The number of lines that failed to decode.
    """
    failures = 0
    for line_number, line in enumerate(lines, start=1):
        try:
            sentence = parse(line, verify_checksum=verify_checksum)
        except NMEAError as error:
            failures += 1
            logger.warning("Line %d: %s", line_number, error)
            if not skip_invalid:
                print(format_error_message(error), file=output)
            continue
        print(format_sentence_message(sentence), file=output)
    return failures


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    failures = decode_lines(
        _iter_lines(args.files),
        sys.stdout,
        verify_checksum=args.verify_checksum,
        skip_invalid=args.skip_invalid,
    )
    logger.info("Finished with %d undecodable line(s)", failures)

    if failures and not args.skip_invalid:
        return 1
    return 0
