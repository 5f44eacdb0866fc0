#!/usr/bin/env python3
"""Access Log Analyzer - Entry point"""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from access_log_analyzer import (
    LOG_URL, TOP_N, VERSION, FetchError, FrequencyAnalyzer,
    download_log, print_report, read_log_file
)
from access_log_analyzer.patterns import REQUEST_TIMEOUT

logger = logging.getLogger("access_log_analyzer")


def non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError("must be a non-negative integer")
    return number


def positive_float(value: str) -> float:
    number = float(value)
    if not number > 0:
        raise argparse.ArgumentTypeError("must be a positive number")
    return number


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Access Log Analyzer - top clients, paths, status codes and user agents",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument("source", nargs="?", default=LOG_URL,
                        help="URL or local path of the access log (default: sample nginx log)")
    parser.add_argument("-n", "--top", type=non_negative_int, default=TOP_N,
                        help=f"Entries per report (default: {TOP_N})")
    parser.add_argument("--timeout", type=positive_float, default=REQUEST_TIMEOUT,
                        help=f"Download timeout in seconds (default: {REQUEST_TIMEOUT})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"AccessLogAnalyzer v{VERSION}")

    return parser.parse_args(argv)


def setup_logging(console: Console, verbose: bool = False):
    handler = RichHandler(console=console, show_path=False, show_time=False)
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False


def load_log(source: str, timeout: float) -> str:
    if Path(source).is_file():
        return read_log_file(source)
    return download_log(source, timeout=timeout)


def main(argv=None, console=None):
    args = parse_args(argv)
    console = console or Console()
    setup_logging(console, args.verbose)

    try:
        content = load_log(args.source, args.timeout)
    except FetchError as e:
        console.print(f"Fatal Error: {e}", style="red", markup=False)
        sys.exit(1)

    analyzer = FrequencyAnalyzer(console=console)
    analyzer.analyze_text(content)
    print_report(analyzer, console, top=args.top)


if __name__ == "__main__":
    main()
