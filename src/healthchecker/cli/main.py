# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""http-health-checker CLI."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from ..config import DEFAULT_INTERVAL, DEFAULT_URLS, HttpSettings, load_http_settings
from ..errors import ConfigurationError
from ..http import create_default_http_client
from ..log import setup_logging
from ..report import Reporter
from ..runtime import HealthChecker

logger = logging.getLogger(__name__)

EXIT_INTERRUPTED = 130


def _split_urls(values: list[str] | None) -> list[str]:
    urls: list[str] = []
    for value in values or []:
        urls.extend(part.strip() for part in value.split(",") if part.strip())
    return urls


def _interval(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid interval: {value!r} (expected whole seconds)") from None
    if parsed < 0:
        raise argparse.ArgumentTypeError(f"interval must be non-negative, got {parsed}")
    return parsed


def _timeout(value: str) -> float:
    try:
        parsed = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid timeout: {value!r}") from None
    if parsed <= 0:
        raise argparse.ArgumentTypeError(f"timeout must be positive, got {value}")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="http-health-checker",
        description="A concurrent HTTP health checker",
    )
    parser.add_argument(
        "-u",
        "--urls",
        action="append",
        metavar="URL[,URL...]",
        help="Comma-separated URLs to check (repeatable; defaults to a built-in demo set)",
    )
    parser.add_argument(
        "-i",
        "--interval",
        type=_interval,
        default=DEFAULT_INTERVAL,
        help=f"Seconds to sleep between checks (default: {DEFAULT_INTERVAL})",
    )
    parser.add_argument("-o", "--output", help="Write each batch as JSON to this file, overwriting it")
    parser.add_argument("--once", action="store_true", help="Run a single check and exit")
    parser.add_argument(
        "--timeout",
        type=_timeout,
        default=None,
        help="Per-request timeout in seconds (default: HEALTHCHECKER_HTTP_TIMEOUT or 10)",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: WARNING)")
    return parser


def _resolve_urls(args: argparse.Namespace) -> list[str]:
    urls = _split_urls(args.urls)
    if not urls:
        print("No URLs provided, using default test URLs ...")
        return list(DEFAULT_URLS)
    return urls


def _print_banner(urls: list[str], interval: int, once: bool) -> None:
    print("HTTP Health Checker Starting...")
    print(f"Checking {len(urls)} URLs every {interval} seconds")
    print(f"URLs: {', '.join(urls)}")
    print()
    print("Running single check..." if once else "Press Ctrl+C to stop")


async def _run(args: argparse.Namespace, urls: list[str], checker: HealthChecker) -> int:
    reporter = Reporter.build(args.output)
    async with checker:
        return await checker.run(urls, reporter, once=args.once, interval=args.interval)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    settings: HttpSettings = load_http_settings()
    if args.timeout is not None:
        settings.timeout = args.timeout

    urls = _resolve_urls(args)

    try:
        http_client = create_default_http_client(settings)
    except ConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    checker = HealthChecker(http_client=http_client, settings=settings)
    _print_banner(urls, args.interval, args.once)

    try:
        batches = asyncio.run(_run(args, urls, checker))
    except KeyboardInterrupt:
        print("\nStopped")
        return EXIT_INTERRUPTED

    logger.info("finished after %d batch(es)", batches)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
