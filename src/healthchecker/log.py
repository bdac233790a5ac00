# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for the health checker."""

from __future__ import annotations

import logging
import os

DEFAULT_LOG_LEVEL = os.getenv("HEALTHCHECKER_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# httpx logs every request at INFO, which would drown out batch summaries.
NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging(level: str | None = None) -> None:
    """Configure standard logging for CLI/library use."""
    effective_level = getattr(logging, (level or DEFAULT_LOG_LEVEL).upper(), logging.WARNING)
    logging.basicConfig(level=effective_level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    client_level = logging.DEBUG if effective_level <= logging.DEBUG else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(client_level)


__all__ = ["setup_logging"]
