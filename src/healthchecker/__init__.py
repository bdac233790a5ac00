# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
http-health-checker package entrypoint.

Probes a list of URLs concurrently with one shared HTTP client, classifies
each response as UP or DOWN, and reports every batch to the terminal and,
optionally, a JSON file. HTTP behavior is abstracted behind an injectable
client interface, and outcomes are modeled with typed dataclasses.
"""

from .config import HttpSettings, load_http_settings
from .http import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    StubHttpClient,
    create_default_http_client,
)
from .log import setup_logging
from .models import ProbeOutcome, ProbeStatus
from .probe import FanOutRunner, HttpProber
from .report import Reporter
from .runtime import HealthChecker
from .scheduler import run_schedule
from .version import __version__

__all__ = [
    "FanOutRunner",
    "HealthChecker",
    "HttpClient",
    "HttpProber",
    "HttpRequest",
    "HttpResponse",
    "HttpSettings",
    "HttpxClient",
    "ProbeOutcome",
    "ProbeStatus",
    "Reporter",
    "StubHttpClient",
    "create_default_http_client",
    "load_http_settings",
    "run_schedule",
    "setup_logging",
    "__version__",
]
