# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level facade wiring one shared HTTP client into the probe pipeline."""

from __future__ import annotations

from collections.abc import Sequence
from contextlib import suppress

from .config import DEFAULT_INTERVAL, HttpSettings, load_http_settings
from .http.client import HttpClient, create_default_http_client
from .models import ProbeOutcome
from .probe import FanOutRunner, HttpProber
from .scheduler import BatchSink, run_schedule


class HealthChecker:
    """
    Convenience wrapper that owns the HTTP client shared by every probe.

    Building the client once lets probes reuse pooled connections and keeps
    client construction out of measured response times.
    """

    def __init__(self, http_client: HttpClient | None = None, settings: HttpSettings | None = None):
        self.http_settings = settings or load_http_settings()
        self.http_client = http_client or create_default_http_client(self.http_settings)
        self.prober = HttpProber(self.http_client, timeout=self.http_settings.timeout)
        self.runner = FanOutRunner(self.prober)

    async def check_url(self, url: str) -> ProbeOutcome:
        return await self.prober.probe(url)

    async def check_all(self, urls: Sequence[str]) -> list[ProbeOutcome]:
        return await self.runner.check_all(urls)

    async def run(
        self,
        urls: Sequence[str],
        reporter: BatchSink,
        *,
        once: bool = False,
        interval: float = DEFAULT_INTERVAL,
    ) -> int:
        return await run_schedule(self.runner, urls, reporter, once=once, interval=interval)

    async def aclose(self) -> None:
        with suppress(Exception):
            if hasattr(self.http_client, "aclose"):
                await self.http_client.aclose()

    async def __aenter__(self) -> HealthChecker:
        return self

    async def __aexit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        await self.aclose()
