# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""In-process HttpClient implementations."""

from __future__ import annotations

import asyncio

from .client import HttpClient
from .models import HttpRequest, HttpResponse


class StubHttpClient(HttpClient):
    """Deterministic, programmable HttpClient for tests."""

    def __init__(
        self,
        responses: dict[str, HttpResponse] | None = None,
        delays: dict[str, float] | None = None,
    ):
        self._responses = responses or {}
        self._delays = delays or {}
        self.requests: list[HttpRequest] = []
        self.closed = False

    def add(self, url: str, response: HttpResponse, *, delay: float = 0.0) -> None:
        self._responses[url] = response
        if delay:
            self._delays[url] = delay

    async def request(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        delay = self._delays.get(request.url, 0.0)
        if delay:
            await asyncio.sleep(delay)
        if request.url in self._responses:
            return self._responses[request.url]
        return HttpResponse(ok=False, error_message="No stub response configured", error_type="StubMissing")

    async def aclose(self) -> None:
        self.closed = True
