# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementation."""

from __future__ import annotations

import asyncio
import logging

import httpx

from ..config import HttpSettings, load_http_settings
from ..errors import categorize_exception, error_category_to_reason
from .client import HttpClient
from .models import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


class HttpxClient(HttpClient):
    """
    Asynchronous httpx client wrapper.

    One instance is shared by every probe for the life of the process so that
    connections are pooled and reused. ``request`` never raises: transport
    failures come back as ``HttpResponse(ok=False, ...)``.
    """

    def __init__(self, settings: HttpSettings | None = None, client: httpx.AsyncClient | None = None):
        self.settings = settings or load_http_settings()
        self._client = client or httpx.AsyncClient(
            follow_redirects=self.settings.allow_redirects,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
        )

    async def request(self, request: HttpRequest) -> HttpResponse:
        headers = dict(request.headers or {})
        headers.setdefault("User-Agent", self.settings.user_agent)

        timeout = request.timeout if request.timeout is not None else self.settings.timeout
        follow_redirects = (
            request.allow_redirects if request.allow_redirects is not None else self.settings.allow_redirects
        )

        try:
            # httpx timeouts are per phase; wait_for bounds the whole exchange.
            resp = await asyncio.wait_for(
                self._client.request(
                    request.method,
                    request.url,
                    headers=headers,
                    timeout=timeout,
                    follow_redirects=follow_redirects,
                ),
                timeout=timeout,
            )
        except asyncio.TimeoutError:
            return HttpResponse(
                ok=False,
                error_message=f"Request timed out after {timeout:g}s",
                error_type="TimeoutError",
            )
        except Exception as exc:  # noqa: BLE001
            category = categorize_exception(exc)
            logger.debug("request to %s failed (%s): %r", request.url, category.value, exc)
            return HttpResponse(
                ok=False,
                error_message=str(exc) or error_category_to_reason(category),
                error_type=type(exc).__name__,
            )

        return HttpResponse(ok=True, status_code=resp.status_code)

    async def aclose(self) -> None:
        await self._client.aclose()
