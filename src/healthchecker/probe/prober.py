# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Single-URL HTTP probe."""

from __future__ import annotations

import logging
import time

from ..config import DEFAULT_TIMEOUT
from ..http.client import HttpClient
from ..http.models import HttpRequest
from ..models import ProbeOutcome

logger = logging.getLogger(__name__)

MIN_STATUS_CODE = 100
MAX_STATUS_CODE = 599


def _elapsed_ms(start: float) -> int:
    return max(0, int((time.perf_counter() - start) * 1000))


class HttpProber:
    """Issues one GET per call and classifies the result as UP or DOWN."""

    def __init__(self, http_client: HttpClient, timeout: float = DEFAULT_TIMEOUT):
        self.http_client = http_client
        self.timeout = timeout

    async def probe(self, url: str) -> ProbeOutcome:
        start = time.perf_counter()
        try:
            response = await self.http_client.request(HttpRequest(url=url, timeout=self.timeout))
        except Exception as exc:  # noqa: BLE001
            # Clients are expected to fold failures into HttpResponse; guard anyway.
            logger.debug("client raised for %s: %r", url, exc)
            return ProbeOutcome.down(url, str(exc) or type(exc).__name__, _elapsed_ms(start))

        if response.is_success:
            return ProbeOutcome.up(url, response.status_code, _elapsed_ms(start))

        if response.ok and response.status_code is not None:
            if not MIN_STATUS_CODE <= response.status_code <= MAX_STATUS_CODE:
                # e.g. 999 from bot-blocking edges; not a recordable HTTP status
                return ProbeOutcome.down(
                    url,
                    f"invalid status code {response.status_code}",
                    _elapsed_ms(start),
                )
            return ProbeOutcome.down(
                url,
                f"HTTP {response.status_code}",
                _elapsed_ms(start),
                status_code=response.status_code,
            )

        error = response.error_message or response.error_type or "Request failed"
        return ProbeOutcome.down(url, error, _elapsed_ms(start))
