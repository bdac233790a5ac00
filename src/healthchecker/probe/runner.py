# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Concurrent fan-out over a URL list."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from ..models import ProbeOutcome
from .prober import HttpProber

logger = logging.getLogger(__name__)


class FanOutRunner:
    """Probes every URL concurrently and returns outcomes in input order."""

    def __init__(self, prober: HttpProber):
        self.prober = prober

    async def check_all(self, urls: Sequence[str]) -> list[ProbeOutcome]:
        if not urls:
            return []
        # gather schedules every probe before awaiting and keeps argument order
        outcomes = await asyncio.gather(*(self.prober.probe(url) for url in urls))
        up = sum(1 for outcome in outcomes if outcome.is_up)
        logger.info("batch complete: %d up, %d down", up, len(outcomes) - up)
        return list(outcomes)
