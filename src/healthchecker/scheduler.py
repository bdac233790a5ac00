# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Batch loop: run once, or sleep a fixed interval between batches."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Protocol

from .models import ProbeOutcome

logger = logging.getLogger(__name__)


class BatchRunner(Protocol):
    async def check_all(self, urls: Sequence[str]) -> list[ProbeOutcome]: ...


class BatchSink(Protocol):
    def report(self, outcomes: Sequence[ProbeOutcome]) -> object: ...


async def run_schedule(
    runner: BatchRunner,
    urls: Sequence[str],
    reporter: BatchSink,
    *,
    once: bool = False,
    interval: float = 30,
    sleep: Callable[[float], Awaitable[object]] = asyncio.sleep,
) -> int:
    """
    Drive ``runner`` until stopped and return the number of batches delivered.

    The interval is a sleep between batches, not a fixed period, so a slow
    batch never overlaps the next one. Without ``once`` the loop only ends when
    the surrounding task is cancelled or the process is interrupted.
    """
    batches = 0
    while True:
        outcomes = await runner.check_all(urls)
        try:
            reporter.report(outcomes)
        except Exception:  # noqa: BLE001
            logger.exception("reporter failed for batch %d", batches + 1)
        batches += 1

        if once:
            return batches

        await sleep(interval)
