# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Human-readable batch output."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from typing import TextIO

from ..models import ProbeOutcome, ProbeStatus

RULE_WIDTH = 60

_RESET = "\033[0m"
_STATUS_COLORS = {
    ProbeStatus.UP: "\033[1;32m",
    ProbeStatus.DOWN: "\033[1;31m",
}


def _supports_color(stream: TextIO) -> bool:
    if os.getenv("NO_COLOR") is not None:
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


class TerminalReporter:
    """Prints each batch with a header and one entry per outcome."""

    def __init__(self, stream: TextIO | None = None, color: bool | None = None):
        self.stream = stream or sys.stdout
        self.color = _supports_color(self.stream) if color is None else color

    def _status(self, status: ProbeStatus) -> str:
        if not self.color:
            return status.value
        return f"{_STATUS_COLORS[status]}{status.value}{_RESET}"

    def format_outcome(self, outcome: ProbeOutcome) -> list[str]:
        lines = [
            f"{self._status(outcome.status)} {outcome.url} "
            f"[{outcome.response_time_ms} ms] - {outcome.display_timestamp}"
        ]
        if outcome.error is not None:
            lines.append(f" Error: {outcome.error}")
        if outcome.status_code is not None:
            lines.append(f" Status Code: {outcome.status_code}")
        return lines

    def report(self, outcomes: Sequence[ProbeOutcome]) -> None:
        out = self.stream
        print(file=out)
        print("Health Check Results", file=out)
        print("=" * RULE_WIDTH, file=out)
        for outcome in outcomes:
            for line in self.format_outcome(outcome):
                print(line, file=out)
            print(file=out)
        out.flush()
