# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Batch reporting: terminal output plus an optional JSON file."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from ..models import ProbeOutcome
from .json_file import JsonFileReporter
from .terminal import TerminalReporter


class Reporter:
    """Fans a batch out to the terminal sink and, when configured, the file sink."""

    def __init__(
        self,
        terminal: TerminalReporter | None = None,
        json_file: JsonFileReporter | None = None,
    ):
        self.terminal = terminal or TerminalReporter()
        self.json_file = json_file

    @classmethod
    def build(cls, output: str | Path | None = None) -> Reporter:
        terminal = TerminalReporter()
        json_file = JsonFileReporter(output, stream=terminal.stream) if output is not None else None
        return cls(terminal, json_file)

    def report(self, outcomes: Sequence[ProbeOutcome]) -> None:
        self.terminal.report(outcomes)
        if self.json_file is not None:
            self.json_file.report(outcomes)


__all__ = ["JsonFileReporter", "Reporter", "TerminalReporter"]
