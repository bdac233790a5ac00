# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""JSON file sink: overwrites the target with the latest batch."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from ..models import ProbeOutcome, dump_batch

logger = logging.getLogger(__name__)


class JsonFileReporter:
    def __init__(self, path: str | Path, stream: TextIO | None = None):
        self.path = Path(path)
        self.stream = stream or sys.stdout

    def report(self, outcomes: Sequence[ProbeOutcome]) -> bool:
        """Write the batch; failures are logged and reported as ``False``."""
        try:
            self.path.write_text(dump_batch(outcomes) + "\n", encoding="utf-8")
        except (OSError, TypeError, ValueError) as exc:
            logger.error("Failed to save results to %s: %s", self.path, exc)
            return False
        print(f"Results saved to {self.path}", file=self.stream)
        return True
