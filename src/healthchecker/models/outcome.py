# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe outcome domain model."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

TIMESTAMP_DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S UTC"


class ProbeStatus(str, Enum):
    UP = "UP"
    DOWN = "DOWN"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _parse_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        parsed = value
    else:
        raw = str(value or "").strip()
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        parsed = datetime.fromisoformat(raw)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


@dataclass(frozen=True)
class ProbeOutcome:
    """
    Result of probing one URL at one instant.

    ``UP`` always carries a 2xx ``status_code`` and no ``error``. ``DOWN`` always
    carries an ``error``; its ``status_code`` is set only when a non-2xx
    response was received. Violations raise ``ValueError`` at construction.
    Prefer the ``up``/``down`` constructors over building instances directly.
    """

    url: str
    status: ProbeStatus
    response_time_ms: int
    status_code: int | None = None
    error: str | None = None
    timestamp: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        status = ProbeStatus(self.status)
        if status is not self.status:
            object.__setattr__(self, "status", status)

        if self.response_time_ms < 0:
            raise ValueError(f"response_time_ms must be non-negative, got {self.response_time_ms}")
        if self.timestamp.tzinfo is None:
            raise ValueError("timestamp must be timezone-aware (UTC)")
        if self.status_code is not None and not 100 <= self.status_code <= 599:
            raise ValueError(f"status_code out of range: {self.status_code}")

        if status is ProbeStatus.UP:
            if self.status_code is None or not 200 <= self.status_code <= 299:
                raise ValueError(f"UP outcome requires a 2xx status_code, got {self.status_code}")
            if self.error is not None:
                raise ValueError("UP outcome must not carry an error")
        else:
            if not self.error:
                raise ValueError("DOWN outcome requires an error message")
            if self.status_code is not None and 200 <= self.status_code <= 299:
                raise ValueError(f"DOWN outcome cannot carry a 2xx status_code ({self.status_code})")

    @classmethod
    def up(cls, url: str, status_code: int, response_time_ms: int) -> ProbeOutcome:
        return cls(url=url, status=ProbeStatus.UP, status_code=status_code, response_time_ms=response_time_ms)

    @classmethod
    def down(
        cls,
        url: str,
        error: str,
        response_time_ms: int,
        *,
        status_code: int | None = None,
    ) -> ProbeOutcome:
        return cls(
            url=url,
            status=ProbeStatus.DOWN,
            status_code=status_code,
            error=error,
            response_time_ms=response_time_ms,
        )

    @property
    def is_up(self) -> bool:
        return self.status is ProbeStatus.UP

    @property
    def display_timestamp(self) -> str:
        return self.timestamp.strftime(TIMESTAMP_DISPLAY_FORMAT)

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "status": self.status.value,
            "status_code": self.status_code,
            "response_time_ms": self.response_time_ms,
            "timestamp": self.timestamp.isoformat(),
            "error": self.error,
        }

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ProbeOutcome:
        status_code = data.get("status_code")
        return cls(
            url=str(data.get("url") or ""),
            status=ProbeStatus(str(data.get("status") or "").upper()),
            status_code=int(status_code) if status_code is not None else None,
            response_time_ms=int(data.get("response_time_ms") or 0),
            timestamp=_parse_timestamp(data.get("timestamp")),
            error=data.get("error"),
        )


def dump_batch(outcomes: Iterable[ProbeOutcome]) -> str:
    """Serialize a batch as a pretty-printed JSON array."""
    return json.dumps([outcome.to_dict() for outcome in outcomes], indent=2)


def load_batch(text: str) -> list[ProbeOutcome]:
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError("expected a JSON array of outcomes")
    return [ProbeOutcome.from_mapping(item) for item in data]
