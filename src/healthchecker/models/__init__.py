# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for the health checker."""

from ..http.models import Headers, HttpRequest, HttpResponse
from .outcome import ProbeOutcome, ProbeStatus, dump_batch, load_batch

__all__ = [
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "ProbeOutcome",
    "ProbeStatus",
    "dump_batch",
    "load_batch",
]
