# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from .prober import HttpProber
from .runner import FanOutRunner

__all__ = ["FanOutRunner", "HttpProber"]
