# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for the health checker."""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_USER_AGENT = f"http-health-checker/{__version__}"
DEFAULT_TIMEOUT = 10.0
DEFAULT_INTERVAL = 30
DEFAULT_URLS: tuple[str, ...] = (
    "https://httpbin.org/status/200",
    "https://google.com",
    "https://github.com",
)


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class HttpSettings:
    """HTTP client defaults shared by every probe."""

    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    # 3xx responses are reported as DOWN unless redirects are followed.
    allow_redirects: bool = False
    verify_ssl: bool = True

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        timeout = _float_env("HEALTHCHECKER_HTTP_TIMEOUT", cls.timeout)
        if timeout <= 0:
            timeout = cls.timeout
        return cls(
            timeout=timeout,
            user_agent=os.getenv("HEALTHCHECKER_USER_AGENT", cls.user_agent),
            allow_redirects=_bool_env("HEALTHCHECKER_HTTP_REDIRECTS", cls.allow_redirects),
            verify_ssl=_bool_env("HEALTHCHECKER_HTTP_VERIFY_SSL", cls.verify_ssl),
        )


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()
