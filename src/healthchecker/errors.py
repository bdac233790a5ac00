# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import asyncio
import socket
import ssl as ssl_module
from collections.abc import Iterator
from enum import Enum
from typing import Optional

import httpx


class ConfigurationError(Exception):
    """Raised when the checker cannot be set up from the given options."""


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    INVALID_URL = "INVALID_URL"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    NONE = "NONE"


def _exception_chain(exc: BaseException) -> Iterator[BaseException]:
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.
    """
    if isinstance(exc, (httpx.TimeoutException, asyncio.TimeoutError)):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, (httpx.InvalidURL, httpx.UnsupportedProtocol)):
        return ErrorCategory.INVALID_URL

    # httpx wraps httpcore errors, which wrap the resolver/TLS error
    chain = list(_exception_chain(exc))
    if any(isinstance(item, (socket.gaierror, socket.herror)) for item in chain):
        return ErrorCategory.DNS_ERROR

    if any(isinstance(item, (ssl_module.SSLError, ssl_module.CertificateError)) for item in chain):
        return ErrorCategory.SSL_ERROR

    if isinstance(
        exc, (httpx.ConnectError, httpx.RemoteProtocolError, httpx.NetworkError, httpx.ProxyError)
    ):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (ConnectionError, ConnectionRefusedError, ConnectionResetError)):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


def error_category_to_reason(category: Optional[ErrorCategory]) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorCategory.TIMEOUT: "Network timeout during probe",
        ErrorCategory.SSL_ERROR: "TLS/certificate issue",
        ErrorCategory.CONNECTION_ERROR: "Network connectivity issue",
        ErrorCategory.DNS_ERROR: "DNS resolution failure",
        ErrorCategory.INVALID_URL: "Invalid or unsupported URL",
        ErrorCategory.UNKNOWN_ERROR: "Network error during probe",
        ErrorCategory.NONE: "",
        None: "",
    }
    return mapping.get(category, "Probe failed due to network error")
