# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import socket
import ssl as ssl_module
from enum import Enum

import httpx


class ErrorCategory(str, Enum):
    INVALID_REQUEST = "INVALID_REQUEST"
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    PROTOCOL_ERROR = "PROTOCOL_ERROR"
    INVALID_URL = "INVALID_URL"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class RequestError(Exception):
    """Base class for failures raised by RequestExecutor."""

    category = ErrorCategory.UNKNOWN_ERROR

    def __init__(self, message: str, *, category: ErrorCategory | None = None):
        super().__init__(message)
        self.message = message
        if category is not None:
            self.category = category


class InvalidRequest(RequestError):
    """Missing or malformed request input, detected before any network activity."""

    category = ErrorCategory.INVALID_REQUEST


class MissingUrl(InvalidRequest):
    """No URL was supplied."""

    def __init__(self, message: str = "URL is required"):
        super().__init__(message)


class NetworkError(RequestError):
    """Transport-level failure; the message is the underlying cause's text."""

    @classmethod
    def from_exception(cls, exc: BaseException) -> NetworkError:
        message = str(exc) or type(exc).__name__
        return cls(message, category=categorize_exception(exc))


class BridgeRejection(Exception):
    """Rejected plugin call; the originating RequestError is chained as __cause__."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.

    httpx wraps socket and TLS errors (via httpcore), so the whole
    ``__cause__``/``__context__`` chain is inspected for them.
    """
    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, (httpx.InvalidURL, httpx.UnsupportedProtocol)):
        return ErrorCategory.INVALID_URL

    if isinstance(exc, (httpx.RemoteProtocolError, httpx.LocalProtocolError)):
        return ErrorCategory.PROTOCOL_ERROR

    chain = _exception_chain(exc)
    if any(isinstance(item, (ssl_module.SSLError, ssl_module.CertificateError)) for item in chain):
        return ErrorCategory.SSL_ERROR

    if any(isinstance(item, socket.gaierror) for item in chain):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, (httpx.NetworkError, httpx.ProxyError, ConnectionError)):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


def _exception_chain(exc: BaseException) -> list[BaseException]:
    """Return exc followed by every exception reachable through __cause__ and __context__."""
    chain: list[BaseException] = []
    pending: list[BaseException] = [exc]
    while pending:
        current = pending.pop(0)
        if any(current is seen for seen in chain):
            continue
        chain.append(current)
        for linked in (current.__cause__, current.__context__):
            if linked is not None:
                pending.append(linked)
    return chain


def error_category_to_reason(category: ErrorCategory | None) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorCategory.INVALID_REQUEST: "Invalid request",
        ErrorCategory.TIMEOUT: "Network timeout",
        ErrorCategory.SSL_ERROR: "TLS/certificate issue",
        ErrorCategory.CONNECTION_ERROR: "Network connectivity issue",
        ErrorCategory.DNS_ERROR: "DNS resolution failure",
        ErrorCategory.PROTOCOL_ERROR: "Malformed HTTP exchange",
        ErrorCategory.INVALID_URL: "Unusable URL",
        ErrorCategory.UNKNOWN_ERROR: "Network error",
        None: "",
    }
    return mapping.get(category, "Network error")


__all__ = [
    "BridgeRejection",
    "ErrorCategory",
    "InvalidRequest",
    "MissingUrl",
    "NetworkError",
    "RequestError",
    "categorize_exception",
    "error_category_to_reason",
]
