# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Request/response data models used across httpbridge."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from ..errors import InvalidRequest, MissingUrl
from .headers import header_value, normalize_headers
from .url import is_absolute_url

Headers = dict[str, str]

HTTP_METHODS = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"})


@dataclass(frozen=True)
class RequestDescriptor:
    """One outgoing request. Validated on construction; never mutated afterwards."""

    url: str
    method: str = "GET"
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Any = None

    def __post_init__(self) -> None:
        url = str(self.url or "").strip()
        if not url:
            raise MissingUrl()
        if not is_absolute_url(url):
            raise InvalidRequest(f"Malformed URL: {url}")

        method = str(self.method or "GET").strip().upper()
        if method not in HTTP_METHODS:
            raise InvalidRequest(f"Unsupported HTTP method: {self.method}")

        object.__setattr__(self, "url", url)
        object.__setattr__(self, "method", method)
        object.__setattr__(self, "headers", MappingProxyType(normalize_headers(self.headers)))
        object.__setattr__(self, "body", copy.deepcopy(self.body))

    def header(self, name: str, default: str = "") -> str:
        return header_value(self.headers, name, default)

    @property
    def sends_body(self) -> bool:
        return self.method != "GET" and self.body is not None

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None, *, method: str | None = None) -> RequestDescriptor:
        """
        Build a descriptor from a plugin-style option mapping (`url`, `method`, `headers`, `data`).

        A `method` argument overrides whatever the mapping carries; the mapping itself is left untouched.
        """
        opts = options or {}
        raw_headers = opts.get("headers") or {}
        if not isinstance(raw_headers, Mapping):
            raise InvalidRequest("headers must be a mapping of name to value")
        return cls(
            url=opts.get("url") or "",
            method=method or opts.get("method") or "GET",
            headers=raw_headers,
            body=opts.get("data"),
        )


@dataclass(frozen=True)
class ResponseDescriptor:
    """Status, first-value headers and negotiated body data of one round trip."""

    status: int
    headers: Mapping[str, str] = field(default_factory=dict)
    data: Any = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    def header(self, name: str, default: str = "") -> str:
        return header_value(self.headers, name, default)

    def to_payload(self) -> dict[str, Any]:
        """Plain-dict form handed back to the bridging layer as the resolved value."""
        return {
            "status": self.status,
            "headers": dict(self.headers),
            "data": copy.deepcopy(self.data),
        }


@dataclass
class HttpRequest:
    """Wire-level request consumed by HttpClient implementations."""

    url: str
    method: str = "GET"
    headers: Headers = field(default_factory=dict)
    content: bytes | None = None
    allow_redirects: bool = True


@dataclass
class HttpResponse:
    """Wire-level response: status, raw header fields (repeats preserved) and body bytes."""

    status_code: int
    headers: list[tuple[str, str]] = field(default_factory=list)
    content: bytes = b""
    url: str | None = None


__all__ = [
    "HTTP_METHODS",
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "RequestDescriptor",
    "ResponseDescriptor",
]
