# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Programmable HttpClient used in tests and offline tooling."""

from __future__ import annotations

from collections.abc import Callable

from ..errors import NetworkError
from .client import HttpClient
from .models import HttpRequest, HttpResponse

Responder = Callable[[HttpRequest], HttpResponse]


class StubHttpClient(HttpClient):
    """Deterministic HttpClient keyed by URL; unknown URLs fail like an unreachable host."""

    def __init__(self, responses: dict[str, HttpResponse | Responder] | None = None):
        self._responses = responses or {}
        self.requests: list[HttpRequest] = []
        self.closed = False

    def add(self, url: str, response: HttpResponse | Responder) -> None:
        self._responses[url] = response

    def request(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        response = self._responses.get(request.url)
        if response is None:
            raise NetworkError(f"No stubbed response configured for {request.url}")
        if callable(response):
            return response(request)
        return response

    def close(self) -> None:
        self.closed = True
