# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import json

import httpx
import pytest

from httpbridge.config import HttpSettings
from httpbridge.http.httpx_client import HttpxClient


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler):
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            request.read()
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


def echo_handler(request: httpx.Request) -> httpx.Response:
    """Echo the request body back as JSON, like a typical `/echo` endpoint."""
    return httpx.Response(200, headers={"Content-Type": "application/json"}, content=request.content or b"{}")


def routing_handler(request: httpx.Request) -> httpx.Response:
    path = request.url.path
    if path == "/echo":
        return echo_handler(request)
    if path == "/missing":
        return httpx.Response(404, headers={"Content-Type": "text/plain"}, content=b"not found")
    if path == "/broken-json":
        return httpx.Response(200, headers={"Content-Type": "application/json"}, content=b"{invalid json")
    if path == "/server-error":
        body = json.dumps({"error": "boom", "code": 500}).encode()
        return httpx.Response(500, headers={"Content-Type": "application/json"}, content=body)
    if path == "/multi":
        return httpx.Response(
            200,
            headers=[("Content-Type", "text/plain"), ("X-Dup", "first"), ("x-dup", "second")],
            content=b"  line one \n line two  \n",
        )
    if path == "/refused":
        raise httpx.ConnectError("Connection refused", request=request)
    return httpx.Response(200, headers={"Content-Type": "text/plain"}, content=b"ok")


@pytest.fixture
def settings():
    return HttpSettings(user_agent="httpbridge-tests/1.0")


@pytest.fixture
def transport():
    return RecordingTransport(routing_handler)


@pytest.fixture
def http_client(settings, transport):
    client = HttpxClient(settings, client=httpx.Client(transport=transport))
    yield client
    client.close()
