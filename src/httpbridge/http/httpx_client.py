# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementation."""

from __future__ import annotations

import httpx

from ..config import HttpSettings, load_http_settings
from ..errors import NetworkError
from .client import HttpClient
from .models import HttpRequest, HttpResponse


class HttpxClient(HttpClient):
    """Synchronous httpx client wrapper."""

    def __init__(self, settings: HttpSettings | None = None, client: httpx.Client | None = None):
        self.settings = settings or load_http_settings()
        self._client = client or httpx.Client(
            follow_redirects=self.settings.allow_redirects,
            timeout=self.settings.timeout,
            limits=httpx.Limits(max_keepalive_connections=0),
        )

    def request(self, request: HttpRequest) -> HttpResponse:
        try:
            with self._client.stream(
                request.method,
                request.url,
                headers=request.headers,
                content=request.content,
                timeout=self.settings.timeout,
                follow_redirects=request.allow_redirects,
            ) as resp:
                content = resp.read()
                encoding = resp.headers.encoding
                raw_headers = [
                    (name.decode(encoding), value.decode(encoding)) for name, value in resp.headers.raw
                ]
                return HttpResponse(
                    status_code=resp.status_code,
                    headers=raw_headers,
                    content=content,
                    url=str(resp.url),
                )
        except (httpx.HTTPError, httpx.InvalidURL, OSError) as exc:
            raise NetworkError.from_exception(exc) from exc

    def close(self) -> None:
        self._client.close()
