# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Single-round-trip request execution.

RequestExecutor turns a RequestDescriptor into one wire request, runs it through an
HttpClient and negotiates the response body into a ResponseDescriptor. It blocks for
the duration of the round trip and holds no state between calls; callers that must not
block run it inside their own executor (see HttpBridge.submit).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from .config import HttpSettings, load_http_settings
from .errors import NetworkError, RequestError
from .http.body import JSON_CONTENT_TYPE, decode_body, encode_body, negotiate_data
from .http.client import HttpClient, create_default_http_client
from .http.headers import first_values, has_header, header_value
from .http.models import Headers, HttpRequest, RequestDescriptor, ResponseDescriptor
from .http.url import append_query

logger = logging.getLogger(__name__)


class RequestExecutor:
    def __init__(self, http_client: HttpClient | None = None, settings: HttpSettings | None = None):
        self.settings = settings or load_http_settings()
        self.http_client = http_client or create_default_http_client(self.settings)

    def execute(self, descriptor: RequestDescriptor) -> ResponseDescriptor:
        """Perform one round trip; raises InvalidRequest or NetworkError."""
        request = self.build_request(descriptor)
        logger.debug("%s %s", request.method, request.url)
        try:
            response = self.http_client.request(request)
        except RequestError:
            raise
        except Exception as exc:  # noqa: BLE001
            raise NetworkError.from_exception(exc) from exc

        text = decode_body(response.content, join_lines=self.settings.join_body_lines)
        headers = first_values(response.headers)
        data = negotiate_data(text, header_value(headers, "Content-Type") or None)
        logger.debug("%s %s -> %s (%d bytes)", request.method, request.url, response.status_code, len(response.content))
        return ResponseDescriptor(status=response.status_code, headers=headers, data=data)

    def build_request(self, descriptor: RequestDescriptor) -> HttpRequest:
        headers: Headers = dict(descriptor.headers)
        if not has_header(headers, "User-Agent"):
            headers["User-Agent"] = self.settings.user_agent
        if descriptor.method != "GET" and not has_header(headers, "Content-Type"):
            headers["Content-Type"] = JSON_CONTENT_TYPE

        url = descriptor.url
        content = None
        if descriptor.sends_body:
            content = encode_body(descriptor.body)
        elif (
            descriptor.method == "GET"
            and self.settings.get_data_as_query
            and isinstance(descriptor.body, Mapping)
        ):
            url = append_query(url, descriptor.body)

        return HttpRequest(
            url=url,
            method=descriptor.method,
            headers=headers,
            content=content,
            allow_redirects=self.settings.allow_redirects,
        )

    def close(self) -> None:
        self.http_client.close()


__all__ = ["RequestExecutor"]
