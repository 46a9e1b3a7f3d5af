# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP client exports."""

from .adapters import StubHttpClient
from .body import decode_body, encode_body, negotiate_data
from .client import HttpClient, create_default_http_client
from .headers import first_values, has_header, header_value, normalize_headers
from .httpx_client import HttpxClient
from .models import (
    HTTP_METHODS,
    Headers,
    HttpRequest,
    HttpResponse,
    RequestDescriptor,
    ResponseDescriptor,
)

__all__ = [
    "HTTP_METHODS",
    "Headers",
    "HttpClient",
    "HttpxClient",
    "HttpRequest",
    "HttpResponse",
    "RequestDescriptor",
    "ResponseDescriptor",
    "StubHttpClient",
    "create_default_http_client",
    "decode_body",
    "encode_body",
    "first_values",
    "has_header",
    "header_value",
    "negotiate_data",
    "normalize_headers",
]
