# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
httpbridge package entrypoint.

Generic HTTP request capability for host application shells: a request descriptor goes
in, one blocking round trip is made, and status, first-value headers and negotiated body
data come back. Transport is abstracted behind an injectable client interface, and
requests and responses are modeled as immutable dataclasses.
"""

from .bridge import HttpBridge
from .config import HttpSettings, load_http_settings
from .errors import BridgeRejection, ErrorCategory, InvalidRequest, MissingUrl, NetworkError, RequestError
from .executor import RequestExecutor
from .http import (
    HttpClient,
    HttpxClient,
    RequestDescriptor,
    ResponseDescriptor,
    StubHttpClient,
    create_default_http_client,
)
from .log import setup_logging
from .version import __version__

__all__ = [
    "BridgeRejection",
    "ErrorCategory",
    "HttpBridge",
    "HttpClient",
    "HttpSettings",
    "HttpxClient",
    "InvalidRequest",
    "MissingUrl",
    "NetworkError",
    "RequestDescriptor",
    "RequestError",
    "RequestExecutor",
    "ResponseDescriptor",
    "StubHttpClient",
    "create_default_http_client",
    "load_http_settings",
    "setup_logging",
    "__version__",
]
