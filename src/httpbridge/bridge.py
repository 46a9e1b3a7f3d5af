# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level facade consumed by the plugin bridging layer."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from contextlib import suppress
from typing import Any

from .config import HttpSettings, load_http_settings
from .errors import BridgeRejection, MissingUrl, RequestError
from .executor import RequestExecutor
from .http.client import HttpClient
from .http.models import RequestDescriptor, ResponseDescriptor

logger = logging.getLogger(__name__)

REJECTION_PREFIX = "Error making HTTP request"
CALL_NAMES = ("request", "get", "post")


class HttpBridge:
    """
    Entry points exposed to the host shell: `request`, `get`, `post`.

    The typed methods raise RequestError subclasses. `handle_call` and `submit` speak the
    plugin ABI instead: option mappings in, plain payload dicts out, BridgeRejection on failure.
    """

    def __init__(
        self,
        http_client: HttpClient | None = None,
        *,
        settings: HttpSettings | None = None,
        executor: Executor | None = None,
    ):
        self.settings = settings or load_http_settings()
        self.request_executor = RequestExecutor(http_client, self.settings)
        self._executor = executor
        self._owns_executor = executor is None

    def request(
        self,
        url: str,
        method: str = "GET",
        headers: Mapping[str, str] | None = None,
        data: Any = None,
    ) -> ResponseDescriptor:
        descriptor = RequestDescriptor(url=url, method=method or "GET", headers=headers or {}, body=data)
        return self.request_executor.execute(descriptor)

    def get(self, url: str, headers: Mapping[str, str] | None = None) -> ResponseDescriptor:
        return self.request(url, "GET", headers)

    def post(self, url: str, headers: Mapping[str, str] | None = None, data: Any = None) -> ResponseDescriptor:
        return self.request(url, "POST", headers, data)

    def handle_call(self, name: str, options: Mapping[str, Any] | None) -> dict[str, Any]:
        """Run one plugin call synchronously and return its resolved payload."""
        if name not in CALL_NAMES:
            raise BridgeRejection(f"Unknown method: {name}")
        forced = None if name == "request" else name.upper()
        try:
            descriptor = RequestDescriptor.from_options(options, method=forced)
            response = self.request_executor.execute(descriptor)
        except MissingUrl as exc:
            logger.error("Rejected HTTP request: %s", exc.message)
            raise BridgeRejection(exc.message) from exc
        except RequestError as exc:
            logger.error("%s", REJECTION_PREFIX, exc_info=exc)
            raise BridgeRejection(f"{REJECTION_PREFIX}: {exc.message}") from exc
        return response.to_payload()

    def submit(self, name: str, options: Mapping[str, Any] | None) -> Future:
        """Dispatch `handle_call` onto the worker executor; the future resolves to the payload."""
        return self._get_executor().submit(self.handle_call, name, dict(options or {}))

    def _get_executor(self) -> Executor:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=self.settings.max_workers,
                thread_name_prefix="httpbridge",
            )
        return self._executor

    def close(self) -> None:
        if self._owns_executor and self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
        with suppress(Exception):
            self.request_executor.close()

    def __enter__(self) -> HttpBridge:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()


__all__ = ["CALL_NAMES", "HttpBridge", "REJECTION_PREFIX"]
