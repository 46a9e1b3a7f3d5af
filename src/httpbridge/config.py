# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for httpbridge."""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_USER_AGENT = f"httpbridge/{__version__}"


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class HttpSettings:
    """Transport and decoding defaults."""

    timeout: float = 5.0
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = True
    # Strip every body line and concatenate them; False decodes the body verbatim.
    join_body_lines: bool = True
    get_data_as_query: bool = False
    max_workers: int = 4

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        max_workers = _int_env("HTTPBRIDGE_MAX_WORKERS", cls.max_workers)
        if max_workers <= 0:
            max_workers = cls.max_workers
        return cls(
            timeout=_float_env("HTTPBRIDGE_HTTP_TIMEOUT", cls.timeout),
            user_agent=os.getenv("HTTPBRIDGE_USER_AGENT", cls.user_agent),
            allow_redirects=_bool_env("HTTPBRIDGE_HTTP_REDIRECTS", cls.allow_redirects),
            join_body_lines=_bool_env("HTTPBRIDGE_JOIN_BODY_LINES", cls.join_body_lines),
            get_data_as_query=_bool_env("HTTPBRIDGE_GET_DATA_AS_QUERY", cls.get_data_as_query),
            max_workers=max_workers,
        )


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()
