# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL helpers shared by descriptors and the executor."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode, urlsplit, urlunsplit


def is_absolute_url(url: str) -> bool:
    """Return True when the URL parses and carries both a scheme and a host."""
    try:
        parts = urlsplit(str(url or "").strip())
    except ValueError:
        return False
    return bool(parts.scheme and parts.netloc)


def append_query(url: str, params: Mapping[str, Any]) -> str:
    """
    Append mapping entries to the URL query string, keeping any existing query.

    Values are stringified; booleans follow JSON spelling so `{"a": True}` becomes `a=true`.
    """
    if not params:
        return url
    pairs = [(str(key), _query_value(value)) for key, value in params.items()]
    parts = urlsplit(url)
    query = urlencode(pairs)
    if parts.query:
        query = f"{parts.query}&{query}"
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def _query_value(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


__all__ = ["append_query", "is_absolute_url"]
