# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Header normalization utilities.

HTTP header field names are case-insensitive (RFC 9110). Descriptors keep the caller's
spelling, so every lookup here compares names case-insensitively.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


def _coerce_headers_mapping(headers: Any) -> Mapping[object, object] | None:
    """
    Best-effort coercion of "dict-like" header containers into a Mapping.

    Accepts plain dicts, httpx.Headers and iterable-of-pairs.
    """
    if not headers:
        return None
    if isinstance(headers, Mapping):
        return headers

    items = getattr(headers, "items", None)
    if callable(items):
        return dict(items())

    try:
        return dict(headers)
    except (TypeError, ValueError):
        return None


def normalize_headers(headers: Mapping[object, object] | None) -> dict[str, str]:
    """Return a copy of a header mapping with string names and values, dropping empty names."""
    coerced = _coerce_headers_mapping(headers)
    if not coerced:
        return {}
    out: dict[str, str] = {}
    for key, value in coerced.items():
        if key is None:
            continue
        name = str(key).strip()
        if not name:
            continue
        out[name] = "" if value is None else str(value)
    return out


def has_header(headers: Mapping[object, object] | None, name: str) -> bool:
    """Return True when a header with this name is present, ignoring case."""
    coerced = _coerce_headers_mapping(headers)
    if not coerced or not name:
        return False
    lower = name.lower()
    return any(key is not None and str(key).lower() == lower for key in coerced)


def header_value(headers: Mapping[object, object] | None, name: str, default: str = "") -> str:
    """
    Return a header value using case-insensitive key matching.

    Fast-paths common key casings before falling back to a full scan.
    """
    if not headers or not name:
        return default

    coerced = _coerce_headers_mapping(headers)
    if not coerced:
        return default

    lower = str(name).lower()
    for key in (name, lower, lower.title()):
        if key in coerced:
            value = coerced.get(key)
            return default if value is None else str(value).strip()

    for key, value in coerced.items():
        if key is None:
            continue
        if str(key).lower() == lower:
            return default if value is None else str(value).strip()

    return default


def first_values(pairs: Iterable[tuple[str, str]]) -> dict[str, str]:
    """
    Collapse repeated header fields, keeping the first value seen for each name.

    Names are compared case-insensitively; the first spelling seen is kept.
    """
    out: dict[str, str] = {}
    seen: set[str] = set()
    for name, value in pairs:
        if not name:
            continue
        lower = name.lower()
        if lower in seen:
            continue
        seen.add(lower)
        out[name] = value
    return out


__all__ = ["first_values", "has_header", "header_value", "normalize_headers"]
