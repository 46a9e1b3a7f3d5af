# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Request body encoding, response body decoding and content negotiation."""

from __future__ import annotations

import json
import logging
import re
from typing import Any

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")
# Control characters and space: what a line trim removes, leaving Unicode spaces such as NBSP.
_TRIM_CHARS = "".join(map(chr, range(0x21)))


def encode_body(body: Any) -> bytes | None:
    """
    Serialize a request body to UTF-8 bytes.

    Strings are encoded as-is and bytes pass through; every other value is JSON-encoded
    compactly (`{"a":1}`), matching what JSON bodies look like on the wire from mobile clients.
    """
    if body is None:
        return None
    if isinstance(body, (bytes, bytearray, memoryview)):
        return bytes(body)
    if isinstance(body, str):
        return body.encode("utf-8")
    return json.dumps(body, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def decode_body(content: bytes, *, join_lines: bool = True) -> str:
    """
    Decode a response body as UTF-8.

    With `join_lines` each line is trimmed of control characters and spaces, and the lines
    are concatenated with no separator, so embedded newlines and edge whitespace are lost.
    Existing consumers depend on that shape; pass `join_lines=False` for the verbatim text.
    """
    text = content.decode("utf-8", errors="replace")
    if not join_lines:
        return text
    return "".join(line.strip(_TRIM_CHARS) for line in _LINE_BREAK_RE.split(text))


def negotiate_data(text: str, content_type: str | None) -> dict[str, Any]:
    """
    Turn a decoded body into response `data`.

    A JSON object under an `application/json` content type yields its top-level
    pairs. Anything else, including unparseable JSON and non-object JSON values,
    yields `{"text": <body>}`. Never raises.
    """
    if content_type and JSON_CONTENT_TYPE in content_type:
        try:
            parsed = json.loads(text)
        except ValueError:
            logger.debug("Response labelled %s is not valid JSON; returning text", content_type)
            return {"text": text}
        if isinstance(parsed, dict):
            return dict(parsed.items())
        logger.debug("JSON response is %s, not an object; returning text", type(parsed).__name__)
    return {"text": text}


__all__ = ["JSON_CONTENT_TYPE", "decode_body", "encode_body", "negotiate_data"]
