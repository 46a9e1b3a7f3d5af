# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpbridge CLI."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from ..bridge import HttpBridge
from ..config import HttpSettings, load_http_settings
from ..errors import BridgeRejection, RequestError, error_category_to_reason
from ..http import create_default_http_client
from ..http.models import HTTP_METHODS
from ..log import setup_logging

CLI_TEXT_TRUNCATION_BYTES = 4096


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Send one HTTP request and print status, headers and data")
    parser.add_argument("url", help="Absolute request URL")
    parser.add_argument(
        "-X",
        "--method",
        default="GET",
        type=str.upper,
        choices=sorted(HTTP_METHODS),
        help="HTTP method (default: GET)",
    )
    parser.add_argument(
        "-H",
        "--header",
        action="append",
        default=[],
        metavar="NAME: VALUE",
        help="Request header; may be repeated",
    )
    parser.add_argument("-d", "--data", help="Request body as JSON (sent only for non-GET methods)")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output the resolved payload as JSON instead of a summary",
    )
    parser.add_argument(
        "--raw-body",
        action="store_true",
        help="Decode the response body verbatim instead of joining stripped lines",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: HTTPBRIDGE_LOG_LEVEL or WARNING)")
    return parser


def _parse_headers(values: list[str]) -> dict[str, str]:
    headers: dict[str, str] = {}
    for item in values:
        name, sep, value = item.partition(":")
        if not sep or not name.strip():
            raise ValueError(f"Malformed header (expected 'Name: value'): {item}")
        headers[name.strip()] = value.strip()
    return headers


def _parse_data(raw: str | None) -> Any:
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def _truncate_text_bytes(text: str, max_bytes: int) -> str:
    raw = text.encode("utf-8")
    if len(raw) <= max_bytes:
        return text
    suffix = "...[truncated]"
    keep = max_bytes - len(suffix.encode("utf-8"))
    if keep <= 0:
        return suffix[:max_bytes]
    return raw[:keep].decode("utf-8", errors="ignore") + suffix


def _print_json(payload: dict[str, Any]) -> None:
    json.dump(payload, sys.stdout, indent=2, sort_keys=True, ensure_ascii=False)
    sys.stdout.write("\n")


def _pretty_print(payload: dict[str, Any]) -> None:
    print(f"Status: {payload.get('status')}")
    headers = payload.get("headers") or {}
    for name in sorted(headers, key=str.lower):
        print(f"{name}: {headers[name]}")
    print()
    data = payload.get("data") or {}
    if set(data) == {"text"}:
        print(_truncate_text_bytes(str(data["text"]), CLI_TEXT_TRUNCATION_BYTES))
    else:
        print(_truncate_text_bytes(json.dumps(data, indent=2, ensure_ascii=False), CLI_TEXT_TRUNCATION_BYTES))


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        headers = _parse_headers(args.header)
    except ValueError as exc:
        parser.error(str(exc))

    settings: HttpSettings = load_http_settings()
    if args.raw_body:
        settings.join_body_lines = False

    http_client = create_default_http_client(settings)
    options = {"url": args.url, "method": args.method, "headers": headers, "data": _parse_data(args.data)}

    with HttpBridge(http_client, settings=settings) as bridge:
        try:
            payload = bridge.handle_call("request", options)
        except BridgeRejection as exc:
            cause = exc.__cause__
            reason = error_category_to_reason(cause.category) if isinstance(cause, RequestError) else ""
            print(f"{exc.message} ({reason})" if reason else exc.message, file=sys.stderr)
            return 1

    if args.json:
        _print_json(payload)
    else:
        _pretty_print(payload)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
