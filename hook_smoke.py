#!/usr/bin/env python3
"""Smoke-test a workflow station hook by POSTing one payload and printing the outcome."""

from __future__ import annotations

import argparse
import json
import os
from typing import Any, Dict, List, Optional

import requests

from hook_send import build_hook_url, build_payload, parse_data, send_hook

BASE_URL_ENV = "HOOK_BASE_URL"
SLUG_ENV = "HOOK_SLUG"
KEY_ENV = "HOOK_STATION_KEY"
INSTANCE_ID_ENV = "HOOK_INSTANCE_ID"
DATA_ENV = "HOOK_DATA"
TIMEOUT_ENV = "HOOK_TIMEOUT"
NO_COLOR_ENV = "NO_COLOR"
DEFAULT_BASE_URL = "http://localhost:3001"
DEFAULT_SLUG = "my-workflow"
DEFAULT_KEY = "s1"
DEFAULT_INSTANCE_ID = "550e8400-e29b-41d4-a716-446655440000"

CYAN = "\x1b[36m"
GRAY = "\x1b[90m"
GREEN = "\x1b[32m"
RED = "\x1b[31m"
YELLOW = "\x1b[33m"
RESET = "\x1b[0m"


def _paint(text: str, code: str, color: bool) -> str:
    if not color:
        return text
    return f"{code}{text}{RESET}"


def _pretty(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


def _report_http_error(response: requests.Response, color: bool) -> None:
    status = f"{response.status_code} {response.reason or ''}".strip()
    print(_paint(f"Error: HTTP {status}", RED, color))
    # error bodies are opaque text, even when the server sends JSON
    if response.text:
        print(_paint(f"Response body: {response.text}", YELLOW, color))


def run(
    base_url: str = DEFAULT_BASE_URL,
    slug: str = DEFAULT_SLUG,
    key: str = DEFAULT_KEY,
    instance_id: str = DEFAULT_INSTANCE_ID,
    data: Optional[Dict[str, Any]] = None,
    timeout: Optional[float] = None,
    color: bool = True,
) -> None:
    """Send one hook request and print which of the three outcomes occurred.

    Transport failures and non-2xx responses are reported and swallowed. A 2xx
    response whose body is not JSON raises ``requests.exceptions.JSONDecodeError``.
    """

    url = build_hook_url(base_url, slug, key)
    payload = build_payload(instance_id, data)

    print(_paint(f"Sending POST request to: {url}", CYAN, color))
    print(_paint(f"Body: {_pretty(payload)}", GRAY, color))

    try:
        response = send_hook(url, payload, timeout=timeout)
    except requests.RequestException as exc:
        print(_paint(f"Error: {exc}", RED, color))
        return

    if not 200 <= response.status_code < 300:
        _report_http_error(response, color)
        return

    response_data = response.json()
    print(_paint("Success! Response:", GREEN, color))
    print(_pretty(response_data))


def _data_arg(raw: str) -> Dict[str, Any]:
    try:
        return parse_data(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _timeout_arg(raw: str) -> float:
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Timeout must be a number of seconds: {raw!r}") from exc
    if not 0 < timeout < float("inf"):
        raise argparse.ArgumentTypeError("Timeout must be greater than zero.")
    return timeout


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="POST a test payload to a workflow station hook.")
    parser.add_argument(
        "--base-url",
        default=os.getenv(BASE_URL_ENV, DEFAULT_BASE_URL),
        help="Workflow API base URL (default: %(default)s, overridable via HOOK_BASE_URL env).",
    )
    parser.add_argument(
        "--slug",
        default=os.getenv(SLUG_ENV, DEFAULT_SLUG),
        help="Workflow slug used in the hook path. Defaults to %(default)s or HOOK_SLUG env.",
    )
    parser.add_argument(
        "--key",
        default=os.getenv(KEY_ENV, DEFAULT_KEY),
        help="Station key used in the hook path. Defaults to %(default)s or HOOK_STATION_KEY env.",
    )
    parser.add_argument(
        "--instance-id",
        default=os.getenv(INSTANCE_ID_ENV, DEFAULT_INSTANCE_ID),
        help="Workflow instance UUID sent as instanceId. Defaults to HOOK_INSTANCE_ID env.",
    )
    parser.add_argument(
        "--data",
        type=_data_arg,
        default=os.getenv(DATA_ENV),
        help="JSON object sent as the payload's data field. Defaults to HOOK_DATA env or a fixed test object.",
    )
    parser.add_argument(
        "--timeout",
        type=_timeout_arg,
        default=os.getenv(TIMEOUT_ENV),
        help="Request timeout in seconds (or set HOOK_TIMEOUT). No timeout when omitted.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        default=bool(os.getenv(NO_COLOR_ENV)),
        help="Print without ANSI colors (or set NO_COLOR).",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    run(
        base_url=args.base_url,
        slug=args.slug,
        key=args.key,
        instance_id=args.instance_id,
        data=args.data,
        timeout=args.timeout,
        color=not args.no_color,
    )


if __name__ == "__main__":
    main()
