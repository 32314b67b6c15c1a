#!/usr/bin/env python3
"""Build and send a single workflow station hook request."""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

import requests


HOOK_PATH_TEMPLATE = "/api/v1/hook/workflow/{slug}/station/{key}"
DEFAULT_HOOK_DATA: Dict[str, Any] = {"message": "test hook data", "value": 123}


def build_hook_url(base_url: str, slug: str, key: str) -> str:
    """Return the station hook endpoint for a workflow slug and station key."""

    return base_url.rstrip("/") + HOOK_PATH_TEMPLATE.format(slug=slug, key=key)


def build_payload(instance_id: str, data: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    if data is None:
        data = dict(DEFAULT_HOOK_DATA)
    return {"instanceId": instance_id, "data": data}


def parse_data(raw: str) -> Dict[str, Any]:
    """Parse a JSON object given on the command line or via HOOK_DATA."""

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Hook data is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError("Hook data must be a JSON object.")
    return data


def send_hook(url: str, payload: Dict[str, Any], timeout: Optional[float] = None) -> requests.Response:
    """POST the payload as JSON; HTTP error statuses are returned, not raised."""

    headers = {"Content-Type": "application/json"}
    return requests.post(url, headers=headers, data=json.dumps(payload), timeout=timeout)
