from __future__ import annotations

import os
from typing import Any, Dict, Optional

import requests

from .models import LookupFailure

DEFAULT_TIMEOUT = 8.0

_UA = "MealDictator/1.0 (+https://meal-dictator.herokuapp.com)"


def default_timeout() -> float:
    raw = (os.getenv("MEAL_DICTATOR_HTTP_TIMEOUT") or "").strip()
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        return DEFAULT_TIMEOUT
    return value if value > 0 else DEFAULT_TIMEOUT


def get_json(url: str, params: Optional[Dict[str, str]] = None, timeout: Optional[float] = None) -> Dict[str, Any]:
    """GET ``url`` and return the decoded JSON object.

    Any transport error, non-2xx status, or body that isn't a JSON object
    is reported as :class:`LookupFailure`.
    """
    try:
        r = requests.get(
            url,
            params=params,
            headers={"User-Agent": _UA, "Accept": "application/json"},
            timeout=timeout or default_timeout(),
        )
        r.raise_for_status()
    except requests.RequestException as exc:
        raise LookupFailure(f"request to {url} failed: {exc}") from exc

    try:
        payload = r.json()
    except ValueError as exc:
        raise LookupFailure(f"invalid JSON from {url}") from exc
    if not isinstance(payload, dict):
        raise LookupFailure(f"unexpected JSON from {url}")
    return payload


__all__ = ["DEFAULT_TIMEOUT", "default_timeout", "get_json"]
