"""Decoding of API responses.

Every service method funnels its :class:`httpx.Response` through
:func:`response_to_json`, so the decoding rules live in one place.
"""

from __future__ import annotations

import json
from typing import Any

import httpx

from apsis.exceptions import DecodeError


def response_to_json(response: httpx.Response) -> Any:
    """Parse the body of *response* as JSON.

    The result is returned unchanged: a ``dict``, ``list`` or primitive,
    exactly as the API sent it. An empty body decodes to ``None``.

    Raises:
        DecodeError: If the body is not valid JSON.
    """
    if not response.content:
        return None
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        snippet = response.text[:200] if response.text else ""
        raise DecodeError(
            f"Response (HTTP {response.status_code}) is not valid JSON: {exc}. "
            f"Body starts with: {snippet!r}"
        ) from exc
