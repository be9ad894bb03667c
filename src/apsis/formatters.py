"""Formatting of values whose on-wire shape differs from their Python type.

Two helpers are shared by the services:

* :func:`format_bool` -- booleans embedded in a URL path segment, which the
  API expects as the literal strings ``"true"`` / ``"false"``.
* :func:`drop_empty` -- sparse serialisation of request mappings.
"""

from __future__ import annotations

from typing import Any, Mapping


def format_bool(value: Any) -> str:
    """Return ``"true"`` or ``"false"`` for the truthiness of *value*.

    Example::

        >>> format_bool(True)
        'true'
        >>> format_bool(0)
        'false'
    """
    return "true" if value else "false"


def is_empty(value: Any) -> bool:
    """Return ``True`` if *value* is an empty/absent sentinel.

    ``None``, ``False``, numeric zero, ``""`` and empty containers all count
    as empty.
    """
    if value is None or value is False:
        return True
    if isinstance(value, (int, float)) and value == 0:
        return True
    if isinstance(value, (str, bytes, list, tuple, dict, set)) and len(value) == 0:
        return True
    return False


def drop_empty(params: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of *params* without the keys whose value :func:`is_empty`.

    This gives request bodies sparse-update semantics: fields the caller did
    not fill in are not transmitted at all.

    Note:
        A legitimate ``0`` or ``False`` shares the sentinel and is dropped
        as well. Callers that need to send such a value must not route it
        through this filter.

    Args:
        params: Flat mapping of API field names to values.

    Returns:
        A new dict preserving the insertion order of the kept keys.
    """
    return {key: value for key, value in params.items() if not is_empty(value)}
