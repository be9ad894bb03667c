"""HTTP layer for apsis.

:class:`Transport` wraps :mod:`httpx` with API-key authentication and
dry-run support; :func:`response_to_json` decodes response bodies.

Example::

    from apsis.client import Transport, response_to_json

    with Transport(api_key="...") as transport:
        status = response_to_json(transport.request("GET", "/import/v2/42/status"))
"""

from apsis.client.response import response_to_json
from apsis.client.transport import Transport

__all__ = ["Transport", "response_to_json"]
