"""Base class for the APSIS resource services."""

from __future__ import annotations

from typing import Any, Optional

import httpx

from apsis.client.response import response_to_json
from apsis.client.transport import Transport
from apsis.endpoints import Operation, get_endpoint


class Service:
    """Holds the shared :class:`~apsis.client.transport.Transport`.

    Subclasses describe each remote call as an :class:`~apsis.endpoints.Operation`
    plus path parameters and body, and hand it to :meth:`_call`.

    Args:
        transport: The transport. It is shared, never reconfigured.
    """

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    @property
    def transport(self) -> Transport:
        return self._transport

    @staticmethod
    def response_to_json(response: httpx.Response) -> Any:
        """Decode *response*; see :func:`apsis.client.response.response_to_json`."""
        return response_to_json(response)

    def _call(
        self,
        operation: Operation,
        json_body: Optional[Any] = None,
        **path_params: Any,
    ) -> Any:
        """Send the request for *operation* and return the decoded body."""
        endpoint = get_endpoint(operation)
        response = self._transport.request(
            endpoint.method,
            endpoint.path(**path_params),
            json_body=json_body,
        )
        return self.response_to_json(response)
