"""Synchronous HTTP transport for the APSIS API.

:class:`Transport` wraps :class:`httpx.Client` and adds:

- **Authentication** -- the API key is sent as HTTP Basic credentials
  (key as user name, empty password) on every request.
- **Dry-run mode** -- prints the request to stderr and returns a synthetic
  200 response without sending traffic.
- **Status checking** -- non-2xx responses raise
  :class:`httpx.HTTPStatusError` via :meth:`httpx.Response.raise_for_status`.

No retry, caching or backoff is done. Network failures
(:class:`httpx.TransportError` and subclasses) propagate unchanged.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

import httpx

from apsis.config import resolve_credential
from apsis.models import DEFAULT_BASE_URL, HTTPMethod, Settings
from apsis.output import get_output

logger = logging.getLogger(__name__)


class Transport:
    """HTTP transport shared by every service.

    The underlying client is opened on the first request if needed; use
    it as a context manager, or call :meth:`close`, to release it.

    Args:
        api_key: APSIS API key.
        base_url: API root URL; paths passed to :meth:`request` are appended.
        timeout: Request timeout in seconds.
        verify_ssl: Verify TLS certificates.
        dry_run: When ``True``, requests are printed to stderr and a
            synthetic 200 response is returned without network I/O.
        http_transport: Optional :mod:`httpx` transport, e.g.
            :class:`httpx.MockTransport` in tests.

    Example::

        with Transport(api_key="...") as transport:
            response = transport.request("GET", "/import/v2/42/status")
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30,
        verify_ssl: bool = True,
        dry_run: bool = False,
        http_transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._verify_ssl = verify_ssl
        self._dry_run = dry_run
        self._http_transport = http_transport
        self._client: Optional[httpx.Client] = None

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        dry_run: bool = False,
        http_transport: Optional[httpx.BaseTransport] = None,
    ) -> Transport:
        """Build a transport from :class:`~apsis.models.Settings`.

        The API key is resolved from ``settings.api_key_source``.

        Raises:
            ConfigError: If the API key source cannot be resolved.
        """
        return cls(
            api_key=resolve_credential(settings.api_key_source),
            base_url=settings.base_url,
            timeout=settings.request.timeout,
            verify_ssl=settings.request.verify_ssl,
            dry_run=dry_run,
            http_transport=http_transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    # ------------------------------------------------------------------ #
    # Lifecycle
    # ------------------------------------------------------------------ #

    def open(self) -> httpx.Client:
        """Create the underlying client unless it is already open, and return it."""
        if self._client is not None:
            return self._client
        self._client = httpx.Client(
            base_url=self._base_url,
            auth=httpx.BasicAuth(self._api_key, ""),
            headers={"Accept": "application/json"},
            timeout=self._timeout,
            verify=self._verify_ssl,
            transport=self._http_transport,
        )
        return self._client

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> Transport:
        self.open()
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    # ------------------------------------------------------------------ #
    # Requests
    # ------------------------------------------------------------------ #

    def request(
        self,
        method: HTTPMethod | str,
        path: str,
        json_body: Optional[Any] = None,
        body: Optional[str] = None,
    ) -> httpx.Response:
        """Send one request and return the response.

        Args:
            method: HTTP method.
            path: URL path appended to the base URL.
            json_body: JSON-serialisable body. Takes precedence over *body*.
            body: Raw string body.

        Returns:
            The 2xx :class:`httpx.Response`.

        Raises:
            httpx.HTTPStatusError: On a 4xx / 5xx response.
            httpx.TransportError: On network or timeout failures.
        """
        if isinstance(method, HTTPMethod):
            method = method.value
        else:
            method = HTTPMethod(method.upper()).value

        if self._dry_run:
            return self._print_dry_run(method, path, json_body, body)

        client = self.open()

        kwargs: dict[str, Any] = {}
        if json_body is not None:
            kwargs["json"] = json_body
        elif body is not None:
            kwargs["content"] = body

        logger.debug("%s %s", method, path)
        response = client.request(method, path, **kwargs)
        logger.debug("%s %s -> %d", method, path, response.status_code)

        response.raise_for_status()
        return response

    def _print_dry_run(
        self,
        method: str,
        path: str,
        json_body: Any,
        body: Optional[str],
    ) -> httpx.Response:
        """Print request details to stderr and return a synthetic 200 response."""
        url = f"{self._base_url}{path}"
        output = get_output()
        output.info(f"[dry-run] {method} {url}")
        if json_body is not None:
            output.info(f"  Body (JSON): {json.dumps(json_body, indent=2)}")
        elif body is not None:
            output.info(f"  Body: {body}")

        return httpx.Response(
            status_code=200,
            headers={"content-type": "application/json"},
            json={"dry_run": True, "message": "Request was not sent"},
            request=httpx.Request(method=method, url=url),
        )
