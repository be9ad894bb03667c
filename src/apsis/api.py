"""Entry point for library users: one transport, all services.

Example::

    from apsis import Apsis, CsvImport

    with Apsis(api_key="...") as apsis:
        created = apsis.imports.create_import_by_csv(
            42, CsvImport(file_location="https://example.com/subscribers.csv")
        )
        status = apsis.imports.get_import_status(created["Result"])
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from apsis.client.transport import Transport
from apsis.models import Settings
from apsis.services import ImportService, NewsletterService


class Apsis:
    """Facade bundling the services over a single :class:`Transport`.

    Either pass an existing *transport*, or keyword arguments that are
    forwarded to :class:`Transport`.

    Attributes:
        imports: :class:`~apsis.services.ImportService`.
        newsletters: :class:`~apsis.services.NewsletterService`.
    """

    def __init__(self, transport: Optional[Transport] = None, **transport_kwargs: Any) -> None:
        if transport is None:
            transport = Transport(**transport_kwargs)
        elif transport_kwargs:
            raise TypeError("Pass either a transport or transport keyword arguments, not both")
        self.transport = transport
        self.imports = ImportService(transport)
        self.newsletters = NewsletterService(transport)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        dry_run: bool = False,
        http_transport: Optional[httpx.BaseTransport] = None,
    ) -> Apsis:
        """Build the facade from :class:`~apsis.models.Settings`."""
        return cls(Transport.from_settings(settings, dry_run=dry_run, http_transport=http_transport))

    def __enter__(self) -> Apsis:
        self.transport.open()
        return self

    def __exit__(self, *args: object) -> None:
        self.transport.close()
