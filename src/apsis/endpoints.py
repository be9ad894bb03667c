"""Table of APSIS endpoints, indexed by :class:`Operation`.

Every remote call the client can make is listed once in :data:`ENDPOINTS`
with its HTTP method and path template. Templates use :meth:`str.format`
placeholders; identifiers are interpolated verbatim, without URL quoting.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

from apsis.models import HTTPMethod


class Operation(str, enum.Enum):
    """Every remote operation the client exposes."""

    CREATE_IMPORT_BY_CSV = "create_import_by_csv"
    CREATE_IMPORT_BY_XML = "create_import_by_xml"
    GET_IMPORT_REPORT = "get_import_report"
    CREATE_NEWSLETTER = "create_newsletter"
    UPDATE_NEWSLETTER = "update_newsletter"
    DELETE_SINGLE_NEWSLETTER = "delete_single_newsletter"
    DELETE_MULTIPLE_NEWSLETTERS = "delete_multiple_newsletters"
    GET_ALL_NEWSLETTERS = "get_all_newsletters"
    GET_NEWSLETTERS_PAGINATED = "get_newsletters_paginated"
    GET_NEWSLETTER_LINKS = "get_newsletter_links"
    GET_NEWSLETTER_WEB_VERSION_LINK = "get_newsletter_web_version_link"


@dataclass(frozen=True)
class Endpoint:
    """HTTP method plus path template for one operation."""

    method: HTTPMethod
    template: str

    def path(self, **params: Any) -> str:
        """Render the path, substituting each ``{name}`` with ``str(params[name])``.

        Raises:
            KeyError: If a placeholder has no matching keyword argument.
        """
        return self.template.format(**params)


ENDPOINTS: dict[Operation, Endpoint] = {
    # Imports
    Operation.CREATE_IMPORT_BY_CSV: Endpoint(HTTPMethod.POST, "/import/v4/csv"),
    Operation.CREATE_IMPORT_BY_XML: Endpoint(
        HTTPMethod.POST,
        "/v1/import/mailinglist/{mailing_list_id}/demographicmapping/{name_mapping}",
    ),
    Operation.GET_IMPORT_REPORT: Endpoint(HTTPMethod.GET, "/import/v2/{import_id}/{report}"),
    # Newsletters
    Operation.CREATE_NEWSLETTER: Endpoint(HTTPMethod.POST, "/v1/newsletters/"),
    Operation.UPDATE_NEWSLETTER: Endpoint(HTTPMethod.POST, "/v1/newsletters/{newsletter_id}"),
    Operation.DELETE_SINGLE_NEWSLETTER: Endpoint(
        HTTPMethod.DELETE, "/v1/newsletters/{newsletter_id}"
    ),
    Operation.DELETE_MULTIPLE_NEWSLETTERS: Endpoint(HTTPMethod.DELETE, "/v1/newsletters/"),
    # Listing is a POST on the remote side.
    Operation.GET_ALL_NEWSLETTERS: Endpoint(HTTPMethod.POST, "/v1/newsletters/all"),
    Operation.GET_NEWSLETTERS_PAGINATED: Endpoint(
        HTTPMethod.GET, "/newsletters/v2/{page_number}/{page_size}"
    ),
    Operation.GET_NEWSLETTER_LINKS: Endpoint(
        HTTPMethod.GET, "/newsletters/v1/{newsletter_id}/links"
    ),
    Operation.GET_NEWSLETTER_WEB_VERSION_LINK: Endpoint(
        HTTPMethod.GET, "/v1/newsletters/{newsletter_id}/webversion"
    ),
}


def get_endpoint(operation: Operation) -> Endpoint:
    """Return the :class:`Endpoint` registered for *operation*."""
    return ENDPOINTS[operation]
