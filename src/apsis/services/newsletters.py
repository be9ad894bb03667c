"""Newsletter CRUD and listing."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from apsis.endpoints import Operation
from apsis.exceptions import InvalidArgumentError
from apsis.services.base import Service

MAX_DELETE_BATCH = 1000


class NewsletterService(Service):
    """Client for the newsletter endpoints.

    Newsletter payloads are plain mappings in the API's own schema and are
    sent as-is.
    """

    def create_newsletter(self, newsletter_data: Mapping[str, Any]) -> Any:
        """Create a newsletter.

        Without a subject, the newsletter name is used as subject.
        """
        return self._call(Operation.CREATE_NEWSLETTER, json_body=dict(newsletter_data))

    def update_newsletter(self, newsletter_id: int | str, newsletter_data: Mapping[str, Any]) -> Any:
        return self._call(
            Operation.UPDATE_NEWSLETTER,
            json_body=dict(newsletter_data),
            newsletter_id=newsletter_id,
        )

    def delete_single_newsletter(self, newsletter_id: int | str) -> Any:
        return self._call(Operation.DELETE_SINGLE_NEWSLETTER, newsletter_id=newsletter_id)

    def delete_multiple_newsletters(self, newsletter_ids: Sequence[int | str]) -> Any:
        """Queue deletion of a batch of newsletters.

        Args:
            newsletter_ids: At most 1000 newsletter ids, sent as given.

        Raises:
            InvalidArgumentError: If more than 1000 ids are passed. No request
                is sent in that case.
        """
        if len(newsletter_ids) > MAX_DELETE_BATCH:
            raise InvalidArgumentError(
                f"Max {MAX_DELETE_BATCH} newsletters can be deleted per request "
                f"(got {len(newsletter_ids)})."
            )
        return self._call(Operation.DELETE_MULTIPLE_NEWSLETTERS, json_body=list(newsletter_ids))

    def get_all_newsletters(self) -> Any:
        return self._call(Operation.GET_ALL_NEWSLETTERS)

    def get_newsletters_paginated(self, page_number: int, page_size: int) -> Any:
        """One page of the account's newsletters.

        Args:
            page_number: Page to return, starting with 1.
            page_size: Size of each page, minimum 1.
        """
        return self._call(
            Operation.GET_NEWSLETTERS_PAGINATED,
            page_number=page_number,
            page_size=page_size,
        )

    def get_newsletter_links(self, newsletter_id: int | str) -> Any:
        """All links of a newsletter.

        Dynamic links generated by APSIS (``##TellAFriend##``,
        ``##OptOutAll##``, ...) are not part of the result.
        """
        return self._call(Operation.GET_NEWSLETTER_LINKS, newsletter_id=newsletter_id)

    def get_newsletter_web_version_link(self, newsletter_id: int | str) -> Any:
        """Link to the HTML version of a newsletter."""
        return self._call(Operation.GET_NEWSLETTER_WEB_VERSION_LINK, newsletter_id=newsletter_id)
