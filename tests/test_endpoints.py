"""Tests for the endpoint table."""

from __future__ import annotations

import pytest

from apsis.endpoints import ENDPOINTS, Endpoint, Operation, get_endpoint
from apsis.models import HTTPMethod


def test_every_operation_has_an_endpoint() -> None:
    assert set(ENDPOINTS) == set(Operation)


@pytest.mark.parametrize(
    ("operation", "params", "method", "path"),
    [
        (Operation.CREATE_IMPORT_BY_CSV, {}, HTTPMethod.POST, "/import/v4/csv"),
        (
            Operation.CREATE_IMPORT_BY_XML,
            {"mailing_list_id": 7, "name_mapping": "true"},
            HTTPMethod.POST,
            "/v1/import/mailinglist/7/demographicmapping/true",
        ),
        (
            Operation.GET_IMPORT_REPORT,
            {"import_id": "abc", "report": "status"},
            HTTPMethod.GET,
            "/import/v2/abc/status",
        ),
        (Operation.CREATE_NEWSLETTER, {}, HTTPMethod.POST, "/v1/newsletters/"),
        (Operation.UPDATE_NEWSLETTER, {"newsletter_id": 3}, HTTPMethod.POST, "/v1/newsletters/3"),
        (
            Operation.DELETE_SINGLE_NEWSLETTER,
            {"newsletter_id": 3},
            HTTPMethod.DELETE,
            "/v1/newsletters/3",
        ),
        (Operation.DELETE_MULTIPLE_NEWSLETTERS, {}, HTTPMethod.DELETE, "/v1/newsletters/"),
        (Operation.GET_ALL_NEWSLETTERS, {}, HTTPMethod.POST, "/v1/newsletters/all"),
        (
            Operation.GET_NEWSLETTERS_PAGINATED,
            {"page_number": 2, "page_size": 50},
            HTTPMethod.GET,
            "/newsletters/v2/2/50",
        ),
        (
            Operation.GET_NEWSLETTER_LINKS,
            {"newsletter_id": 9},
            HTTPMethod.GET,
            "/newsletters/v1/9/links",
        ),
        (
            Operation.GET_NEWSLETTER_WEB_VERSION_LINK,
            {"newsletter_id": 9},
            HTTPMethod.GET,
            "/v1/newsletters/9/webversion",
        ),
    ],
)
def test_paths(operation, params, method, path) -> None:
    endpoint = get_endpoint(operation)
    assert endpoint.method is method
    assert endpoint.path(**params) == path


def test_identifiers_are_interpolated_verbatim() -> None:
    endpoint = Endpoint(HTTPMethod.GET, "/import/v2/{import_id}/status")
    assert endpoint.path(import_id="a b/c") == "/import/v2/a b/c/status"


def test_missing_placeholder_raises_key_error() -> None:
    with pytest.raises(KeyError):
        get_endpoint(Operation.UPDATE_NEWSLETTER).path()


def test_endpoint_is_immutable() -> None:
    endpoint = get_endpoint(Operation.GET_ALL_NEWSLETTERS)
    with pytest.raises(AttributeError):
        endpoint.template = "/other"  # type: ignore[misc]
