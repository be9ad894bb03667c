"""Pydantic models and enums shared across apsis modules.

The models fall into two groups:

**Configuration models** -- serialised as JSON in the user's config directory:
    :class:`RequestConfig` and :class:`Settings`.

**Request models** -- values that are built by the caller and flattened into
the shape the APSIS API expects:
    :class:`CsvImport`, plus the :class:`HTTPMethod` and :class:`ImportReport`
    enums.

All models use Pydantic v2.
"""

from __future__ import annotations

import enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer

DEFAULT_BASE_URL = "https://se.api.anpdm.com"
DEFAULT_API_KEY_SOURCE = "env:APSIS_API_KEY"


# --- Config ---


class RequestConfig(BaseModel):
    """HTTP settings applied to every API call."""

    timeout: int = Field(default=30, description="Request timeout in seconds")
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")


class Settings(BaseModel):
    """User configuration persisted at ``~/.config/apsis/config.json``.

    Loaded and saved by :func:`~apsis.config.load_settings` and
    :func:`~apsis.config.save_settings`. The base URL can be overridden by
    the ``APSIS_BASE_URL`` environment variable or the ``--base-url`` flag;
    see :func:`~apsis.config.resolve_settings`.

    The API key itself is never stored here. ``api_key_source`` describes
    where to read it from (``env:VAR``, ``file:/path`` or ``prompt``).
    """

    base_url: str = Field(default=DEFAULT_BASE_URL, description="APSIS API root URL")
    api_key_source: str = Field(
        default=DEFAULT_API_KEY_SOURCE,
        description="Credential source: env:VAR, file:/path, prompt",
    )
    request: RequestConfig = Field(default_factory=RequestConfig)


# --- Requests ---


class HTTPMethod(str, enum.Enum):
    """HTTP methods used by the APSIS endpoints."""

    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


class ImportReport(str, enum.Enum):
    """Per-import reports, keyed by their path suffix under ``/import/v2/{id}/``.

    Report history is kept by APSIS for 30 days after the import.
    """

    IGNORED_DUPLICATES = "ignoredduplicates"
    INVALID_EMAILS = "invalidemails"
    RECIPIENTS_ON_OPT_OUT_ALL = "recipientsonoptoutall"
    RECIPIENTS_ON_OPT_OUT_LIST = "recipientsonoptoutlist"
    RESULTS = "results"
    STATUS = "status"


class CsvImport(BaseModel):
    """Configuration of a CSV subscriber import.

    The file is either fetched by APSIS from ``file_location`` or sent inline
    as ``file_data``. Files over 100 MB must be zipped; external files are
    downloaded asynchronously and must stay in place until the import status
    reports completion.

    ``demographic_data_mapping`` maps import-file columns (7 to 107) to
    demographic data fields (1 to 100). When it is given, unmapped
    demographic fields are not imported.

    Fields the API does not model here can be passed as extra keyword
    arguments and are forwarded under the given name.

    Example::

        CsvImport(
            file_location="https://example.com/subscribers.csv",
            contains_headers=True,
            demographic_data_mapping={7: 1, 8: 2},
        )
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: Optional[str] = Field(default=None, alias="Name")
    file_location: Optional[str] = Field(
        default=None, alias="FileLocation", description="URL APSIS downloads the file from"
    )
    file_name: Optional[str] = Field(default=None, alias="FileName")
    file_data: Optional[str] = Field(
        default=None, alias="FileData", description="Inline file content"
    )
    delimiter: Optional[str] = Field(default=None, alias="Delimiter")
    contains_headers: bool = Field(default=False, alias="ContainsHeaders")
    update_existing_subscribers: bool = Field(
        default=False, alias="UpdateExistingSubscribers"
    )
    demographic_data_mapping: dict[int, int] = Field(
        default_factory=dict, alias="DemographicDataMapping"
    )

    @field_serializer("demographic_data_mapping")
    def _serialize_mapping(self, mapping: dict[int, int]) -> list[dict[str, int]]:
        return [
            {"ColumnIndex": column, "DemographicDataIndex": field}
            for column, field in sorted(mapping.items())
        ]

    def to_params(self) -> dict[str, Any]:
        """Flatten into the API's PascalCase key-value mapping.

        Unset fields are included with their empty default; filtering is left
        to the caller (see :func:`apsis.formatters.drop_empty`).
        """
        return self.model_dump(by_alias=True, mode="json")
