"""apsis -- Python client and command line for the APSIS email-marketing API.

Covers the import and newsletter endpoints. Each method sends exactly one
request and returns the decoded JSON response unchanged.

Typical use::

    from apsis import Apsis

    with Apsis(api_key="...") as apsis:
        apsis.newsletters.get_newsletters_paginated(1, 50)

Modules:
    api: The :class:`Apsis` facade.
    services: Import and newsletter services.
    client: HTTP transport and response decoding.
    endpoints: Table of endpoint paths and methods.
    formatters: Wire formatting helpers.
    models: Pydantic models and enums.
    config: XDG-aware settings and API key resolution.
    app: Typer command line.
"""

__version__ = "0.1.0"

from apsis.api import Apsis  # noqa: E402
from apsis.exceptions import (  # noqa: E402
    ApsisError,
    ConfigError,
    DecodeError,
    InvalidArgumentError,
)
from apsis.models import CsvImport, ImportReport  # noqa: E402

__all__ = [
    "Apsis",
    "ApsisError",
    "ConfigError",
    "CsvImport",
    "DecodeError",
    "ImportReport",
    "InvalidArgumentError",
    "__version__",
]
