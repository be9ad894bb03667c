"""Numeric process exit codes for the ``apsis`` command line.

Each constant maps to a failure category. Library exceptions carry the
matching code on :attr:`~apsis.exceptions.ApsisError.exit_code`; HTTP and
transport errors raised by :mod:`httpx` are mapped in :func:`apsis.app.main`.

Example::

    $ apsis imports status 1234
    $ echo $?
    4   # EXIT_NOT_FOUND -- the API answered 404
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments (e.g. too many ids in a batch)."""

EXIT_AUTH_FAILURE = 3
"""The API rejected the credentials (HTTP 401 / 403)."""

EXIT_NOT_FOUND = 4
"""The requested resource was not found (HTTP 404)."""

EXIT_HTTP_ERROR = 5
"""The API answered with any other non-2xx status."""

EXIT_CONNECTION_ERROR = 6
"""A network-level error occurred (timeout, DNS failure, connection refused)."""

EXIT_DECODE_ERROR = 7
"""The API response body was not valid JSON."""
