"""Exception hierarchy for apsis.

All exceptions raised by the library itself inherit from :class:`ApsisError`,
which carries an ``exit_code`` attribute mapped to a constant from
:mod:`apsis.exit_codes`. Errors produced by the HTTP layer
(:class:`httpx.TransportError`, :class:`httpx.HTTPStatusError`) are *not*
wrapped; they reach the caller unchanged.

Subclass hierarchy::

    ApsisError (exit 1)
    +-- InvalidArgumentError  (exit 2)
    +-- DecodeError           (exit 7)
    +-- ConfigError           (exit 1)
"""

from apsis.exit_codes import (
    EXIT_DECODE_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
)


class ApsisError(Exception):
    """Base exception for all apsis errors.

    Args:
        message: Human-readable error description.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidArgumentError(ApsisError, ValueError):
    """Raised when a call is rejected locally, before any request is sent."""

    exit_code = EXIT_INVALID_USAGE


class DecodeError(ApsisError, ValueError):
    """Raised when a response body cannot be parsed as JSON."""

    exit_code = EXIT_DECODE_ERROR


class ConfigError(ApsisError):
    """Raised for configuration problems (invalid config file, unresolvable API key source)."""

    exit_code = EXIT_GENERIC_FAILURE
