"""Typer application and console-script entry point for apsis.

The root callback turns global flags into an
:class:`~apsis.output.OutputManager` and the shared ``ctx.obj`` state;
the ``imports``, ``newsletters`` and ``config`` groups are mounted below it.

:func:`main` maps failures to the exit codes in :mod:`apsis.exit_codes`.
HTTP errors are left untranslated by the library, so the mapping from
:mod:`httpx` exceptions happens here.
"""

from __future__ import annotations

import logging
import signal
import sys
import traceback
from datetime import datetime
from typing import Any, Optional

import httpx
import typer
from rich.logging import RichHandler

from apsis import __version__
from apsis.commands.config import config_app
from apsis.commands.imports import imports_app
from apsis.commands.newsletters import newsletters_app
from apsis.exceptions import ApsisError
from apsis.exit_codes import (
    EXIT_AUTH_FAILURE,
    EXIT_CONNECTION_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_HTTP_ERROR,
    EXIT_NOT_FOUND,
)
from apsis.output import OutputFormat, OutputManager, error, set_output

app = typer.Typer(
    name="apsis",
    help="Command line client for the APSIS email-marketing API.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

app.add_typer(imports_app, name="imports", help="Subscriber imports.")
app.add_typer(newsletters_app, name="newsletters", help="Newsletter management.")
app.add_typer(config_app, name="config", help="Configuration management.")


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"apsis {__version__}")
        raise typer.Exit()


def _configure_logging(output: OutputManager) -> None:
    """Send debug records of the ``apsis`` loggers to stderr through Rich."""
    logger = logging.getLogger("apsis")
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    logger.addHandler(RichHandler(console=output.stderr_console, show_path=False))
    logger.setLevel(logging.DEBUG)


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    base_url: Optional[str] = typer.Option(
        None, "--base-url", help="Override the API base URL."
    ),
    json_output: bool = typer.Option(False, "--json", help="JSON output format."),
    plain_output: bool = typer.Option(False, "--plain", help="Plain text output."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable color output."),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug output."),
    dry_run: bool = typer.Option(
        False, "--dry-run", "-n", help="Print requests instead of sending them."
    ),
    output_file: Optional[str] = typer.Option(
        None, "-o", "--output", help="Write response data to a file."
    ),
) -> None:
    """Root callback executed before every sub-command.

    Installs the global :class:`~apsis.output.OutputManager` and stores
    ``base_url`` and ``dry_run`` in ``ctx.obj`` for the sub-commands.
    """
    fmt = OutputFormat.AUTO
    if json_output:
        fmt = OutputFormat.JSON
    elif plain_output:
        fmt = OutputFormat.PLAIN

    output = OutputManager(
        format=fmt,
        no_color=no_color,
        quiet=quiet,
        output_file=output_file,
    )
    set_output(output)
    if verbose:
        _configure_logging(output)

    ctx.ensure_object(dict)
    ctx.obj["base_url"] = base_url
    ctx.obj["dry_run"] = dry_run


def exit_code_for(exc: BaseException) -> Optional[int]:
    """Return the exit code for a known failure, or ``None`` for a crash."""
    if isinstance(exc, ApsisError):
        return exc.exit_code
    if isinstance(exc, httpx.HTTPStatusError):
        status = exc.response.status_code
        if status in (401, 403):
            return EXIT_AUTH_FAILURE
        if status == 404:
            return EXIT_NOT_FOUND
        return EXIT_HTTP_ERROR
    if isinstance(exc, httpx.TransportError):
        return EXIT_CONNECTION_ERROR
    return None


def _describe(exc: BaseException) -> str:
    if isinstance(exc, httpx.HTTPStatusError):
        response = exc.response
        body = response.text[:200] if response.text else ""
        message = f"HTTP {response.status_code} from {exc.request.method} {exc.request.url}"
        return f"{message}: {body}" if body else message
    return str(exc) or type(exc).__name__


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)

    signal.signal(signal.SIGINT, _handler)


def _write_crash_log(exc: Exception) -> str:
    """Write the current traceback under the data directory and return its path."""
    from apsis.config import get_data_dir

    logs_dir = get_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    log_path = logs_dir / f"crash-{timestamp}.log"
    log_path.write_text("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)))
    return str(log_path)


def main() -> None:
    """CLI entry point invoked by the ``apsis`` console script.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)
    except Exception as exc:
        code = exit_code_for(exc)
        if code is not None:
            error(_describe(exc))
            sys.exit(code)
        log_path = _write_crash_log(exc)
        error(f"Unexpected error. Debug log: {log_path}")
        sys.exit(EXIT_GENERIC_FAILURE)
