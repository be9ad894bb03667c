"""Sub-command groups of the ``apsis`` command line.

Each module exposes a :class:`typer.Typer` app that :mod:`apsis.app`
mounts under the root command. Shared option state travels in
``ctx.obj`` (see :func:`apsis.app.main_callback`).
"""

from __future__ import annotations

from typing import Any, Callable

import typer

from apsis.api import Apsis
from apsis.config import resolve_settings
from apsis.output import format_response


def build_client(ctx: typer.Context) -> Apsis:
    """Create the :class:`~apsis.api.Apsis` facade for the current invocation.

    Settings are resolved with the ``--base-url`` flag taking precedence;
    ``--dry-run`` is passed through to the transport.
    """
    obj = ctx.obj or {}
    settings = resolve_settings(cli_base_url=obj.get("base_url"))
    return Apsis.from_settings(settings, dry_run=obj.get("dry_run", False))


def run_and_print(ctx: typer.Context, call: Callable[[Apsis], Any]) -> None:
    """Open a client, run *call* against it and print the decoded result."""
    with build_client(ctx) as apsis:
        result = call(apsis)
    format_response(result)
