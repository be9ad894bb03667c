"""Newsletter commands -- create, update, delete and list newsletters."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import typer

from apsis.commands import run_and_print

newsletters_app = typer.Typer(no_args_is_help=True)

DEFAULT_PAGE_SIZE = 50


def load_data(value: str) -> dict[str, Any]:
    """Parse a ``--data`` value: inline JSON, or ``@path`` to a JSON file.

    Raises:
        typer.BadParameter: If the file is missing or the JSON is not an object.
    """
    if value.startswith("@"):
        path = Path(value[1:]).expanduser()
        if not path.is_file():
            raise typer.BadParameter(f"File not found: {path}", param_hint="--data")
        value = path.read_text(encoding="utf-8")
    try:
        data = json.loads(value)
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"Invalid JSON: {exc}", param_hint="--data") from None
    if not isinstance(data, dict):
        raise typer.BadParameter("Expected a JSON object", param_hint="--data")
    return data


@newsletters_app.command("create")
def newsletter_create(
    ctx: typer.Context,
    data: str = typer.Option(..., "--data", help="Newsletter JSON, or @file.json."),
) -> None:
    """Create a newsletter."""
    payload = load_data(data)
    run_and_print(ctx, lambda apsis: apsis.newsletters.create_newsletter(payload))


@newsletters_app.command("update")
def newsletter_update(
    ctx: typer.Context,
    newsletter_id: int = typer.Argument(help="Newsletter to update."),
    data: str = typer.Option(..., "--data", help="Newsletter JSON, or @file.json."),
) -> None:
    """Update an existing newsletter."""
    payload = load_data(data)
    run_and_print(ctx, lambda apsis: apsis.newsletters.update_newsletter(newsletter_id, payload))


@newsletters_app.command("delete")
def newsletter_delete(
    ctx: typer.Context,
    newsletter_ids: list[int] = typer.Argument(help="One or more newsletter ids (max 1000)."),
) -> None:
    """Delete one newsletter, or queue deletion of several.

    Example::

        apsis newsletters delete 17
        apsis newsletters delete 17 18 19
    """
    if len(newsletter_ids) == 1:
        run_and_print(
            ctx, lambda apsis: apsis.newsletters.delete_single_newsletter(newsletter_ids[0])
        )
    else:
        run_and_print(
            ctx, lambda apsis: apsis.newsletters.delete_multiple_newsletters(newsletter_ids)
        )


@newsletters_app.command("list")
def newsletter_list(
    ctx: typer.Context,
    page: Optional[int] = typer.Option(None, "--page", help="Page number, starting with 1."),
    size: Optional[int] = typer.Option(
        None, "--size", help="Page size, only valid with --page (default 50)."
    ),
) -> None:
    """List newsletters; all of them, or one page with ``--page``."""
    if page is None:
        if size is not None:
            raise typer.BadParameter("--size requires --page", param_hint="--size")
        run_and_print(ctx, lambda apsis: apsis.newsletters.get_all_newsletters())
        return

    page_size = DEFAULT_PAGE_SIZE if size is None else size
    run_and_print(ctx, lambda apsis: apsis.newsletters.get_newsletters_paginated(page, page_size))


@newsletters_app.command("links")
def newsletter_links(
    ctx: typer.Context,
    newsletter_id: int = typer.Argument(help="Newsletter id."),
) -> None:
    """List the links of a newsletter."""
    run_and_print(ctx, lambda apsis: apsis.newsletters.get_newsletter_links(newsletter_id))


@newsletters_app.command("web-version")
def newsletter_web_version(
    ctx: typer.Context,
    newsletter_id: int = typer.Argument(help="Newsletter id."),
) -> None:
    """Show the link to the web version of a newsletter."""
    run_and_print(
        ctx, lambda apsis: apsis.newsletters.get_newsletter_web_version_link(newsletter_id)
    )
