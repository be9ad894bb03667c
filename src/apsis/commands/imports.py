"""Import commands -- start CSV/XML imports and read their reports.

Provides the ``apsis imports`` sub-command group. Imports are processed
asynchronously by APSIS; ``apsis imports status`` polls a single import.
"""

from __future__ import annotations

from typing import Optional

import typer

from apsis.commands import run_and_print
from apsis.models import CsvImport, ImportReport

imports_app = typer.Typer(no_args_is_help=True)


def parse_mapping(entries: Optional[list[str]]) -> dict[int, int]:
    """Parse ``COLUMN=FIELD`` pairs into a demographic data mapping.

    Raises:
        typer.BadParameter: If an entry is not two integers joined by ``=``.
    """
    mapping: dict[int, int] = {}
    for entry in entries or []:
        column, sep, field = entry.partition("=")
        try:
            if not sep:
                raise ValueError(entry)
            mapping[int(column)] = int(field)
        except ValueError:
            raise typer.BadParameter(
                f"Expected COLUMN=FIELD with integer indexes, got: {entry}",
                param_hint="--map",
            ) from None
    return mapping


@imports_app.command("csv")
def import_csv(
    ctx: typer.Context,
    mailing_list_id: int = typer.Argument(help="Mailing list to import into."),
    file_location: Optional[str] = typer.Option(
        None, "--file-location", help="URL APSIS downloads the CSV file from."
    ),
    file_name: Optional[str] = typer.Option(None, "--file-name", help="Name of the file."),
    name: Optional[str] = typer.Option(None, "--name", help="Name of the import."),
    delimiter: Optional[str] = typer.Option(None, "--delimiter", help="Column delimiter."),
    contains_headers: bool = typer.Option(
        False, "--contains-headers", help="First row holds column headers."
    ),
    update_existing: bool = typer.Option(
        False, "--update-existing", help="Update subscribers that already exist."
    ),
    mapping: Optional[list[str]] = typer.Option(
        None, "--map", help="Demographic mapping COLUMN=FIELD (repeatable)."
    ),
) -> None:
    """Start a CSV import into a mailing list.

    Example::

        apsis imports csv 42 --file-location https://example.com/list.csv --contains-headers
    """
    csv_import = CsvImport(
        name=name,
        file_location=file_location,
        file_name=file_name,
        delimiter=delimiter,
        contains_headers=contains_headers,
        update_existing_subscribers=update_existing,
        demographic_data_mapping=parse_mapping(mapping),
    )
    run_and_print(ctx, lambda apsis: apsis.imports.create_import_by_csv(mailing_list_id, csv_import))


@imports_app.command("xml")
def import_xml(
    ctx: typer.Context,
    mailing_list_id: int = typer.Argument(help="Mailing list to import into."),
    xml_file: typer.FileText = typer.Argument(help="XML file with subscriber data ('-' for stdin)."),
    name_mapping: bool = typer.Option(
        False, "--name-mapping", help="Map demographic data by name instead of index order."
    ),
) -> None:
    """Start an XML import into a mailing list."""
    xml_data = xml_file.read()
    run_and_print(
        ctx,
        lambda apsis: apsis.imports.create_import_by_xml(mailing_list_id, xml_data, name_mapping),
    )


@imports_app.command("report")
def import_report(
    ctx: typer.Context,
    import_id: str = typer.Argument(help="Id of the import."),
    kind: ImportReport = typer.Argument(help="Report to fetch."),
) -> None:
    """Fetch one report of an import (kept by APSIS for 30 days)."""
    run_and_print(ctx, lambda apsis: apsis.imports.get_import_report(import_id, kind))


@imports_app.command("status")
def import_status(
    ctx: typer.Context,
    import_id: str = typer.Argument(help="Id of the import."),
) -> None:
    """Show the status of a queued or running import."""
    run_and_print(ctx, lambda apsis: apsis.imports.get_import_status(import_id))
