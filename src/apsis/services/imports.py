"""Subscriber imports: CSV/XML batch imports and per-import reports."""

from __future__ import annotations

import logging
from typing import Any

from apsis.endpoints import Operation
from apsis.formatters import drop_empty, format_bool
from apsis.models import CsvImport, ImportReport
from apsis.services.base import Service

logger = logging.getLogger(__name__)


class ImportService(Service):
    """Client for the ``/import`` endpoints.

    Imports run asynchronously on the APSIS side. The create methods return
    the import id; progress is polled with :meth:`get_import_status`.
    """

    def create_import_by_csv(self, mailing_list_id: int | str, csv_import: CsvImport) -> Any:
        """Batch import subscribers from a CSV file.

        The file is limited to 100 MB; larger files must be zipped. External
        files are downloaded asynchronously and must stay at their location
        until :meth:`get_import_status` reports that the import completed.

        Fields of *csv_import* that are empty, zero or ``False`` are not sent
        (see :func:`apsis.formatters.drop_empty`). ``MailingListId`` is
        always sent.

        Args:
            mailing_list_id: Id of the mailing list to import subscribers to.
            csv_import: The import configuration.

        Returns:
            The decoded response, holding the import id.
        """
        params = drop_empty(csv_import.to_params())
        params["MailingListId"] = mailing_list_id
        logger.debug(
            "CSV import into mailing list %s with fields %s", mailing_list_id, sorted(params)
        )
        return self._call(Operation.CREATE_IMPORT_BY_CSV, json_body=params)

    def create_import_by_xml(
        self,
        mailing_list_id: int | str,
        xml_data: str,
        demographic_name_mapping: bool = False,
    ) -> Any:
        """Batch import subscribers from XML data.

        Batches should stay around 2 000 subscribers; the API rejects
        payloads over 5 MB. Neither limit is checked locally.

        Args:
            mailing_list_id: Id of the mailing list to import subscribers to.
            xml_data: Subscriber data in XML format.
            demographic_name_mapping: Map demographic data by name (``True``)
                or by index order (``False``).

        Returns:
            The decoded response, holding the import id.
        """
        return self._call(
            Operation.CREATE_IMPORT_BY_XML,
            json_body={"XmlData": xml_data},
            mailing_list_id=mailing_list_id,
            name_mapping=format_bool(demographic_name_mapping),
        )

    def get_import_report(self, import_id: int | str, report: ImportReport | str) -> Any:
        """Fetch one report of a finished or running import.

        History is kept for 30 days; expired ids return whatever the API
        reports for them.

        Args:
            import_id: Id of the import.
            report: Which report to fetch.
        """
        report = ImportReport(report)
        return self._call(Operation.GET_IMPORT_REPORT, import_id=import_id, report=report.value)

    def get_import_ignored_duplicates(self, import_id: int | str) -> Any:
        """Duplicate email addresses that the import skipped."""
        return self.get_import_report(import_id, ImportReport.IGNORED_DUPLICATES)

    def get_import_invalid_emails(self, import_id: int | str) -> Any:
        """Invalid email addresses found by the import."""
        return self.get_import_report(import_id, ImportReport.INVALID_EMAILS)

    def get_import_recipients_on_opt_out_all(self, import_id: int | str) -> Any:
        """Imported addresses that are on the Opt-Out All list."""
        return self.get_import_report(import_id, ImportReport.RECIPIENTS_ON_OPT_OUT_ALL)

    def get_import_recipients_on_opt_out_list(self, import_id: int | str) -> Any:
        """Imported addresses that are on the mailing list's opt-out list."""
        return self.get_import_report(import_id, ImportReport.RECIPIENTS_ON_OPT_OUT_LIST)

    def get_import_results(self, import_id: int | str) -> Any:
        return self.get_import_report(import_id, ImportReport.RESULTS)

    def get_import_status(self, import_id: int | str) -> Any:
        """Status of an import previously added to the importer queue."""
        return self.get_import_report(import_id, ImportReport.STATUS)
