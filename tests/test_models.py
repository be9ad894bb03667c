"""Tests for apsis.models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from apsis.models import (
    DEFAULT_API_KEY_SOURCE,
    DEFAULT_BASE_URL,
    CsvImport,
    ImportReport,
    RequestConfig,
    Settings,
)


class TestCsvImport:
    def test_to_params_uses_api_field_names(self) -> None:
        params = CsvImport(
            name="Spring list",
            file_location="https://example.com/list.csv",
            contains_headers=True,
        ).to_params()
        assert params["Name"] == "Spring list"
        assert params["FileLocation"] == "https://example.com/list.csv"
        assert params["ContainsHeaders"] is True
        assert params["UpdateExistingSubscribers"] is False
        assert params["FileData"] is None

    def test_accepts_api_field_names(self) -> None:
        csv_import = CsvImport(FileLocation="https://example.com/a.csv", Delimiter=";")
        assert csv_import.file_location == "https://example.com/a.csv"
        assert csv_import.delimiter == ";"

    def test_demographic_mapping_serialised_sorted(self) -> None:
        params = CsvImport(demographic_data_mapping={8: 2, 7: 1}).to_params()
        assert params["DemographicDataMapping"] == [
            {"ColumnIndex": 7, "DemographicDataIndex": 1},
            {"ColumnIndex": 8, "DemographicDataIndex": 2},
        ]

    def test_empty_mapping_serialises_to_empty_list(self) -> None:
        assert CsvImport().to_params()["DemographicDataMapping"] == []

    def test_extra_fields_are_forwarded(self) -> None:
        params = CsvImport(Encoding="utf-8").to_params()
        assert params["Encoding"] == "utf-8"

    def test_invalid_mapping_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CsvImport(demographic_data_mapping={"seven": 1})


class TestImportReport:
    def test_suffixes(self) -> None:
        assert [r.value for r in ImportReport] == [
            "ignoredduplicates",
            "invalidemails",
            "recipientsonoptoutall",
            "recipientsonoptoutlist",
            "results",
            "status",
        ]

    def test_lookup_by_value(self) -> None:
        assert ImportReport("status") is ImportReport.STATUS


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings()
        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.api_key_source == DEFAULT_API_KEY_SOURCE
        assert settings.request == RequestConfig(timeout=30, verify_ssl=True)

    def test_round_trip_through_json(self) -> None:
        settings = Settings(base_url="https://eu.example.com", request=RequestConfig(timeout=5))
        restored = Settings.model_validate(settings.model_dump(mode="json"))
        assert restored == settings
