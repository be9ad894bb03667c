"""Tests for response decoding."""

from __future__ import annotations

import httpx
import pytest

from apsis.client.response import response_to_json
from apsis.exceptions import ApsisError, DecodeError
from apsis.services.base import Service


def _make_response(content: bytes, status_code: int = 200) -> httpx.Response:
    return httpx.Response(
        status_code=status_code,
        content=content,
        headers={"content-type": "application/json"},
        request=httpx.Request("GET", "https://api.example.com/import/v2/1/status"),
    )


class TestResponseToJson:
    def test_object(self) -> None:
        result = response_to_json(_make_response(b'{"Id": 5, "Status": "Completed"}'))
        assert result["Id"] == 5
        assert result["Status"] == "Completed"

    def test_array(self) -> None:
        assert response_to_json(_make_response(b'[{"Id": 1}, {"Id": 2}]')) == [
            {"Id": 1},
            {"Id": 2},
        ]

    def test_primitive(self) -> None:
        assert response_to_json(_make_response(b'"https://example.com/web"')) == (
            "https://example.com/web"
        )

    def test_empty_body_is_none(self) -> None:
        assert response_to_json(_make_response(b"")) is None

    def test_truncated_json_raises_decode_error(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            response_to_json(_make_response(b'{"Id": 5, "Sta'))
        assert "not valid JSON" in str(exc_info.value)
        assert exc_info.value.__cause__ is not None

    def test_html_body_raises_decode_error(self) -> None:
        with pytest.raises(DecodeError):
            response_to_json(_make_response(b"<html>Service Unavailable</html>", 200))

    def test_decode_error_is_value_error_and_apsis_error(self) -> None:
        with pytest.raises(ValueError):
            response_to_json(_make_response(b"nope"))
        with pytest.raises(ApsisError):
            response_to_json(_make_response(b"nope"))


def test_service_exposes_decoder() -> None:
    assert Service.response_to_json(_make_response(b'{"ok": true}')) == {"ok": True}
