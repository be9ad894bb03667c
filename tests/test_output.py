"""Tests for the output manager.

Covers format resolution, NO_COLOR handling, the stdout/stderr split,
quiet mode, and output-file redirection.
"""

from __future__ import annotations

import json

import pytest

from apsis import output as output_module
from apsis.output import OutputFormat, OutputManager, get_output, reset_output, set_output


@pytest.fixture()
def non_tty(monkeypatch):
    monkeypatch.setattr("apsis.output._is_tty", lambda: False)


@pytest.fixture()
def tty(monkeypatch):
    monkeypatch.setattr("apsis.output._is_tty", lambda: True)


class TestFormatResolution:
    def test_auto_is_plain_without_tty(self, non_tty):
        assert OutputManager().format == OutputFormat.PLAIN

    def test_auto_is_rich_on_tty(self, tty, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.delenv("TERM", raising=False)
        assert OutputManager().format == OutputFormat.RICH

    def test_no_color_env_forces_plain(self, tty, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "")
        assert OutputManager().format == OutputFormat.PLAIN

    def test_dumb_terminal_forces_plain(self, tty, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("TERM", "dumb")
        assert OutputManager().format == OutputFormat.PLAIN

    def test_explicit_format_wins(self, tty):
        assert OutputManager(format=OutputFormat.JSON).format == OutputFormat.JSON


class TestFormatResponse:
    def test_json_goes_to_stdout(self, capsys):
        OutputManager(format=OutputFormat.JSON, no_color=True).format_response({"Result": 5})
        captured = capsys.readouterr()
        assert json.loads(captured.out) == {"Result": 5}
        assert captured.err == ""

    def test_none_prints_nothing(self, capsys):
        OutputManager(format=OutputFormat.JSON, no_color=True).format_response(None)
        assert capsys.readouterr().out == ""

    def test_plain_dict_is_tab_separated(self, capsys):
        OutputManager(format=OutputFormat.PLAIN, no_color=True).format_response(
            {"Code": 1, "Message": "OK"}
        )
        assert capsys.readouterr().out == "Code\t1\nMessage\tOK\n"

    def test_plain_list_of_dicts(self, capsys):
        OutputManager(format=OutputFormat.PLAIN, no_color=True).format_response(
            [{"Id": 1, "Name": "a"}, {"Id": 2, "Name": "b"}]
        )
        assert capsys.readouterr().out == "1\ta\n2\tb\n"

    def test_plain_scalar(self, capsys):
        OutputManager(format=OutputFormat.PLAIN, no_color=True).format_response(
            "https://example.com/web/17"
        )
        assert capsys.readouterr().out == "https://example.com/web/17\n"

    def test_output_file(self, tmp_path, capsys):
        target = tmp_path / "out.json"
        OutputManager(no_color=True, output_file=str(target)).format_response([1, 2])
        assert json.loads(target.read_text()) == [1, 2]
        assert capsys.readouterr().out == ""


class TestDiagnostics:
    def test_info_goes_to_stderr(self, capsys):
        OutputManager(no_color=True).info("Config file: /tmp/x")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "Config file: /tmp/x\n"

    def test_quiet_suppresses_info_and_success(self, capsys):
        mgr = OutputManager(no_color=True, quiet=True)
        mgr.info("hidden")
        mgr.success("hidden")
        assert capsys.readouterr().err == ""

    def test_quiet_keeps_errors(self, capsys):
        OutputManager(no_color=True, quiet=True).error("broken")
        assert capsys.readouterr().err == "Error: broken\n"

    def test_markup_in_messages_is_not_interpreted(self, capsys, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.delenv("TERM", raising=False)
        mgr = OutputManager(format=OutputFormat.PLAIN)
        mgr.info("[dry-run] GET https://api.example.com/x")
        assert "[dry-run] GET" in capsys.readouterr().err


class TestGlobalInstance:
    def test_get_output_creates_default(self):
        reset_output()
        assert isinstance(get_output(), OutputManager)

    def test_set_output_is_used_by_helpers(self, capsys):
        set_output(OutputManager(format=OutputFormat.JSON, no_color=True))
        output_module.format_response({"a": 1})
        output_module.error("boom")
        captured = capsys.readouterr()
        assert json.loads(captured.out) == {"a": 1}
        assert "Error: boom" in captured.err

    def test_diagnostics_are_info_success_and_error_only(self):
        assert not hasattr(output_module, "warning")
        assert not hasattr(output_module, "debug")
        assert not hasattr(OutputManager, "is_verbose")
