"""Shared test fixtures for apsis.

Provides a recording :class:`httpx.MockTransport`, an opened
:class:`~apsis.api.Apsis` facade wired to it, isolated config directories,
and output-state management.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import httpx
import pytest

from apsis.api import Apsis
from apsis.client.transport import Transport
from apsis.output import OutputFormat, OutputManager, reset_output, set_output

BASE_URL = "https://api.example.com"
API_KEY = "test-key"


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager binds sys.stdout/sys.stderr at creation time; a
    manager created under CliRunner would otherwise keep closed streams.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# HTTP recording
# ---------------------------------------------------------------------------


class Recorder:
    """MockTransport handler that records requests and replays queued responses.

    Without queued responses every request is answered with ``200 {}``.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response] = []

    def queue(self, *responses: httpx.Response) -> None:
        self._responses.extend(responses)

    def queue_json(self, data: Any, status_code: int = 200) -> None:
        self.queue(httpx.Response(status_code, json=data))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._responses:
            return self._responses.pop(0)
        return httpx.Response(200, json={})

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def last_json(self) -> Optional[Any]:
        content = self.last.content
        return json.loads(content) if content else None


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def transport(recorder: Recorder) -> Transport:
    """An opened transport whose traffic goes to *recorder*."""
    t = Transport(
        api_key=API_KEY,
        base_url=BASE_URL,
        http_transport=httpx.MockTransport(recorder),
    )
    with t:
        yield t


@pytest.fixture
def apsis(transport: Transport) -> Apsis:
    return Apsis(transport)


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate configuration to a temporary directory.

    Points XDG_CONFIG_HOME and XDG_DATA_HOME into tmp_path, forces the XDG
    layout, clears APSIS_* environment variables and changes the working
    directory to tmp_path.
    """
    monkeypatch.setattr("apsis.config._is_xdg_platform", lambda: True)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    for var in ["APSIS_API_KEY", "APSIS_BASE_URL"]:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# Output fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def quiet_output() -> OutputManager:
    """Install a quiet, plain-format OutputManager for the test."""
    output = OutputManager(format=OutputFormat.PLAIN, no_color=True, quiet=True)
    set_output(output)
    yield output
    reset_output()


@pytest.fixture
def cli_runner():
    from typer.testing import CliRunner

    return CliRunner()
