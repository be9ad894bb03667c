"""Configuration management with XDG paths, atomic writes, and precedence resolution.

This module handles all persistent configuration for apsis:

* **Directory layout** -- XDG Base Directory compliant on Linux/BSD,
  ``~/.apsis/`` on macOS and Windows. See :func:`get_config_dir` and
  :func:`get_data_dir`.
* **Settings** -- A single :class:`~apsis.models.Settings` JSON file
  holding the base URL, the API key source and request defaults.
* **Precedence resolution** -- :func:`resolve_settings` merges the CLI flag,
  environment variables and the settings file.
* **Credential resolution** -- :func:`resolve_credential` reads the API key
  from an env var, a file, or an interactive prompt.

File writes use a temp-file-then-rename strategy (:func:`_atomic_write`).
"""

from __future__ import annotations

import getpass
import json
import os
import platform
import sys
import tempfile
from pathlib import Path
from typing import Optional

from apsis.exceptions import ConfigError
from apsis.models import Settings

_APP_NAME = "apsis"
_CONFIG_FILENAME = "config.json"

ENV_BASE_URL = "APSIS_BASE_URL"


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def _fallback_base_dir() -> Path:
    """Fallback base directory for non-XDG platforms (macOS, Windows)."""
    return Path.home() / f".{_APP_NAME}"


def _xdg_base(env_var: str, default_segments: tuple[str, ...]) -> Path:
    """Resolve an XDG base directory from an env var with fallback segments under $HOME."""
    env_value = os.environ.get(env_var, "")
    if env_value:
        return Path(env_value)
    base = Path.home()
    for seg in default_segments:
        base = base / seg
    return base


def get_config_dir() -> Path:
    """Return the configuration directory, creating it if necessary.

    On Linux/BSD: ``$XDG_CONFIG_HOME/apsis/`` (default ``~/.config/apsis/``).
    On macOS/Windows: ``~/.apsis/``.
    """
    if _is_xdg_platform():
        path = _xdg_base("XDG_CONFIG_HOME", (".config",)) / _APP_NAME
    else:
        path = _fallback_base_dir()
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_data_dir() -> Path:
    """Return the data directory (crash logs), creating it if necessary.

    On Linux/BSD: ``$XDG_DATA_HOME/apsis/`` (default ``~/.local/share/apsis/``).
    On macOS/Windows: ``~/.apsis/logs/``.
    """
    if _is_xdg_platform():
        path = _xdg_base("XDG_DATA_HOME", (".local", "share")) / _APP_NAME
    else:
        path = _fallback_base_dir() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


# --- Atomic file writes ---


def _atomic_write(path: Path, data: str) -> None:
    """Write data to file atomically using temp file + rename.

    The temporary file is created in the same directory as *path* so that
    ``os.replace`` is an atomic rename on POSIX systems. On failure the temp
    file is removed and the original exception re-raised.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    fd = None
    tmp_path: Optional[str] = None
    try:
        fd = tempfile.NamedTemporaryFile(
            mode="w",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        )
        tmp_path = fd.name
        fd.write(data)
        fd.flush()
        os.fsync(fd.fileno())
        fd.close()
        fd = None
        os.replace(tmp_path, path)
    except BaseException:
        if fd is not None:
            fd.close()
        if tmp_path is not None:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
        raise


# --- Settings ---


def settings_path() -> Path:
    """Path to the settings file."""
    return get_config_dir() / _CONFIG_FILENAME


def load_settings() -> Settings:
    """Load the settings from the config directory.

    Returns:
        The deserialised :class:`~apsis.models.Settings`, or a default
        instance if the file does not exist.

    Raises:
        ConfigError: If the file contains invalid JSON or fails validation.
    """
    path = settings_path()
    if not path.is_file():
        return Settings()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return Settings.model_validate(data)
    except (json.JSONDecodeError, ValueError) as exc:
        raise ConfigError(f"Invalid config at {path}: {exc}") from exc


def save_settings(settings: Settings) -> None:
    """Persist *settings* atomically to disk."""
    data = settings.model_dump(mode="json")
    _atomic_write(settings_path(), json.dumps(data, indent=2) + "\n")


def resolve_settings(cli_base_url: Optional[str] = None) -> Settings:
    """Resolve the effective settings.

    Precedence for ``base_url`` (high to low):
        1. CLI flag (``cli_base_url``)
        2. ``APSIS_BASE_URL`` environment variable
        3. Config file
        4. Default
    """
    settings = load_settings()

    env_base_url = os.environ.get(ENV_BASE_URL)
    if cli_base_url is not None:
        settings.base_url = cli_base_url
    elif env_base_url:
        settings.base_url = env_base_url

    return settings


# --- Credential source resolution ---


def resolve_credential(source: str) -> str:
    """Resolve the API key from its source descriptor.

    Supported formats:
        - ``"env:VAR_NAME"`` -- reads ``os.environ["VAR_NAME"]``
        - ``"file:/path/to/file"`` -- reads file content, stripped of whitespace
        - ``"prompt"`` -- prompts the user interactively (requires a TTY)

    Raises:
        ConfigError: If the source can't be resolved.
    """
    if source.startswith("env:"):
        var_name = source[4:]
        value = os.environ.get(var_name)
        if value is None:
            raise ConfigError(
                f"Environment variable '{var_name}' is not set (source: {source})"
            )
        return value

    if source.startswith("file:"):
        path = Path(source[5:]).expanduser()
        if not path.is_file():
            raise ConfigError(f"Credential file not found: {path} (source: {source})")
        try:
            return path.read_text(encoding="utf-8").strip()
        except OSError as exc:
            raise ConfigError(f"Cannot read credential file {path}: {exc}") from exc

    if source == "prompt":
        if not sys.stdin.isatty():
            raise ConfigError(
                "Cannot prompt for the API key: stdin is not a TTY (source: prompt)"
            )
        return getpass.getpass("APSIS API key: ")

    raise ConfigError(f"Unknown credential source format: {source}")
