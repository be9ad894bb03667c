"""Config commands -- view and modify the persisted settings.

Provides the ``apsis config`` sub-command group for reading, updating and
resetting :class:`~apsis.models.Settings`. The API key itself is never
stored; ``api_key_source`` says where to read it from.
"""

from __future__ import annotations

import typer

from apsis.config import load_settings, save_settings, settings_path
from apsis.models import Settings
from apsis.output import error, format_response, info, success

config_app = typer.Typer(no_args_is_help=True)


@config_app.command("show")
def config_show() -> None:
    """Show the current settings.

    Example::

        apsis config show
        apsis --json config show
    """
    settings = load_settings()
    info(f"Config file: {settings_path()}")
    format_response(settings.model_dump(mode="json"))


@config_app.command("set")
def config_set(
    key: str = typer.Argument(help="Setting key (dot notation, e.g. 'request.timeout')."),
    value: str = typer.Argument(help="Value to set."),
) -> None:
    """Set a configuration value.

    The value is coerced to the type of the existing field (bool, int or str)
    and the result is validated before saving.

    Example::

        apsis config set base_url https://se.api.anpdm.com
        apsis config set api_key_source file:~/.apsis-key
        apsis config set request.timeout 60
    """
    data = load_settings().model_dump(mode="json")

    keys = key.split(".")
    target = data
    for k in keys[:-1]:
        if k not in target or not isinstance(target[k], dict):
            error(f"Invalid config key: {key}")
            raise typer.Exit(code=2)
        target = target[k]

    final_key = keys[-1]
    if final_key not in target or isinstance(target[final_key], dict):
        error(f"Unknown config key: {key}")
        raise typer.Exit(code=2)

    current = target[final_key]
    if isinstance(current, bool):
        coerced: object = value.lower() in ("true", "1", "yes")
    elif isinstance(current, int):
        try:
            coerced = int(value)
        except ValueError:
            error(f"Expected integer for {key}, got: {value}")
            raise typer.Exit(code=2) from None
    else:
        coerced = value

    target[final_key] = coerced

    try:
        settings = Settings.model_validate(data)
    except ValueError as exc:
        error(f"Validation error: {exc}")
        raise typer.Exit(code=2) from None

    save_settings(settings)
    success(f"Set {key} = {coerced}")


@config_app.command("reset")
def config_reset(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation."),
) -> None:
    """Reset all settings to their defaults."""
    if not force and not typer.confirm("Reset all settings to defaults?"):
        info("Cancelled.")
        raise typer.Exit()

    save_settings(Settings())
    success("Configuration reset to defaults.")
