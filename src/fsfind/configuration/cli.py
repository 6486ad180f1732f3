"""CLI commands for managing fsfind settings."""

from __future__ import annotations

from pathlib import Path
from typing import Any, List

import typer
from pydantic import ValidationError

from fsfind.configuration.settings import (
    DEFAULT_CONFIG_PATH,
    Settings,
    load_settings,
    save_settings,
)
from fsfind.errors import FsfindError


config_app = typer.Typer(help="Manage fsfind configuration")


@config_app.command("init")
def init_config(
    config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, help="Path to config file"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file with defaults"),
) -> None:
    """Write a settings file with default values."""

    if config_path.exists() and not force:
        typer.echo(f"Configuration already exists at {config_path} (use --force to reset)")
        raise typer.Exit(code=1)
    settings = Settings()
    save_settings(settings, config_path)
    typer.echo(f"Configuration initialized at {config_path}")
    typer.echo(_summarize_settings(settings))


@config_app.command("show")
def show_config(config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, help="Path to config")) -> None:
    """Display the stored configuration."""

    try:
        settings = load_settings(config_path)
    except (FileNotFoundError, FsfindError) as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)
    typer.echo(_summarize_settings(settings))


@config_app.command("set")
def set_config(
    key: str = typer.Argument(..., help="Configuration key, e.g. search.max_depth"),
    value: str = typer.Argument(..., help="New value"),
    config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, help="Path to config"),
) -> None:
    """Update a configuration value."""

    try:
        settings = load_settings(config_path) if config_path.exists() else Settings()
    except FsfindError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)
    payload = settings.model_dump(mode="python")
    _assign(payload, key.split("."), value)
    try:
        updated = Settings.model_validate(payload)
    except ValidationError as exc:
        typer.echo(f"Invalid value for {key}: {exc}", err=True)
        raise typer.Exit(code=1)
    save_settings(updated, config_path)
    typer.echo(f"Updated {key}")


@config_app.command("validate")
def validate_config(
    config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, help="Path to config file"),
) -> None:
    """Validate configuration file for correctness."""

    try:
        settings = load_settings(config_path)
    except (FileNotFoundError, FsfindError) as e:
        typer.echo(f"❌ Configuration invalid: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"✅ Configuration valid at {config_path}")
    typer.echo(_summarize_settings(settings))


def _assign(payload: dict, keys: List[str], value: Any) -> None:
    target = payload
    for key in keys[:-1]:
        if key not in target or not isinstance(target[key], dict):
            raise typer.BadParameter(f"Unknown configuration key: {'.'.join(keys)}")
        target = target[key]
    if keys[-1] not in target:
        raise typer.BadParameter(f"Unknown configuration key: {'.'.join(keys)}")
    target[keys[-1]] = value


def _summarize_settings(settings: Settings) -> str:
    search = settings.search
    return "\n".join(
        [
            f"recurse: {search.recurse}",
            f"max_depth: {search.max_depth}",
            f"debug_logging: {search.debug_logging}",
            f"match_mode: {search.match_mode.value}",
            f"target: {search.target.value}",
        ]
    )
