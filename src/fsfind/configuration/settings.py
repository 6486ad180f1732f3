"""Typed settings management for fsfind.

User defaults for searches are stored as JSON and wrapped in Pydantic
models so the CLI and the search layer can rely on validated values.
Explicit overrides win over environment variables, which win over the
file.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, ValidationError

from fsfind.errors import InvalidConfigError
from fsfind.matching import MatchMode
from fsfind.search import MatchTarget
from fsfind.walker import DEFAULT_MAX_DEPTH, WalkerConfig


DEFAULT_CONFIG_PATH = Path.home() / ".fsfind" / "config.json"


class SearchSettings(BaseModel):
    """Defaults applied to every search."""

    recurse: bool = Field(False, description="Descend into subdirectories")
    max_depth: int = Field(DEFAULT_MAX_DEPTH, ge=1, le=4096, description="Maximum open directory levels")
    debug_logging: bool = Field(False, description="Report skipped entries and directories")
    match_mode: MatchMode = Field(MatchMode.REGEX, description="How patterns are interpreted")
    target: MatchTarget = Field(MatchTarget.PATH, description="Match against the full path or the file name")

    def walker_config(self) -> WalkerConfig:
        return WalkerConfig(
            recurse=self.recurse,
            max_depth=self.max_depth,
            debug_logging=self.debug_logging,
        )


class Settings(BaseModel):
    """Root configuration state."""

    search: SearchSettings = Field(default_factory=SearchSettings)


def load_settings(path: Path = DEFAULT_CONFIG_PATH) -> Settings:
    """Load settings from disk or raise if invalid."""

    if not path.exists():
        raise FileNotFoundError(f"Settings file not found at {path}")
    try:
        payload = json.loads(path.read_text())
    except json.JSONDecodeError as exc:
        raise InvalidConfigError(f"Settings file {path} is not valid JSON: {exc}") from exc
    try:
        return Settings.model_validate(payload)
    except ValidationError as exc:
        raise InvalidConfigError(f"Invalid configuration: {exc}") from exc


def save_settings(settings: Settings, path: Path = DEFAULT_CONFIG_PATH) -> None:
    """Persist settings to disk."""

    payload = settings.model_dump(mode="json")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2))


def resolve_settings(
    path: Path = DEFAULT_CONFIG_PATH,
    *,
    overrides: Optional[Dict[str, Any]] = None,
) -> Settings:
    """Build effective settings from the file, the environment and overrides.

    A missing settings file means defaults. ``overrides`` keys are
    ``SearchSettings`` field names; ``None`` values are ignored.
    """

    settings = load_settings(path) if path.exists() else Settings()
    merged = settings.model_dump(mode="python")
    search = _apply_env_overrides(merged["search"])
    for key, value in (overrides or {}).items():
        if value is not None:
            search[key] = value
    try:
        return Settings.model_validate(merged)
    except ValidationError as exc:
        raise InvalidConfigError(f"Invalid configuration: {exc}") from exc


def _apply_env_overrides(search: Dict[str, Any]) -> Dict[str, Any]:
    _set_env_override(search, "recurse", "FSFIND_RECURSE", cast_bool=True)
    _set_env_override(search, "max_depth", "FSFIND_MAX_DEPTH", cast_int=True)
    _set_env_override(search, "debug_logging", "FSFIND_DEBUG", cast_bool=True)
    _set_env_override(search, "match_mode", "FSFIND_MATCH_MODE")
    _set_env_override(search, "target", "FSFIND_TARGET")
    return search


def _set_env_override(
    mapping: Dict[str, Any],
    key: str,
    env_name: str,
    *,
    cast_bool: bool = False,
    cast_int: bool = False,
) -> None:
    raw = os.getenv(env_name)
    if raw is None:
        return
    if cast_bool:
        mapping[key] = raw.lower() in {"1", "true", "yes"}
    elif cast_int:
        try:
            mapping[key] = int(raw)
        except ValueError as exc:
            raise InvalidConfigError(f"{env_name} must be an integer, got {raw!r}") from exc
    else:
        mapping[key] = raw
