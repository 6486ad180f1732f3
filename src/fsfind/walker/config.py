"""Configuration and counters for a single directory walk."""

from __future__ import annotations

from dataclasses import asdict, dataclass

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_MAX_DEPTH = 16


class WalkerConfig(BaseModel):
    """Immutable settings for one walk."""

    model_config = ConfigDict(frozen=True)

    recurse: bool = Field(False, description="Descend into subdirectories")
    max_depth: int = Field(
        DEFAULT_MAX_DEPTH,
        ge=1,
        description="Number of directory levels that may be open at once; 1 keeps the walk in the root",
    )
    debug_logging: bool = Field(
        False,
        description="Log one diagnostic record per skipped entry or directory",
    )


@dataclass
class WalkStats:
    """Running counters for a walk."""

    files_seen: int = 0
    dirs_opened: int = 0
    symlinks_skipped: int = 0
    boundary_dirs_skipped: int = 0
    errors: int = 0

    def as_dict(self) -> dict[str, int]:
        return asdict(self)
