"""Centralized error definitions for fsfind.

This module provides a unified error hierarchy for the directory walker,
the pattern matcher and the settings layer.

Usage:
    from fsfind.errors import FsfindError, RootOpenError, handle_error

    try:
        results = search_paths(root, matcher, config)
    except FsfindError as e:
        print(handle_error(e))

Fatal errors (``recoverable = False``) reach the caller. Recoverable walk
errors are built by the walker for its diagnostic log records and are never
raised out of a walk.
"""

from __future__ import annotations

from fsfind.errors.user_messages import (
    format_error_for_cli,
    format_error_for_user,
    get_recovery_suggestion,
    get_user_message,
)


# =============================================================================
# Base Error
# =============================================================================


class FsfindError(Exception):
    """Base exception for all fsfind errors.

    Attributes:
        code: Error code for categorization
        user_message: User-friendly message (optional override)
        recoverable: Whether the error is potentially recoverable
        details: Additional error details for debugging
    """

    code: str = "FSFIND_ERROR"
    default_message: str = "An unexpected error occurred"
    recoverable: bool = True

    def __init__(
        self,
        message: str | None = None,
        *,
        user_message: str | None = None,
        details: dict | None = None,
    ) -> None:
        self.message = message or self.default_message
        self._user_message = user_message
        self.details = details or {}
        super().__init__(self.message)

    @property
    def user_message(self) -> str:
        """Get user-friendly message."""
        if self._user_message:
            return self._user_message
        return get_user_message(self)

    @property
    def recovery_suggestion(self) -> str:
        """Get recovery suggestion."""
        return get_recovery_suggestion(self)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "user_message": self.user_message,
            "recoverable": self.recoverable,
            "details": self.details,
        }


# =============================================================================
# Walk Errors
# =============================================================================


class WalkError(FsfindError):
    """Base error for directory walk operations."""

    code = "WALK_ERROR"
    default_message = "Directory walk failed"


class DirectoryOpenError(WalkError):
    """A directory could not be opened for enumeration.

    Attributes:
        path: Directory that failed to open
        cause: Underlying ``OSError``
    """

    code = "DIRECTORY_OPEN_ERROR"
    default_message = "Cannot open directory"
    recoverable = True

    def __init__(self, path: str, cause: OSError, *, message: str | None = None) -> None:
        self.path = path
        self.cause = cause
        super().__init__(
            message or f"Cannot open directory {path}: {cause.strerror or cause}",
            details={"path": path, "errno": cause.errno},
        )

    @classmethod
    def from_error(cls, error: "DirectoryOpenError") -> "DirectoryOpenError":
        """Re-tag an open failure with this class, keeping path and cause."""
        return cls(error.path, error.cause)


class RootOpenError(DirectoryOpenError):
    """The walk root could not be opened. Fatal; nothing is traversed."""

    code = "ROOT_OPEN_ERROR"
    default_message = "Cannot open search root"
    recoverable = False


class InvalidRootError(RootOpenError):
    """The walk root does not exist or is not a directory."""

    code = "INVALID_ROOT"
    default_message = "Search root is not a directory"


class DescendantOpenError(DirectoryOpenError):
    """A directory below the root could not be opened; its subtree is skipped."""

    code = "DESCENDANT_OPEN_ERROR"
    default_message = "Cannot open subdirectory"


class EntryStatError(WalkError):
    """The type of a single directory entry could not be determined."""

    code = "ENTRY_STAT_ERROR"
    default_message = "Cannot inspect directory entry"
    recoverable = True

    def __init__(self, path: str, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(
            f"Cannot inspect {path}: {cause.strerror or cause}",
            details={"path": path, "errno": cause.errno},
        )


# =============================================================================
# Pattern Errors
# =============================================================================


class PatternError(FsfindError):
    """Base error for pattern handling."""

    code = "PATTERN_ERROR"
    default_message = "Pattern error"


class MatchCompileError(PatternError):
    """The search pattern failed to compile."""

    code = "MATCH_COMPILE_ERROR"
    default_message = "Invalid search pattern"
    recoverable = False

    def __init__(self, pattern: str, cause: Exception) -> None:
        self.pattern = pattern
        self.cause = cause
        super().__init__(
            f"Invalid pattern {pattern!r}: {cause}",
            details={"pattern": pattern},
        )


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(FsfindError):
    """Base error for configuration issues."""

    code = "CONFIGURATION_ERROR"
    default_message = "Configuration error"
    recoverable = True


class InvalidConfigError(ConfigurationError):
    """Configuration is invalid."""

    code = "INVALID_CONFIG"
    default_message = "Invalid configuration"


# =============================================================================
# Error Handler
# =============================================================================


def handle_error(error: Exception) -> str:
    """Handle an error and return a user-friendly message.

    Args:
        error: The exception to handle

    Returns:
        User-friendly error message with recovery suggestion
    """
    return format_error_for_user(error)


def is_recoverable(error: Exception) -> bool:
    """Check if an error is potentially recoverable.

    Args:
        error: The exception to check

    Returns:
        True if the error is recoverable
    """
    if isinstance(error, FsfindError):
        return error.recoverable
    return False


__all__ = [
    # Base
    "FsfindError",
    # Walk
    "WalkError",
    "DirectoryOpenError",
    "RootOpenError",
    "InvalidRootError",
    "DescendantOpenError",
    "EntryStatError",
    # Pattern
    "PatternError",
    "MatchCompileError",
    # Configuration
    "ConfigurationError",
    "InvalidConfigError",
    # Handlers
    "handle_error",
    "is_recoverable",
    "format_error_for_cli",
]
