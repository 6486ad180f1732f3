"""User-friendly error messages for fsfind.

This module provides human-readable error messages and recovery suggestions
for every error code, so the command line never shows a raw traceback for
an expected failure.
"""

from __future__ import annotations

from typing import Any


# =============================================================================
# Error Message Catalog
# =============================================================================

ERROR_MESSAGES: dict[str, str] = {
    # Walk errors
    "WALK_ERROR": "The directory walk failed.",
    "DIRECTORY_OPEN_ERROR": "A directory couldn't be opened for reading.",
    "ROOT_OPEN_ERROR": "The search root couldn't be opened for reading.",
    "INVALID_ROOT": "The search root doesn't exist or isn't a directory.",
    "DESCENDANT_OPEN_ERROR": "A subdirectory couldn't be opened and was skipped.",
    "ENTRY_STAT_ERROR": "A directory entry couldn't be inspected and was skipped.",
    # Pattern errors
    "PATTERN_ERROR": "The search pattern couldn't be used.",
    "MATCH_COMPILE_ERROR": "The search pattern isn't a valid regular expression.",
    # Configuration errors
    "CONFIGURATION_ERROR": "There's a configuration issue.",
    "INVALID_CONFIG": "The configuration is invalid. Check settings.",
    # Generic
    "FSFIND_ERROR": "An unexpected error occurred. Please try again.",
    "UNKNOWN_ERROR": "Something went wrong. Please try again.",
}


# =============================================================================
# Recovery Suggestions
# =============================================================================

RECOVERY_SUGGESTIONS: dict[str, str] = {
    # Walk errors
    "WALK_ERROR": "Check that the search root is readable and retry.",
    "DIRECTORY_OPEN_ERROR": "Check the directory permissions.",
    "ROOT_OPEN_ERROR": "Check the permissions on the search root.",
    "INVALID_ROOT": "Pass an existing directory as the search root.",
    "DESCENDANT_OPEN_ERROR": "Run with --debug to see which directories were skipped.",
    "ENTRY_STAT_ERROR": "Run with --debug to see which entries were skipped.",
    # Pattern errors
    "PATTERN_ERROR": "Check the pattern syntax.",
    "MATCH_COMPILE_ERROR": "Fix the expression, or use -F to search for the text literally.",
    # Configuration errors
    "CONFIGURATION_ERROR": "Check config: fsfind config show",
    "INVALID_CONFIG": "Recreate the file: fsfind config init",
    # Generic
    "FSFIND_ERROR": "If this persists, please report the issue.",
    "UNKNOWN_ERROR": "Retry with --debug and report if the issue continues.",
}


# =============================================================================
# Helper Functions
# =============================================================================


def _error_code(error: Any) -> str:
    if hasattr(error, "code"):
        return error.code
    if isinstance(error, str):
        return error
    return type(error).__name__.upper()


def get_user_message(error: Any) -> str:
    """Get user-friendly message for an error.

    Args:
        error: The error (can be Exception or error code string)

    Returns:
        User-friendly error message
    """
    return ERROR_MESSAGES.get(_error_code(error), ERROR_MESSAGES["UNKNOWN_ERROR"])


def get_recovery_suggestion(error: Any) -> str:
    """Get recovery suggestion for an error.

    Args:
        error: The error (can be Exception or error code string)

    Returns:
        Recovery suggestion
    """
    return RECOVERY_SUGGESTIONS.get(_error_code(error), RECOVERY_SUGGESTIONS["UNKNOWN_ERROR"])


def format_error_for_user(error: Any) -> str:
    """Format a complete user-friendly error message.

    Args:
        error: The error to format

    Returns:
        Complete error message with recovery suggestion
    """
    message = get_user_message(error)
    suggestion = get_recovery_suggestion(error)

    return f"{message}\n\nSuggestion: {suggestion}"


def format_error_for_cli(error: Any) -> str:
    """Format error for CLI output, including the error code and details."""
    code = getattr(error, "code", "ERROR")
    lines = [f"Error [{code}]: {get_user_message(error)}"]

    message = getattr(error, "message", None) or str(error)
    if message:
        lines.append(message)

    lines.append("")
    lines.append(f"Suggestion: {get_recovery_suggestion(error)}")

    details = getattr(error, "details", None)
    if details:
        lines.append("")
        lines.append("Details:")
        for key, value in details.items():
            lines.append(f"  {key}: {value}")

    return "\n".join(lines)


__all__ = [
    "ERROR_MESSAGES",
    "RECOVERY_SUGGESTIONS",
    "get_user_message",
    "get_recovery_suggestion",
    "format_error_for_user",
    "format_error_for_cli",
]
