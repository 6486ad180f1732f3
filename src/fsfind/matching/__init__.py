"""Search pattern matching."""

from .pattern import MatchMode, PatternMatcher

__all__ = ["MatchMode", "PatternMatcher"]
