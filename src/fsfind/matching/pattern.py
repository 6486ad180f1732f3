"""Pattern compilation and matching for file paths."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from fsfind.errors import MatchCompileError


class MatchMode(str, Enum):
    """How the user's pattern is interpreted."""

    LITERAL = "literal"
    REGEX = "regex"


@dataclass(frozen=True)
class PatternMatcher:
    """A compiled search pattern.

    Matching is unanchored: a path matches when the expression is found
    anywhere in it.
    """

    pattern: str
    mode: MatchMode
    regex: re.Pattern

    @classmethod
    def compile(cls, pattern: str, mode: MatchMode = MatchMode.REGEX) -> "PatternMatcher":
        """Build a matcher, escaping every metacharacter in literal mode.

        Raises:
            MatchCompileError: the pattern is not a valid regular expression.
        """
        mode = MatchMode(mode)
        source = re.escape(pattern) if mode is MatchMode.LITERAL else pattern
        try:
            regex = re.compile(source)
        except re.error as exc:
            raise MatchCompileError(pattern, exc) from exc
        return cls(pattern=pattern, mode=mode, regex=regex)

    def is_match(self, text: str) -> bool:
        return self.regex.search(text) is not None
