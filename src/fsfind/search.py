"""Search facade combining the directory walker with a pattern matcher."""

from __future__ import annotations

import logging
import os
import time
from enum import Enum
from typing import Iterator, Optional

from fsfind.matching import PatternMatcher
from fsfind.walker import TreeWalker, WalkerConfig, WalkStats
from fsfind.walker.tree_walker import PathLike

logger = logging.getLogger(__name__)


class MatchTarget(str, Enum):
    """Which part of a file path the pattern is tested against."""

    PATH = "path"
    NAME = "name"


class SearchResults:
    """Lazy, single-use sequence of matching file paths.

    Iterating pulls files from the walker one at a time and returns those
    the matcher accepts. Counters are updated as the walk progresses, so
    they are final once iteration stops.
    """

    def __init__(
        self,
        walker: TreeWalker,
        matcher: PatternMatcher,
        target: MatchTarget = MatchTarget.PATH,
    ) -> None:
        self._walker = walker
        self._matcher = matcher
        self._target = MatchTarget(target)
        self._started = time.perf_counter()
        self._finished: Optional[float] = None
        self.files_checked = 0
        self.matches = 0

    @property
    def stats(self) -> WalkStats:
        return self._walker.stats

    @property
    def elapsed(self) -> float:
        """Seconds since the search started, frozen once it completes."""
        end = self._finished if self._finished is not None else time.perf_counter()
        return end - self._started

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        for path in self._walker:
            self.files_checked += 1
            text = os.path.basename(path) if self._target is MatchTarget.NAME else path
            if self._matcher.is_match(text):
                self.matches += 1
                return path
        if self._finished is None:
            self._finished = time.perf_counter()
            logger.debug(
                "Search finished: %d of %d files matched in %.3fs",
                self.matches,
                self.files_checked,
                self.elapsed,
            )
        raise StopIteration

    def close(self) -> None:
        self._walker.close()
        if self._finished is None:
            self._finished = time.perf_counter()

    def __enter__(self) -> "SearchResults":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def search_paths(
    root: PathLike,
    matcher: PatternMatcher,
    config: Optional[WalkerConfig] = None,
    *,
    target: MatchTarget = MatchTarget.PATH,
) -> SearchResults:
    """Start a search under ``root``.

    The root is opened before this function returns, so an invalid or
    unreadable root raises here and no path is ever produced.

    Raises:
        InvalidRootError: ``root`` does not exist or is not a directory.
        RootOpenError: ``root`` cannot be read.
    """
    walker = TreeWalker(root, config)
    return SearchResults(walker, matcher, target)
