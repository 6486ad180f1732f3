"""Pull-based, depth-bounded directory walker.

The walker is an iterator over file paths. Every ``next()`` call advances
the walk only as far as the next file, then suspends with the current
directory still open, so a consumer that stops pulling leaves at most
``depth + 1`` scandir cursors open until the walker is closed or dropped.

Recursion never touches the Python call stack: open directories live on a
``TraversalStack`` whose length is bounded by ``WalkerConfig.max_depth``.
"""

from __future__ import annotations

import logging
import os
from enum import Enum
from typing import Iterator, Optional, Union

from fsfind.errors import (
    DescendantOpenError,
    DirectoryOpenError,
    EntryStatError,
    InvalidRootError,
    RootOpenError,
    WalkError,
)

from .classifier import EntryKind, classify
from .config import WalkerConfig, WalkStats
from .handle import DirectoryHandle
from .stack import TraversalStack

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class WalkerState(str, Enum):
    ACTIVE = "active"
    EXHAUSTED = "exhausted"


def _log_extra(
    *,
    path: str | None = None,
    depth: int | None = None,
    error: WalkError | None = None,
    **metadata: object,
) -> dict[str, object]:
    """Build structured logging context for walk diagnostics."""

    extra: dict[str, object] = {}
    if path is not None:
        extra["walk_path"] = path
    if depth is not None:
        extra["walk_depth"] = depth
    if error is not None:
        extra["walk_error_code"] = error.code
        cause = getattr(error, "cause", None)
        if cause is not None and getattr(cause, "errno", None) is not None:
            extra["walk_errno"] = cause.errno
    for key, value in metadata.items():
        if value is not None:
            extra[f"walk_{key}"] = value
    return extra


def _root_error(error: DirectoryOpenError) -> RootOpenError:
    if isinstance(error.cause, (FileNotFoundError, NotADirectoryError)):
        return InvalidRootError.from_error(error)
    return RootOpenError.from_error(error)


class TreeWalker:
    """Yield the paths of files under ``root``, one per ``next()`` call.

    Symlinks are never yielded or followed. Subdirectories are entered only
    when ``config.recurse`` is set and the child's depth stays below
    ``config.max_depth``; directories at the boundary are never opened.
    Unreadable subdirectories and entries whose type cannot be read are
    skipped, counted in ``stats.errors`` and, with ``config.debug_logging``,
    reported as a single warning each.

    Raises:
        InvalidRootError: ``root`` does not exist or is not a directory.
        RootOpenError: ``root`` exists but cannot be read.
    """

    def __init__(self, root: PathLike, config: Optional[WalkerConfig] = None) -> None:
        self._stack = TraversalStack()
        self._state = WalkerState.ACTIVE
        self.root = os.fspath(root)
        self.config = config or WalkerConfig()
        self.stats = WalkStats()

        try:
            handle = DirectoryHandle.open(self.root)
        except DirectoryOpenError as exc:
            self._state = WalkerState.EXHAUSTED
            raise _root_error(exc) from exc.cause
        self._stack.push(handle)
        self.stats.dirs_opened += 1

    @property
    def state(self) -> WalkerState:
        return self._state

    @property
    def depth(self) -> int:
        """Depth of the directory being read; -1 once the walk is over."""
        return self._stack.depth

    @property
    def open_handles(self) -> int:
        return len(self._stack)

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        stack = self._stack
        while stack:
            top = stack.top
            raw = top.next_raw()
            if raw is None:
                if top.read_error is not None:
                    self._report(
                        WalkError(f"Error reading directory {top.path}: {top.read_error}"),
                        path=top.path,
                    )
                stack.pop()
                continue

            entry = classify(raw)
            if entry.kind is EntryKind.FILE:
                self.stats.files_seen += 1
                return entry.path
            if entry.kind is EntryKind.DIRECTORY:
                if self.config.recurse:
                    self._descend(entry.path)
            elif entry.kind is EntryKind.SYMLINK:
                self.stats.symlinks_skipped += 1
            else:
                self._report(EntryStatError(entry.path, entry.cause), path=entry.path)

        self._state = WalkerState.EXHAUSTED
        raise StopIteration

    def _descend(self, path: str) -> None:
        if self._stack.depth + 1 >= self.config.max_depth:
            self.stats.boundary_dirs_skipped += 1
            return
        try:
            handle = DirectoryHandle.open(path)
        except DirectoryOpenError as exc:
            self._report(DescendantOpenError.from_error(exc), path=path)
            return
        self._stack.push(handle)
        self.stats.dirs_opened += 1

    def _report(self, error: WalkError, *, path: str) -> None:
        self.stats.errors += 1
        if self.config.debug_logging:
            logger.warning(
                "%s; skipped",
                error.message,
                extra=_log_extra(path=path, depth=self._stack.depth, error=error),
            )

    def close(self) -> None:
        """Release every open directory and end the walk."""
        self._stack.close_all()
        self._state = WalkerState.EXHAUSTED

    def __enter__(self) -> "TreeWalker":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __del__(self) -> None:
        stack = getattr(self, "_stack", None)
        if stack is not None:
            stack.close_all()
