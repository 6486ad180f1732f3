"""Lazy directory cursor owning a single ``os.scandir`` iterator."""

from __future__ import annotations

import logging
import os
from typing import Optional

from fsfind.errors import DirectoryOpenError

logger = logging.getLogger(__name__)


class DirectoryHandle:
    """One open directory, read one entry at a time.

    The handle never buffers the directory listing: each ``next_raw`` call
    pulls a single entry from the underlying scandir cursor. The cursor is
    closed as soon as it reports exhaustion, or explicitly via ``close``.
    """

    __slots__ = ("path", "read_error", "_cursor")

    def __init__(self, path: str, cursor) -> None:
        self.path = path
        self.read_error: Optional[OSError] = None
        self._cursor = cursor

    @classmethod
    def open(cls, path: str) -> "DirectoryHandle":
        """Open ``path`` for enumeration.

        Raises:
            DirectoryOpenError: the directory is missing, unreadable or
                not a directory.
        """
        try:
            cursor = os.scandir(path)
        except OSError as exc:
            raise DirectoryOpenError(path, exc) from exc
        logger.debug("Opened directory %s", path)
        return cls(path, cursor)

    @property
    def closed(self) -> bool:
        return self._cursor is None

    def next_raw(self) -> Optional[os.DirEntry]:
        """Return the next raw entry, or ``None`` once the directory is exhausted."""
        if self._cursor is None:
            return None
        try:
            return next(self._cursor)
        except StopIteration:
            self.close()
            return None
        except OSError as exc:
            # The cursor cannot be resumed after a read failure.
            self.read_error = exc
            self.close()
            return None

    def close(self) -> None:
        if self._cursor is None:
            return
        self._cursor.close()
        self._cursor = None
        logger.debug("Closed directory %s", self.path)

    def __enter__(self) -> "DirectoryHandle":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"DirectoryHandle({self.path!r}, {state})"
