"""Classification of raw directory entries."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class EntryKind(str, Enum):
    """What a directory entry turned out to be."""

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    ERROR = "error"


@dataclass(frozen=True)
class Entry:
    """A classified directory entry."""

    path: str
    kind: EntryKind
    cause: Optional[OSError] = None

    @property
    def name(self) -> str:
        return os.path.basename(self.path)


def classify(raw_entry: os.DirEntry) -> Entry:
    """Resolve the kind of ``raw_entry`` without following symlinks.

    Symlinks are checked first so a link to a directory is never reported
    as a directory. Anything that is neither a symlink nor a directory
    (regular files, fifos, sockets, devices) is a file. A failure to read
    the entry's type is returned as an ``ERROR`` entry instead of raised.
    """
    path = raw_entry.path
    try:
        if raw_entry.is_symlink():
            return Entry(path, EntryKind.SYMLINK)
        if raw_entry.is_dir(follow_symlinks=False):
            return Entry(path, EntryKind.DIRECTORY)
    except OSError as exc:
        return Entry(path, EntryKind.ERROR, cause=exc)
    return Entry(path, EntryKind.FILE)
