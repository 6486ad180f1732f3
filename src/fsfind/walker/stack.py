"""Flat stack of open directory handles; the list index is the depth."""

from __future__ import annotations

from typing import Iterator, List

from .handle import DirectoryHandle


class TraversalStack:
    """Open directories from the walk root (index 0) to the current directory."""

    def __init__(self) -> None:
        self._handles: List[DirectoryHandle] = []

    def __len__(self) -> int:
        return len(self._handles)

    def __bool__(self) -> bool:
        return bool(self._handles)

    def __iter__(self) -> Iterator[DirectoryHandle]:
        return iter(self._handles)

    @property
    def depth(self) -> int:
        """Depth of the current directory; the root is 0, an empty stack is -1."""
        return len(self._handles) - 1

    @property
    def top(self) -> DirectoryHandle:
        if not self._handles:
            raise IndexError("top of empty traversal stack")
        return self._handles[-1]

    def push(self, handle: DirectoryHandle) -> None:
        self._handles.append(handle)

    def pop(self) -> DirectoryHandle:
        """Remove the current directory and release its cursor."""
        handle = self._handles.pop()
        handle.close()
        return handle

    def close_all(self) -> None:
        """Release every open handle, innermost first."""
        while self._handles:
            self.pop()
