"""Lazy, depth-bounded directory walking."""

from .classifier import Entry, EntryKind, classify
from .config import DEFAULT_MAX_DEPTH, WalkerConfig, WalkStats
from .handle import DirectoryHandle
from .stack import TraversalStack
from .tree_walker import TreeWalker, WalkerState

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "DirectoryHandle",
    "Entry",
    "EntryKind",
    "TraversalStack",
    "TreeWalker",
    "WalkStats",
    "WalkerConfig",
    "WalkerState",
    "classify",
]
