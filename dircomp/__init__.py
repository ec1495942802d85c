"""
dircomp Package

Compares a source directory tree to a destination tree and reports added,
removed and changed entries, using content digests rather than timestamps.
"""

__version__ = "1.0.0"

from .config import DiffOptions
from .differ import TreeDiffer, diff_trees
from .hasher import ContentHasher
from .report import Classification, Problem, Report

__all__ = [
    "Classification",
    "ContentHasher",
    "DiffOptions",
    "Problem",
    "Report",
    "TreeDiffer",
    "diff_trees",
]
