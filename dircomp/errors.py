"""Error taxonomy for dircomp.

Fatal errors (usage, precondition, unreadable root, bad config) propagate to
the CLI. Local errors (unreadable subtree or file) are caught by the walk and
reported as problems on the diagnostic stream.
"""
from __future__ import annotations


class DircompError(RuntimeError):
    pass


class UsageError(DircompError):
    pass


class PreconditionError(DircompError):
    pass


class RootUnreadableError(DircompError):
    pass


class ConfigError(DircompError):
    pass


class SubtreeUnreadableError(DircompError):
    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


class FileUnreadableError(DircompError):
    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path
