"""
Recursive merge-walk over two directory trees.

Each level lists both directories, sorts them by name and advances a pair of
cursors in lockstep. Names only on one side are reported as added or removed,
matched directories are descended into, and matched files are compared by
content digest. Reports are yielded in walk order, so a subtree's lines land
at the position of its parent directory.
"""
from __future__ import annotations

import logging
import os
from collections.abc import Iterator

from .config import DiffOptions
from .errors import FileUnreadableError, RootUnreadableError, SubtreeUnreadableError
from .hasher import ContentHasher
from .listing import Entry, read_directory
from .report import Classification, Problem, ProblemKind, Report

logger = logging.getLogger(__name__)

WalkItem = Report | Problem


class TreeDiffer:
    def __init__(self, options: DiffOptions | None = None, hasher: ContentHasher | None = None):
        self.options = options or DiffOptions()
        self.hasher = hasher or ContentHasher(self.options.algorithm)

    def compare(self, source: str, dest: str) -> Iterator[WalkItem]:
        """
        List both roots and return an iterator over the walk.

        Root listing happens eagerly so that an unreadable root raises
        ``RootUnreadableError`` before any report is produced.
        """
        try:
            source_entries = read_directory(source)
        except OSError as exc:
            raise RootUnreadableError(f"cannot read source {source}") from exc
        try:
            dest_entries = read_directory(dest)
        except OSError as exc:
            raise RootUnreadableError(f"cannot read destination {dest}") from exc
        return self._walk(source, source_entries, dest, dest_entries)

    def _walk(
        self,
        source_base: str,
        source_entries: list[Entry],
        dest_base: str,
        dest_entries: list[Entry],
    ) -> Iterator[WalkItem]:
        debug = self.options.debug
        if debug:
            logger.debug('comparing directories "%s" and "%s"', source_base, dest_base)

        s, d = 0, 0
        while s < len(source_entries) or d < len(dest_entries):
            src = source_entries[s] if s < len(source_entries) else None
            dst = dest_entries[d] if d < len(dest_entries) else None
            if debug:
                logger.debug(
                    'comparing names "%s" and "%s"',
                    src.name if src else "",
                    dst.name if dst else "",
                )

            if src is None or (dst is not None and src.name > dst.name):
                yield Report(Classification.ADDED, dst.path, is_dir=dst.is_dir)
                d += 1
                continue
            if dst is None or src.name < dst.name:
                removed_path = os.path.normpath(os.path.join(dest_base, src.name))
                yield Report(Classification.REMOVED, removed_path, is_dir=src.is_dir)
                s += 1
                continue

            s += 1
            d += 1
            if src.is_dir and not dst.is_dir:
                yield Report(Classification.TYPE_CONFLICT, dst.path, not_dir_in="destination")
            elif dst.is_dir and not src.is_dir:
                yield Report(Classification.TYPE_CONFLICT, dst.path, not_dir_in="source")
            elif src.is_dir:
                yield from self._descend(src.path, dst.path)
            else:
                yield from self._compare_files(src.path, dst.path)

    def _descend(self, source_dir: str, dest_dir: str) -> Iterator[WalkItem]:
        try:
            source_entries = self._list_subtree(source_dir, "source")
            dest_entries = self._list_subtree(dest_dir, "destination")
        except SubtreeUnreadableError as exc:
            yield Problem(ProblemKind.SUBTREE_UNREADABLE, exc.path, str(exc))
            return
        yield from self._walk(source_dir, source_entries, dest_dir, dest_entries)

    @staticmethod
    def _list_subtree(directory: str, side: str) -> list[Entry]:
        try:
            return read_directory(directory)
        except OSError as exc:
            raise SubtreeUnreadableError(f"cannot read {side} directory {directory}", directory) from exc

    def _compare_files(self, source_file: str, dest_file: str) -> Iterator[WalkItem]:
        try:
            source_digest = self.hasher.digest(source_file)
            dest_digest = self.hasher.digest(dest_file)
        except FileUnreadableError as exc:
            yield Problem(ProblemKind.FILE_UNREADABLE, exc.path, str(exc))
            return
        if source_digest != dest_digest:
            yield Report(Classification.CONTENT_MODIFIED, dest_file)
        elif self.options.show_all:
            yield Report(Classification.UNCHANGED, dest_file)


def diff_trees(source: str, dest: str, options: DiffOptions | None = None) -> list[WalkItem]:
    """Run a full comparison and collect every report and problem."""
    return list(TreeDiffer(options).compare(source, dest))
