"""
Report items produced by the tree walk and their line rendering.

Report lines go to the primary stream, problems to the diagnostic stream
prefixed with the program name.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass

from rich.console import Console


class Classification(enum.Enum):
    ADDED = "added"
    REMOVED = "removed"
    TYPE_CONFLICT = "type-conflict"
    CONTENT_MODIFIED = "content-modified"
    UNCHANGED = "unchanged"


SYMBOLS = {
    Classification.ADDED: "+",
    Classification.REMOVED: "-",
    Classification.TYPE_CONFLICT: "C",
    Classification.CONTENT_MODIFIED: "C",
    Classification.UNCHANGED: " ",
}

STYLES = {
    Classification.ADDED: "green",
    Classification.REMOVED: "red",
    Classification.TYPE_CONFLICT: "bold yellow",
    Classification.CONTENT_MODIFIED: "yellow",
    Classification.UNCHANGED: "dim",
}


@dataclass(frozen=True)
class Report:
    """One classified path, rendered under the destination root."""

    classification: Classification
    path: str
    is_dir: bool = False
    not_dir_in: str | None = None  # "source" / "destination" for type conflicts

    def render(self) -> str:
        line = f"{SYMBOLS[self.classification]} {self.path}"
        if self.classification is Classification.TYPE_CONFLICT:
            line += f" (not a directory in {self.not_dir_in})"
        elif self.is_dir and self.classification in (Classification.ADDED, Classification.REMOVED):
            line += " (directory)"
        return line


class ProblemKind(enum.Enum):
    SUBTREE_UNREADABLE = "subtree-unreadable"
    FILE_UNREADABLE = "file-unreadable"


@dataclass(frozen=True)
class Problem:
    """A local failure; the walk carries on past it."""

    kind: ProblemKind
    path: str
    message: str


class Reporter:
    """Writes walk items to a report console and a diagnostic console."""

    def __init__(self, out: Console, err: Console, prog: str = "dircomp", color: bool = True):
        self.out = out
        self.err = err
        self.prog = prog
        self.color = color
        self.counts: dict[Classification, int] = {c: 0 for c in Classification}
        self.problems = 0

    def emit(self, item: Report | Problem) -> None:
        if isinstance(item, Problem):
            self.error(item.message)
            self.problems += 1
            return
        self.counts[item.classification] += 1
        style = STYLES[item.classification] if self.color else None
        self.out.out(item.render(), style=style, highlight=False)

    def error(self, message: str) -> None:
        self.err.out(f"{self.prog}: {message}", highlight=False)
