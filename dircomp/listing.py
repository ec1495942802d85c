"""Directory listing helpers: read one directory into sorted entries."""
from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Entry:
    """One named child of a directory on one side of the comparison."""

    name: str
    path: str
    is_dir: bool


def read_directory(directory: str) -> list[Entry]:
    """
    Return the children of ``directory`` sorted by name.

    Entry paths are normalized, so a root given as "./dest/" yields
    "dest/name". Symlinks are not followed when deciding whether an entry is
    a directory, so a link to a directory is compared as a file. Raises ``OSError`` if the
    directory cannot be listed.
    """
    entries: list[Entry] = []
    with os.scandir(directory) as it:
        for child in it:
            try:
                is_dir = child.is_dir(follow_symlinks=False)
            except OSError:
                is_dir = False
            path = os.path.normpath(os.path.join(directory, child.name))
            entries.append(Entry(name=child.name, path=path, is_dir=is_dir))
    entries.sort(key=lambda e: e.name)
    return entries
