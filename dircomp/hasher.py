from __future__ import annotations

import hashlib

from .errors import FileUnreadableError

DEFAULT_ALGORITHM = "md5"


class ContentHasher:
    """
    Whole-file content digests used for equality checks only.

    The default is MD5 (128-bit). It is not meant to resist deliberate
    collisions. Any fixed-length ``hashlib`` algorithm can be substituted by
    name.
    """

    def __init__(self, algorithm: str = DEFAULT_ALGORITHM):
        name = algorithm.lower()
        if name not in hashlib.algorithms_available:
            raise ValueError(f"unknown hash algorithm: {algorithm!r}")
        if hashlib.new(name).digest_size == 0:
            raise ValueError(f"hash algorithm {algorithm!r} has no fixed digest size")
        self.algorithm = name

    def digest(self, path: str) -> bytes:
        """Read all of ``path`` and return its digest."""
        try:
            f = open(path, "rb")
        except OSError as exc:
            raise FileUnreadableError(f"cannot open file {path}", path) from exc
        with f:
            try:
                data = f.read()
            except OSError as exc:
                raise FileUnreadableError(f"cannot read file {path}", path) from exc
        return hashlib.new(self.algorithm, data).digest()
