"""Pytest fixtures and configuration for dircomp tests."""
from __future__ import annotations

import logging
import os
import pathlib
from typing import Any

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of a single module")
    config.addinivalue_line("markers", "integration: end-to-end runs through the CLI")


def _build(root: pathlib.Path, spec: dict[str, Any]) -> None:
    root.mkdir(parents=True, exist_ok=True)
    for name, value in spec.items():
        target = root / name
        if isinstance(value, dict):
            _build(target, value)
        elif isinstance(value, bytes):
            target.write_bytes(value)
        else:
            target.write_text(value)


@pytest.fixture
def make_tree(tmp_path):
    """
    Build a directory tree from a nested dict: dict values are directories,
    str/bytes values are file contents. Returns the root path as a string.
    """

    def _make(name: str, spec: dict[str, Any]) -> str:
        root = tmp_path / name
        _build(root, spec)
        return str(root)

    return _make


@pytest.fixture
def trees(make_tree):
    """Factory returning (source, dest) roots built from two specs."""

    def _trees(source_spec: dict[str, Any], dest_spec: dict[str, Any]) -> tuple[str, str]:
        return make_tree("src", source_spec), make_tree("dest", dest_spec)

    return _trees


@pytest.fixture
def no_permissions():
    """Skip when running as root, where chmod 000 does not block reads."""
    if hasattr(os, "geteuid") and os.geteuid() == 0:
        pytest.skip("permission checks are not enforced for root")
    if os.name == "nt":
        pytest.skip("chmod-based permission tests need POSIX")


@pytest.fixture(autouse=True)
def reset_root_logging():
    """The CLI installs its handler on the root logger; drop it between tests."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler.get_name() == "dircomp":
            root.removeHandler(handler)
    root.setLevel(level)
