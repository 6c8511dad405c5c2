"""
Shared test fixtures and configuration.
"""

import logging
from pathlib import Path

import pytest


@pytest.fixture
def asset_tree(tmp_path: Path) -> Path:
    """Project layout with two enteriorok images and an empty latvanytervek."""
    (tmp_path / "assets" / "enteriorok").mkdir(parents=True)
    (tmp_path / "assets" / "latvanytervek").mkdir(parents=True)
    (tmp_path / "assets" / "enteriorok" / "b.jpg").write_bytes(b"")
    (tmp_path / "assets" / "enteriorok" / "a.jpg").write_bytes(b"")
    (tmp_path / "src").mkdir()
    return tmp_path


@pytest.fixture
def restore_logging():
    """Put the root logger back the way it was after the test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
