"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest
from filetree.fs.memory import MemoryFilesystem


@pytest.fixture
def memory_fs() -> MemoryFilesystem:
    """Empty in-memory filesystem with /work as working directory."""
    return MemoryFilesystem(cwd="/work")


@pytest.fixture
def sample_memory_fs(memory_fs: MemoryFilesystem) -> MemoryFilesystem:
    """In-memory tree with files inserted out of name order.

    Layout::

        /data
        ├── zeta/
        │   └── deep/
        │       └── leaf.bin
        ├── alpha/
        ├── c.txt
        ├── b.md
        └── a.txt
    """
    memory_fs.makedirs("/data/zeta/deep")
    memory_fs.makedirs("/data/alpha")
    memory_fs.write_file("/data/c.txt", b"charlie")
    memory_fs.write_file("/data/b.md", b"# bravo")
    memory_fs.write_file("/data/a.txt", b"alpha")
    memory_fs.write_file("/data/zeta/deep/leaf.bin", b"\x00\x01\x02")
    return memory_fs


@pytest.fixture
def sample_dir(tmp_path: Path) -> Path:
    """Directory on disk with one file and one empty subdirectory."""
    root = tmp_path / "root"
    root.mkdir()
    (root / "x.txt").write_text("hello")
    (root / "sub").mkdir()
    return root
