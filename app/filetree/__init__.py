"""filetree - ordered in-memory model of a filesystem subtree.

Exposes the directory tree model, file handles and the filesystem
backends they operate against.
"""

from filetree.core.errors import (
    FileIOError,
    FiletreeError,
    MoveError,
    NotFoundError,
    PathResolutionError,
    WalkError,
)
from filetree.files.decompose import decompose_path
from filetree.files.handle import FileHandle
from filetree.files.tree import DirectoryNode

__version__ = "0.1.0"

__all__ = [
    "DirectoryNode",
    "FileHandle",
    "FileIOError",
    "FiletreeError",
    "MoveError",
    "NotFoundError",
    "PathResolutionError",
    "WalkError",
    "__version__",
    "decompose_path",
]
