"""File and directory model.

This module provides path decomposition, file handles and the ordered
directory tree built on top of them.
"""

from filetree.files.decompose import decompose_path
from filetree.files.handle import FileHandle
from filetree.files.tree import DirectoryNode

__all__ = [
    "DirectoryNode",
    "FileHandle",
    "decompose_path",
]
