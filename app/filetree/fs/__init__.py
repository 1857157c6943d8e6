"""Filesystem backends.

The file and tree model never touch ``os`` directly; they go through a
FilesystemBackend so an in-memory double can stand in for the disk.
"""

from filetree.fs.backend import DirEntry, FilesystemBackend, FileStat, LocalFilesystem
from filetree.fs.memory import MemoryFilesystem

__all__ = [
    "DirEntry",
    "FileStat",
    "FilesystemBackend",
    "LocalFilesystem",
    "MemoryFilesystem",
]
