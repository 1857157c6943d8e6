"""Filesystem capability interface and the local-disk implementation.

Backends speak in plain path strings and raise Python's builtin OSError
family (FileNotFoundError, IsADirectoryError, PermissionError, ...).
Translating those into filetree errors is left to the callers.
"""

import os
import stat as stat_module
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import BinaryIO, Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class DirEntry:
    """One entry of a directory listing.

    Attributes:
        name: Entry name relative to the listed directory.
        is_dir: True for real directories. Symbolic links are never
            reported as directories, even when they point at one.
    """

    name: str
    is_dir: bool


@dataclass(frozen=True, slots=True)
class FileStat:
    """Filesystem metadata for a single path.

    Attributes:
        path: Absolute path the metadata belongs to.
        size_bytes: Size in bytes.
        mtime: Last modification time in ISO 8601 format (UTC).
        is_dir: Whether the path is a directory.
    """

    path: str
    size_bytes: int
    mtime: str
    is_dir: bool


@runtime_checkable
class FilesystemBackend(Protocol):
    """Operations the file and tree model need from a filesystem."""

    def list_directory(self, path: str) -> list[DirEntry]:
        """List the immediate entries of a directory.

        Raises:
            FileNotFoundError: If the directory does not exist.
            NotADirectoryError: If the path is not a directory.
        """
        ...

    def resolve_absolute(self, path: str) -> str:
        """Resolve a path to a normalized absolute path.

        Raises:
            OSError: If the working directory cannot be determined.
        """
        ...

    def open_read(self, path: str) -> BinaryIO:
        """Open a file for binary reading.

        Raises:
            FileNotFoundError: If the file does not exist.
        """
        ...

    def open_write(self, path: str) -> BinaryIO:
        """Open a file for binary writing, creating or truncating it.

        Raises:
            OSError: If the file cannot be created.
        """
        ...

    def sync(self, stream: BinaryIO) -> None:
        """Flush a writable stream returned by open_write to stable storage."""
        ...

    def remove(self, path: str) -> None:
        """Delete a file.

        Raises:
            FileNotFoundError: If the file does not exist.
        """
        ...

    def stat(self, path: str) -> FileStat:
        """Return metadata for a path.

        Raises:
            FileNotFoundError: If the path does not exist.
        """
        ...

    def same_file(self, first: str, second: str) -> bool:
        """Tell whether two paths name the same existing file.

        Aliases such as symbolic links count as the same file. Returns
        False when either path does not exist.
        """
        ...


class LocalFilesystem:
    """FilesystemBackend backed by the operating system."""

    def list_directory(self, path: str) -> list[DirEntry]:
        with os.scandir(path) as entries:
            return [DirEntry(name=e.name, is_dir=e.is_dir(follow_symlinks=False)) for e in entries]

    def resolve_absolute(self, path: str) -> str:
        return os.path.abspath(path)

    def open_read(self, path: str) -> BinaryIO:
        return open(path, "rb")  # noqa: SIM115

    def open_write(self, path: str) -> BinaryIO:
        return open(path, "wb")  # noqa: SIM115

    def sync(self, stream: BinaryIO) -> None:
        stream.flush()
        os.fsync(stream.fileno())

    def remove(self, path: str) -> None:
        os.remove(path)

    def stat(self, path: str) -> FileStat:
        st = os.stat(path)
        return FileStat(
            path=path,
            size_bytes=st.st_size,
            mtime=datetime.fromtimestamp(st.st_mtime, tz=UTC).isoformat(),
            is_dir=stat_module.S_ISDIR(st.st_mode),
        )

    def same_file(self, first: str, second: str) -> bool:
        try:
            return os.path.samefile(first, second)
        except FileNotFoundError:
            return False


# Shared default backend for handles and nodes created without one
local_filesystem = LocalFilesystem()
