"""File handles.

A FileHandle is the decomposed identity of one file (directory, base
name, extension) plus the operations that act on that file through a
filesystem backend. Handles are immutable values; creating or removing
the underlying file only happens when one of the operations is called.
"""

import logging
import os
import shutil
from dataclasses import dataclass, field
from typing import BinaryIO

from filetree.core.errors import FileIOError, MoveError, NotFoundError
from filetree.files.decompose import decompose_path
from filetree.fs.backend import FilesystemBackend, FileStat, local_filesystem

logger = logging.getLogger(__name__)

# Bytes per block when streaming a copy
DEFAULT_CHUNK_SIZE = 64 * 1024


def _translate(action: str, path: str, exc: OSError) -> FileIOError:
    """Map a backend OSError onto NotFoundError or FileIOError."""
    msg = f"Failed to {action} {path}: {exc}"
    if isinstance(exc, FileNotFoundError):
        return NotFoundError(msg, path)
    return FileIOError(msg, path)


@dataclass(frozen=True, slots=True)
class FileHandle:
    """Identity of a single file and the operations on it.

    Two handles are equal when directory, base name and extension match;
    the backend does not take part in comparison. ``FileHandle()`` is the
    empty handle.

    Attributes:
        dir: Absolute parent directory.
        base: File name without extension.
        ext: Extension including the leading dot, or "" if there is none.
        fs: Backend the operations run against.
    """

    dir: str = ""
    base: str = ""
    ext: str = ""
    fs: FilesystemBackend = field(default=local_filesystem, compare=False, repr=False)

    @classmethod
    def from_path(cls, path: str, fs: FilesystemBackend | None = None) -> "FileHandle":
        """Build a handle from a relative or absolute path.

        Raises:
            PathResolutionError: If the path cannot be made absolute.
        """
        backend = fs if fs is not None else local_filesystem
        directory, base, ext = decompose_path(path, backend)
        return cls(dir=directory, base=base, ext=ext, fs=backend)

    @property
    def name(self) -> str:
        """File name including extension."""
        return f"{self.base}{self.ext}"

    @property
    def full_path(self) -> str:
        return os.path.join(self.dir, self.name)

    @property
    def empty(self) -> bool:
        return self.dir == "" and self.base == "" and self.ext == ""

    # =========================================================================
    # Filesystem operations
    # =========================================================================

    def stat(self) -> FileStat:
        """Return filesystem metadata for the file.

        Raises:
            NotFoundError: If the file does not exist.
            FileIOError: If the metadata cannot be read.
        """
        try:
            return self.fs.stat(self.full_path)
        except OSError as e:
            raise _translate("stat", self.full_path, e) from e

    def create(self) -> BinaryIO:
        """Open the file for writing, creating or truncating it.

        The caller owns the returned stream and must close it.

        Raises:
            FileIOError: If the file cannot be created.
        """
        try:
            return self.fs.open_write(self.full_path)
        except OSError as e:
            raise _translate("create", self.full_path, e) from e

    def open(self) -> BinaryIO:
        """Open the file for reading.

        The caller owns the returned stream and must close it.

        Raises:
            NotFoundError: If the file does not exist.
            FileIOError: If the file cannot be opened.
        """
        try:
            return self.fs.open_read(self.full_path)
        except OSError as e:
            raise _translate("open", self.full_path, e) from e

    def remove(self) -> None:
        """Delete the file.

        Raises:
            NotFoundError: If the file does not exist.
            FileIOError: If the file cannot be deleted.
        """
        logger.debug("Removing %s", self.full_path)
        try:
            self.fs.remove(self.full_path)
        except OSError as e:
            raise _translate("remove", self.full_path, e) from e

    def read_all(self) -> bytes:
        """Read and return the full contents of the file.

        Raises:
            NotFoundError: If the file does not exist.
            FileIOError: If reading fails.
        """
        try:
            with self.fs.open_read(self.full_path) as stream:
                return stream.read()
        except OSError as e:
            raise _translate("read", self.full_path, e) from e

    def write_bytes(self, data: bytes, *, sync: bool = True) -> None:
        """Replace the file's contents with data.

        The file is created or truncated, written fully and, when sync is
        set, flushed to stable storage before it is closed. A failure
        part way through leaves whatever was already written in place.

        Args:
            data: Bytes to write.
            sync: Flush to stable storage before closing.

        Raises:
            FileIOError: If creating, writing, syncing or closing fails.
        """
        path = self.full_path
        logger.debug("Writing %d bytes to %s", len(data), path)
        try:
            with self.fs.open_write(path) as out:
                out.write(data)
                if sync:
                    self.fs.sync(out)
        except OSError as e:
            raise _translate("write", path, e) from e

    def write_string(self, text: str, *, encoding: str = "utf-8", sync: bool = True) -> None:
        """Replace the file's contents with encoded text. See write_bytes."""
        self.write_bytes(text.encode(encoding), sync=sync)

    # =========================================================================
    # Copy and move
    # =========================================================================

    def copy(self, dest_dir: str, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> "FileHandle":
        """Copy the file into dest_dir under its current name.

        Returns:
            Handle of the written copy.

        Raises:
            PathResolutionError: If the destination path cannot be resolved.
            NotFoundError: If the source does not exist.
            FileIOError: If the destination cannot be created or written.
        """
        return self._copy_to(os.path.join(dest_dir, self.name), chunk_size)

    def copy_and_rename(
        self,
        dest_dir: str,
        new_name: str,
        *,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> "FileHandle":
        """Copy the file into dest_dir as new_name. See copy."""
        return self._copy_to(os.path.join(dest_dir, new_name), chunk_size)

    def move(self, dest_dir: str, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> "FileHandle":
        """Copy the file into dest_dir, then remove the source.

        This is not an atomic rename. If the source cannot be removed the
        copy is left at the destination and MoveError is raised.

        Raises:
            MoveError: If the copy succeeded but the source could not be removed.
            NotFoundError: If the source does not exist.
            FileIOError: If the copy fails.
        """
        destination = self.copy(dest_dir, chunk_size=chunk_size)
        self._remove_after_copy(destination)
        return destination

    def move_and_rename(
        self,
        dest_dir: str,
        new_name: str,
        *,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> "FileHandle":
        """Copy the file into dest_dir as new_name, then remove the source. See move."""
        destination = self.copy_and_rename(dest_dir, new_name, chunk_size=chunk_size)
        self._remove_after_copy(destination)
        return destination

    def _copy_to(self, dest_path: str, chunk_size: int) -> "FileHandle":
        """Stream this file's bytes into dest_path.

        A destination that fails part way through is left in place.
        """
        destination = FileHandle.from_path(dest_path, fs=self.fs)
        if destination == self or self.fs.same_file(self.full_path, destination.full_path):
            msg = f"Cannot copy {self.full_path} onto itself"
            raise FileIOError(msg, self.full_path)

        logger.debug("Copying %s to %s", self.full_path, destination.full_path)
        try:
            with self.open() as src, destination.create() as out:
                shutil.copyfileobj(src, out, chunk_size)
        except OSError as e:
            raise _translate("copy to", destination.full_path, e) from e

        return destination

    def _remove_after_copy(self, destination: "FileHandle") -> None:
        """Remove the source of a finished copy."""
        try:
            self.fs.remove(self.full_path)
        except OSError as e:
            logger.warning(
                "Copied %s to %s but could not remove the source: %s",
                self.full_path,
                destination.full_path,
                e,
            )
            msg = f"Copied to {destination.full_path} but failed to remove {self.full_path}: {e}"
            raise MoveError(msg, self.full_path, destination) from e
