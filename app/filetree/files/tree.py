"""Ordered in-memory directory tree.

A DirectoryNode holds the sorted subdirectories and files of one
directory. Nodes are built by walking the filesystem once, depth first;
after that the only change a node accepts is registering a new file
through create_file.
"""

import logging
import os
from collections.abc import Iterator

from filetree.core.errors import FiletreeError, WalkError
from filetree.files.handle import FileHandle
from filetree.fs.backend import FilesystemBackend, local_filesystem

logger = logging.getLogger(__name__)

# Pseudo-entries some listings report for the directory itself and its parent
_SKIPPED_ENTRIES = frozenset({".", ".."})


class DirectoryNode:
    """One directory and its immediate children.

    Invariant: subdirectories are sorted ascending by path and files
    ascending by name. Both sequences are owned by the node; accessors
    return copies.

    Args:
        path: Directory path as given. Children of a populated node carry
            their parent's path joined with their own name.
        subdirectories: Child directory nodes.
        files: File handles of the directory's files.
        fs: Backend the node was populated from.
    """

    def __init__(
        self,
        path: str,
        subdirectories: list["DirectoryNode"] | None = None,
        files: list[FileHandle] | None = None,
        fs: FilesystemBackend | None = None,
    ) -> None:
        self._path = path
        self._fs = fs if fs is not None else local_filesystem
        self._subdirectories = list(subdirectories or [])
        self._files = list(files or [])
        self._sort_subdirectories()
        self._sort_files()

    @classmethod
    def populate(cls, path: str, fs: FilesystemBackend | None = None) -> "DirectoryNode":
        """Walk the directory at path and build its tree.

        Entries reported as directories become child nodes, populated
        recursively; everything else, symbolic links included, becomes a
        FileHandle. The first failure aborts the whole walk.

        Args:
            path: Root directory to walk.
            fs: Backend to walk. Defaults to the local disk.

        Returns:
            The populated root node.

        Raises:
            WalkError: If listing a directory or building an entry fails.
        """
        backend = fs if fs is not None else local_filesystem
        logger.debug("Populating %s", path)

        try:
            entries = backend.list_directory(path)
        except OSError as e:
            msg = f"Cannot list directory {path}: {e}"
            raise WalkError(msg, path) from e

        subdirectories: list[DirectoryNode] = []
        files: list[FileHandle] = []

        for entry in entries:
            if entry.name in _SKIPPED_ENTRIES:
                continue

            entry_path = os.path.join(path, entry.name)
            if entry.is_dir:
                # WalkError from a nested walk is already wrapped
                subdirectories.append(cls.populate(entry_path, backend))
                continue

            try:
                files.append(FileHandle.from_path(entry_path, fs=backend))
            except FiletreeError as e:
                msg = f"Cannot build file entry {entry_path}: {e}"
                raise WalkError(msg, path) from e

        return cls(path, subdirectories, files, fs=backend)

    @property
    def path(self) -> str:
        return self._path

    @property
    def name(self) -> str:
        """Final component of the directory path."""
        return os.path.basename(os.path.normpath(self._path))

    @property
    def subdirectories(self) -> list["DirectoryNode"]:
        return list(self._subdirectories)

    @property
    def files(self) -> list[FileHandle]:
        return list(self._files)

    def filter_by_extension(self, ext: str) -> list[FileHandle]:
        """Return this directory's files whose extension is ``"." + ext``.

        Subdirectories are not searched.

        Args:
            ext: Extension without the leading dot (e.g. "txt").

        Returns:
            Matching handles in name order.
        """
        wanted = f".{ext}"
        return [f for f in self._files if f.ext == wanted]

    def create_file(self, name: str) -> FileHandle:
        """Register a new file in this directory and return its handle.

        Nothing is written to disk; call create() or write_bytes() on the
        returned handle to materialize the file.

        Raises:
            PathResolutionError: If the file path cannot be resolved.
        """
        handle = FileHandle.from_path(os.path.join(self._path, name), fs=self._fs)
        self._files.append(handle)
        self._sort_files()
        return handle

    def walk(self) -> Iterator["DirectoryNode"]:
        """Yield this node and every descendant, depth first in sorted order."""
        yield self
        for child in self._subdirectories:
            yield from child.walk()

    def __repr__(self) -> str:
        return (
            f"DirectoryNode(path={self._path!r}, "
            f"subdirectories={len(self._subdirectories)}, files={len(self._files)})"
        )

    def _sort_subdirectories(self) -> None:
        self._subdirectories.sort(key=lambda d: d.path)

    def _sort_files(self) -> None:
        self._files.sort(key=lambda f: f.name)
