"""Exception hierarchy for filetree.

Every error raised by the file and tree model derives from
FiletreeError. Low-level OSError faults are attached as ``__cause__``
by the code that translates them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from filetree.files.handle import FileHandle


class FiletreeError(Exception):
    """Base exception for filetree errors."""


class PathResolutionError(FiletreeError):
    """Raised when a path cannot be resolved to an absolute path."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


class FileIOError(FiletreeError):
    """Raised when a read, write, create, remove or sync operation fails.

    Attributes:
        path: Filesystem path the failed operation targeted.
    """

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


class NotFoundError(FileIOError):
    """Raised when the target of an operation does not exist."""


class MoveError(FileIOError):
    """Raised when a move copied its source but could not remove it.

    The copy already exists at the destination when this is raised.

    Attributes:
        path: Source path that could not be removed.
        destination: Handle of the copy that was written.
    """

    def __init__(self, message: str, path: str, destination: FileHandle) -> None:
        super().__init__(message, path)
        self.destination = destination


class WalkError(FiletreeError):
    """Raised when populating a directory tree is aborted.

    Attributes:
        path: Directory being walked when the failure happened.
    """

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path
