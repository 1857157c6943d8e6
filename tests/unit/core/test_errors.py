"""Unit tests for the filetree exception hierarchy."""

from filetree.core.errors import (
    FileIOError,
    FiletreeError,
    MoveError,
    NotFoundError,
    PathResolutionError,
    WalkError,
)
from filetree.files.handle import FileHandle


class TestErrorHierarchy:
    """Tests for exception relationships and attributes."""

    def test_all_derive_from_base(self) -> None:
        """Every filetree error is a FiletreeError."""
        for cls in (PathResolutionError, FileIOError, NotFoundError, MoveError, WalkError):
            assert issubclass(cls, FiletreeError)

    def test_not_found_is_io_error(self) -> None:
        """NotFoundError is a kind of FileIOError."""
        assert issubclass(NotFoundError, FileIOError)

    def test_errors_are_not_os_errors(self) -> None:
        """Domain errors are kept apart from builtin OSError."""
        assert not issubclass(FiletreeError, OSError)

    def test_move_error_carries_destination(self) -> None:
        """MoveError exposes the copied destination."""
        destination = FileHandle.from_path("/out/a.txt")

        error = MoveError("failed", "/in/a.txt", destination)

        assert error.path == "/in/a.txt"
        assert error.destination == destination
        assert str(error) == "failed"
