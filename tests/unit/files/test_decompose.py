"""Unit tests for path decomposition."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from filetree.core.errors import PathResolutionError
from filetree.files.decompose import decompose_path
from filetree.fs.backend import LocalFilesystem
from filetree.fs.memory import MemoryFilesystem


class TestDecomposePath:
    """Tests for decompose_path."""

    def test_absolute_path(self) -> None:
        """An absolute path splits into dir, base and ext."""
        assert decompose_path("/var/log/syslog.txt") == ("/var/log", "syslog", ".txt")

    def test_relative_path_uses_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Relative paths are resolved against the working directory."""
        monkeypatch.chdir(tmp_path)

        result = decompose_path("notes/todo.md")

        assert result == (str(tmp_path / "notes"), "todo", ".md")

    def test_no_extension(self) -> None:
        """A name without a dot has an empty extension."""
        assert decompose_path("/usr/bin/python") == ("/usr/bin", "python", "")

    def test_last_dot_wins(self) -> None:
        """Only the last dot of the name starts the extension."""
        assert decompose_path("/tmp/archive.tar.gz") == ("/tmp", "archive.tar", ".gz")

    def test_leading_dot_is_not_extension(self) -> None:
        """A dotfile without another dot has no extension."""
        assert decompose_path("/home/user/.bashrc") == ("/home/user", ".bashrc", "")

    def test_dotfile_with_extension(self) -> None:
        """A dotfile with a second dot keeps the last part as extension."""
        assert decompose_path("/home/user/.config.bak") == ("/home/user", ".config", ".bak")

    def test_normalizes_path(self) -> None:
        """Redundant separators and parent references are normalized."""
        assert decompose_path("/a/b/../c//d.txt") == ("/a/c", "d", ".txt")

    @pytest.mark.parametrize(
        ("directory", "base", "ext"),
        [
            ("/srv/data", "report", ".csv"),
            ("/srv/data", "README", ""),
            ("/", "root", ".cfg"),
            ("/srv/nested/deeper", "v1.2", ".tar"),
        ],
    )
    def test_inverse_of_join(self, directory: str, base: str, ext: str) -> None:
        """Decomposing a joined path yields the original components."""
        assert decompose_path(os.path.join(directory, base + ext)) == (directory, base, ext)

    def test_uses_given_backend(self) -> None:
        """Relative paths resolve against the backend's working directory."""
        fs = MemoryFilesystem(cwd="/virtual/cwd")

        assert decompose_path("file.txt", fs) == ("/virtual/cwd", "file", ".txt")

    def test_resolution_failure(self) -> None:
        """An unresolvable working directory raises PathResolutionError."""
        with (
            patch.object(
                LocalFilesystem, "resolve_absolute", side_effect=FileNotFoundError("cwd gone")
            ),
            pytest.raises(PathResolutionError) as exc_info,
        ):
            decompose_path("relative.txt")

        assert exc_info.value.path == "relative.txt"
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)
