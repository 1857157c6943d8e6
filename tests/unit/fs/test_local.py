"""Unit tests for the LocalFilesystem backend."""

from pathlib import Path

import pytest
from filetree.fs.backend import DirEntry, FilesystemBackend, LocalFilesystem


class TestLocalFilesystem:
    """Tests for LocalFilesystem."""

    def test_satisfies_protocol(self) -> None:
        """LocalFilesystem implements FilesystemBackend."""
        assert isinstance(LocalFilesystem(), FilesystemBackend)

    def test_list_directory(self, sample_dir: Path) -> None:
        """Entries are reported with their directory flag."""
        entries = LocalFilesystem().list_directory(str(sample_dir))

        assert sorted(entries, key=lambda e: e.name) == [
            DirEntry(name="sub", is_dir=True),
            DirEntry(name="x.txt", is_dir=False),
        ]

    def test_symlink_to_directory_not_dir(self, tmp_path: Path) -> None:
        """A symlink pointing at a directory is not reported as a directory."""
        (tmp_path / "target").mkdir()
        (tmp_path / "link").symlink_to(tmp_path / "target")

        entries = {e.name: e for e in LocalFilesystem().list_directory(str(tmp_path))}

        assert entries["target"].is_dir is True
        assert entries["link"].is_dir is False

    def test_list_missing_directory(self, tmp_path: Path) -> None:
        """Listing a missing directory raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            LocalFilesystem().list_directory(str(tmp_path / "missing"))

    def test_resolve_absolute(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Relative paths resolve against the working directory."""
        monkeypatch.chdir(tmp_path)

        assert LocalFilesystem().resolve_absolute("a/../b.txt") == str(tmp_path / "b.txt")

    def test_write_sync_read(self, tmp_path: Path) -> None:
        """Bytes written and synced can be read back."""
        fs = LocalFilesystem()
        path = str(tmp_path / "f.bin")

        with fs.open_write(path) as out:
            out.write(b"abc")
            fs.sync(out)
        with fs.open_read(path) as src:
            assert src.read() == b"abc"

    def test_stat_directory(self, sample_dir: Path) -> None:
        """stat reports directories."""
        info = LocalFilesystem().stat(str(sample_dir / "sub"))

        assert info.is_dir is True

    def test_remove_missing(self, tmp_path: Path) -> None:
        """Removing a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            LocalFilesystem().remove(str(tmp_path / "missing"))

    def test_same_file_through_symlink(self, tmp_path: Path) -> None:
        """A path through a directory symlink names the same file."""
        real = tmp_path / "real"
        real.mkdir()
        (real / "a.txt").write_text("x")
        (tmp_path / "alias").symlink_to(real, target_is_directory=True)
        fs = LocalFilesystem()

        assert fs.same_file(str(real / "a.txt"), str(tmp_path / "alias" / "a.txt")) is True
        assert fs.same_file(str(real / "a.txt"), str(tmp_path / "b.txt")) is False
