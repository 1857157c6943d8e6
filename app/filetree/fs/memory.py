"""In-memory filesystem backend.

Keeps directories and file contents in dictionaries so the file and
tree model can be exercised without touching the disk. Paths are POSIX
style and resolved against a configurable working directory.
"""

import io
import posixpath
from datetime import UTC, datetime

from filetree.fs.backend import DirEntry, FileStat


class _MemoryWriter(io.BytesIO):
    """Writable stream that stores its buffer in the owning filesystem on flush/close."""

    def __init__(self, fs: "MemoryFilesystem", path: str) -> None:
        super().__init__()
        self._fs = fs
        self._path = path

    def flush(self) -> None:
        super().flush()
        self._fs._commit(self._path, self.getvalue())

    def close(self) -> None:
        if not self.closed:
            self._fs._commit(self._path, self.getvalue())
        super().close()


class MemoryFilesystem:
    """FilesystemBackend that lives entirely in memory.

    Directory listings are returned in insertion order, not sorted, like
    a real filesystem gives no ordering guarantee.

    Args:
        cwd: Absolute directory relative paths are resolved against.
    """

    def __init__(self, cwd: str = "/") -> None:
        self._cwd = posixpath.normpath(cwd)
        self._dirs: dict[str, None] = {"/": None}
        self._files: dict[str, bytes] = {}
        self._mtimes: dict[str, str] = {}
        self.makedirs(self._cwd)

    # -- setup helpers -------------------------------------------------

    def makedirs(self, path: str) -> str:
        """Create a directory and any missing parents. Returns the absolute path."""
        absolute = self.resolve_absolute(path)
        parts = [p for p in absolute.split("/") if p]
        current = "/"
        for part in parts:
            current = posixpath.join(current, part)
            if current in self._files:
                raise NotADirectoryError(f"Not a directory: {current}")
            self._dirs.setdefault(current, None)
        return absolute

    def write_file(self, path: str, data: bytes = b"") -> str:
        """Create a file with contents, creating parent directories. Returns the absolute path."""
        absolute = self.resolve_absolute(path)
        self.makedirs(posixpath.dirname(absolute))
        self._commit(absolute, data)
        return absolute

    def exists(self, path: str) -> bool:
        absolute = self.resolve_absolute(path)
        return absolute in self._files or absolute in self._dirs

    def read_file(self, path: str) -> bytes:
        absolute = self.resolve_absolute(path)
        if absolute not in self._files:
            raise FileNotFoundError(f"No such file: {absolute}")
        return self._files[absolute]

    # -- FilesystemBackend ---------------------------------------------

    def list_directory(self, path: str) -> list[DirEntry]:
        absolute = self.resolve_absolute(path)
        if absolute in self._files:
            raise NotADirectoryError(f"Not a directory: {absolute}")
        if absolute not in self._dirs:
            raise FileNotFoundError(f"No such directory: {absolute}")

        entries = [
            DirEntry(name=posixpath.basename(d), is_dir=True)
            for d in self._dirs
            if d != "/" and posixpath.dirname(d) == absolute
        ]
        entries.extend(
            DirEntry(name=posixpath.basename(f), is_dir=False)
            for f in self._files
            if posixpath.dirname(f) == absolute
        )
        return entries

    def resolve_absolute(self, path: str) -> str:
        return posixpath.normpath(posixpath.join(self._cwd, path))

    def open_read(self, path: str) -> io.BytesIO:
        absolute = self.resolve_absolute(path)
        if absolute in self._dirs:
            raise IsADirectoryError(f"Is a directory: {absolute}")
        if absolute not in self._files:
            raise FileNotFoundError(f"No such file: {absolute}")
        return io.BytesIO(self._files[absolute])

    def open_write(self, path: str) -> _MemoryWriter:
        absolute = self.resolve_absolute(path)
        if absolute in self._dirs:
            raise IsADirectoryError(f"Is a directory: {absolute}")
        if posixpath.dirname(absolute) not in self._dirs:
            raise FileNotFoundError(f"No such directory: {posixpath.dirname(absolute)}")
        self._commit(absolute, b"")
        return _MemoryWriter(self, absolute)

    def sync(self, stream: io.BytesIO) -> None:
        stream.flush()

    def remove(self, path: str) -> None:
        absolute = self.resolve_absolute(path)
        if absolute in self._dirs:
            raise IsADirectoryError(f"Is a directory: {absolute}")
        if absolute not in self._files:
            raise FileNotFoundError(f"No such file: {absolute}")
        del self._files[absolute]
        del self._mtimes[absolute]

    def stat(self, path: str) -> FileStat:
        absolute = self.resolve_absolute(path)
        if absolute in self._dirs:
            return FileStat(path=absolute, size_bytes=0, mtime=_EPOCH, is_dir=True)
        if absolute not in self._files:
            raise FileNotFoundError(f"No such file: {absolute}")
        return FileStat(
            path=absolute,
            size_bytes=len(self._files[absolute]),
            mtime=self._mtimes[absolute],
            is_dir=False,
        )

    def same_file(self, first: str, second: str) -> bool:
        absolute = self.resolve_absolute(first)
        if absolute not in self._files and absolute not in self._dirs:
            return False
        return absolute == self.resolve_absolute(second)

    def _commit(self, absolute: str, data: bytes) -> None:
        self._files[absolute] = bytes(data)
        self._mtimes[absolute] = datetime.now(tz=UTC).isoformat()


_EPOCH = datetime.fromtimestamp(0, tz=UTC).isoformat()
