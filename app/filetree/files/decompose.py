"""Path decomposition into directory, base name and extension."""

import os

from filetree.core.errors import PathResolutionError
from filetree.fs.backend import FilesystemBackend, local_filesystem


def decompose_path(
    path: str,
    fs: FilesystemBackend | None = None,
) -> tuple[str, str, str]:
    """Split a path into its absolute directory, base name and extension.

    Relative paths are resolved against the backend's working directory.
    The extension runs from the last dot of the final segment and
    includes the dot. A leading dot does not start an extension, so
    ``.bashrc`` has base ``.bashrc`` and no extension.

    Args:
        path: Path to decompose, relative or absolute.
        fs: Backend used to resolve the path. Defaults to the local disk.

    Returns:
        Tuple of (dir, base, ext).

    Raises:
        PathResolutionError: If the path cannot be made absolute.
    """
    backend = fs if fs is not None else local_filesystem
    try:
        absolute = backend.resolve_absolute(path)
    except (OSError, ValueError) as e:
        msg = f"Cannot resolve absolute path for {path!r}: {e}"
        raise PathResolutionError(msg, path) from e

    directory, filename = os.path.split(absolute)
    base, ext = os.path.splitext(filename)
    return directory, base, ext
