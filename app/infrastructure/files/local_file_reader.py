"""
Adapter: Local filesystem file reader.

Implements FileReader port.
Reads a file under a root directory fully into memory.
"""

import errno
import os
from pathlib import Path

from app.domain.files.ports import FileReader


class LocalFileReader(FileReader):
    """Concrete adapter reading files from the local disk.

    Paths are resolved against root. With confine enabled, a path that
    resolves outside root fails the same way an unreadable file does.
    """

    def __init__(self, root: str = ".", confine: bool = True) -> None:
        self._root = Path(root)
        self._confine = confine

    def _resolve(self, path: str) -> Path:
        if not path:
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)

        target = self._root / path
        if self._confine:
            root = self._root.resolve()
            resolved = target.resolve()
            if resolved != root and root not in resolved.parents:
                raise PermissionError(errno.EACCES, os.strerror(errno.EACCES), path)
        return target

    def read(self, path: str) -> bytes:
        """Return the complete content of the file at path.

        The handle is closed before returning, on success and on failure.
        Paths the OS cannot represent (embedded NUL) fail with EINVAL.
        """
        try:
            fs_path = self._resolve(path)
            with open(fs_path, "rb") as handle:
                return handle.read()
        except ValueError as exc:
            raise OSError(errno.EINVAL, str(exc), path) from exc
