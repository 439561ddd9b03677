"""
Port interfaces (ABCs) for the files bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
"""

from abc import ABC, abstractmethod


class FileReader(ABC):
    """Port for reading a whole file into memory."""

    @abstractmethod
    def read(self, path: str) -> bytes:
        """Return the complete content of the file at path.

        Args:
            path: Filesystem path, relative to the reader's root.

        Returns:
            The file's bytes.

        Raises:
            OSError: Open or read failures, propagated unchanged.
        """
        raise NotImplementedError
