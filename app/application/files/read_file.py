"""
Use case: Resolve a request path to the content of a file.

Input: ReadFileQuery (request_path)
Output: FileContent
Side effects: None.
Failure cases: InvalidPrefixError, OSError from the FileReader port.
"""

import logging

from app.application.files.dtos import FileContent, ReadFileQuery
from app.domain.files.errors import InvalidPrefixError
from app.domain.files.ports import FileReader

logger = logging.getLogger(__name__)


class ReadFileUseCase:
    """Strips the URL prefix from a request path and reads the named file.

    Failures are never logged or translated here; they propagate
    to the error-classifying wrapper at the interface layer.
    """

    def __init__(
        self,
        file_reader: FileReader,
        prefix: str = "/list/",
        validate_prefix: bool = True,
    ) -> None:
        self._file_reader = file_reader
        self._prefix = prefix
        self._validate_prefix = validate_prefix

    def execute(self, query: ReadFileQuery) -> FileContent:
        """Run the read-file use case.

        Args:
            query: The request path to resolve.

        Returns:
            The full content of the named file.

        Raises:
            InvalidPrefixError: When prefix validation is on and the
                request path does not start with the prefix.
        """
        if self._validate_prefix and not query.request_path.startswith(self._prefix):
            raise InvalidPrefixError(self._prefix)

        path = query.request_path[len(self._prefix):]
        logger.debug("Reading file path=%s", path)

        content = self._file_reader.read(path)
        return FileContent(path=path, content=content)
