"""
Data Transfer Objects for the files application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ReadFileQuery:
    """Input DTO for reading the file a request path names.

    Attributes:
        request_path: URL path of the incoming request, prefix included.
    """

    request_path: str


@dataclass(frozen=True)
class FileContent:
    """Output DTO holding a file read fully into memory.

    Attributes:
        path: Filesystem path the content was read from.
        content: The complete file bytes.
    """

    path: str
    content: bytes
