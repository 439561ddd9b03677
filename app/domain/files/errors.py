"""
Domain-specific errors for the files bounded context.

All errors raised from the domain and application layers are defined here.
They are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class HasUserMessage(Protocol):
    """Capability of an error whose message may be shown to the client verbatim."""

    def user_message(self) -> str:
        ...


class FileListingError(Exception):
    """Base error for all file listing errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class UserError(FileListingError):
    """Business error caused by caller input.

    Its message is meant for the client, unlike internal
    failures whose detail only goes to the server log.
    """

    def user_message(self) -> str:
        return self.message


class InvalidPrefixError(UserError):
    """Raised when the request path does not start with the required prefix."""

    def __init__(self, prefix: str) -> None:
        super().__init__("the prefix of url must be " + prefix)
        self.prefix = prefix
