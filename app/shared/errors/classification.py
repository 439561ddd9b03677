"""
Classification of handler failures.

Maps a raised failure onto one of the categories the wrapper
knows how to answer, and each category onto an HTTP status.
"""

from enum import Enum

from app.domain.files.errors import FileListingError, HasUserMessage

HTTP_400 = 400
HTTP_403 = 403
HTTP_404 = 404
HTTP_500 = 500

# Failures a handler is expected to raise. Anything else is an abort.
HANDLER_ERRORS: tuple[type[Exception], ...] = (OSError, FileListingError)


class ErrorCategory(str, Enum):
    """Runtime category of a handler failure."""

    BUSINESS = "business"
    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    INTERNAL = "internal"


STATUS_BY_CATEGORY: dict[ErrorCategory, int] = {
    ErrorCategory.BUSINESS: HTTP_400,
    ErrorCategory.NOT_FOUND: HTTP_404,
    ErrorCategory.PERMISSION_DENIED: HTTP_403,
    ErrorCategory.INTERNAL: HTTP_500,
}


def classify_error(exc: BaseException, business_errors: bool = True) -> ErrorCategory:
    """Return the category of a handler failure.

    Args:
        exc: The raised failure.
        business_errors: Whether errors carrying a user message are
            recognized. When False they fall through to INTERNAL.

    Returns:
        The failure's ErrorCategory.
    """
    if business_errors and isinstance(exc, HasUserMessage):
        return ErrorCategory.BUSINESS
    if isinstance(exc, FileNotFoundError):
        return ErrorCategory.NOT_FOUND
    if isinstance(exc, PermissionError):
        return ErrorCategory.PERMISSION_DENIED
    return ErrorCategory.INTERNAL
