"""
Error-classifying wrapper for route handlers.

Adapts a handler that raises on failure into an endpoint that always
returns a response. Failures are logged and mapped to HTTP statuses.
No stack traces or internal details are exposed to clients.
"""

import functools
import logging
from http import HTTPStatus
from typing import Callable

from starlette.responses import PlainTextResponse, Response

from app.shared.errors.classification import (
    HANDLER_ERRORS,
    HTTP_404,
    HTTP_500,
    STATUS_BY_CATEGORY,
    ErrorCategory,
    classify_error,
)

logger = logging.getLogger(__name__)

Handler = Callable[..., Response]


def _status_response(status_code: int) -> PlainTextResponse:
    """Build a plain-text response carrying the standard status phrase."""
    return PlainTextResponse(HTTPStatus(status_code).phrase, status_code=status_code)


def error_response(
    exc: BaseException,
    business_errors: bool = True,
    legacy_status_defect: bool = False,
) -> PlainTextResponse:
    """Translate a handler failure into a plain-text response.

    Args:
        exc: The raised failure.
        business_errors: Answer errors carrying a user message with 400.
        legacy_status_defect: Send 404 for every non-business failure
            whatever its classification.

    Returns:
        The response to send instead of the handler's.
    """
    category = classify_error(exc, business_errors=business_errors)
    if category is ErrorCategory.INTERNAL:
        logger.error("Error occurred handling request: %s", exc, exc_info=exc)
    else:
        logger.warning("Error occurred handling request: %s", exc)

    if category is ErrorCategory.BUSINESS:
        return PlainTextResponse(exc.user_message(), status_code=STATUS_BY_CATEGORY[category])

    status_code = STATUS_BY_CATEGORY[category]
    if legacy_status_defect:
        return PlainTextResponse(HTTPStatus(status_code).phrase, status_code=HTTP_404)
    return _status_response(status_code)


def error_wrapper(
    handler: Handler,
    *,
    business_errors: bool = True,
    recover_aborts: bool = True,
    legacy_status_defect: bool = False,
) -> Handler:
    """Wrap a fallible handler so that it always returns a response.

    Failures from HANDLER_ERRORS are logged and classified. With
    recover_aborts, any other exception is logged as a panic and
    answered with 500; without it, it propagates to the framework.

    Args:
        handler: The route handler to adapt. Its signature is kept so
            that FastAPI still resolves its parameters and dependencies.
        business_errors: Answer errors carrying a user message with 400.
        recover_aborts: Intercept exceptions outside HANDLER_ERRORS.
        legacy_status_defect: Send 404 for every non-business failure.

    Returns:
        The wrapped handler.
    """

    @functools.wraps(handler)
    def wrapper(*args, **kwargs) -> Response:
        try:
            return handler(*args, **kwargs)
        except HANDLER_ERRORS as exc:
            return error_response(
                exc,
                business_errors=business_errors,
                legacy_status_defect=legacy_status_defect,
            )
        except Exception as exc:
            if not recover_aborts:
                raise
            logger.error("Panic: %s", exc, exc_info=True)
            return _status_response(HTTP_500)

    return wrapper
