"""
FastAPI router for the files bounded context.

The single route delegates to the read-file use case and answers
with the raw file bytes. Failure handling depends on the iteration
being served: the handler is adapted by the error-classifying wrapper
from the second iteration on.
"""

from fastapi import APIRouter, Depends, Request
from slowapi import Limiter
from starlette.responses import Response

from app.application.files.dtos import ReadFileQuery
from app.application.files.read_file import ReadFileUseCase
from app.core.config import Settings
from app.core.iterations import get_iteration
from app.interfaces.files.dependencies import get_read_file_use_case
from app.shared.errors.handlers import error_wrapper

# Every standard method except CONNECT. Extension methods are answered with 405.
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"]


def list_file(
    request: Request,
    use_case: ReadFileUseCase = Depends(get_read_file_use_case),
) -> Response:
    """Return the content of the file named by the request path.

    No content type is set; the bytes are sent verbatim.
    """
    result = use_case.execute(ReadFileQuery(request_path=request.url.path))
    return Response(content=result.content)


def build_router(settings: Settings, limiter: Limiter | None = None) -> APIRouter:
    """Assemble the file listing router for the configured iteration.

    Args:
        settings: Application settings; selects the iteration and prefix.
        limiter: Rate limiter applied to the route when rate limiting is enabled.

    Returns:
        A router with one catch-all route under the bound prefix.
    """
    iteration = get_iteration(settings.iteration)
    bound_prefix = "/" if iteration.bind_root else settings.url_prefix

    endpoint = list_file
    if iteration.wrap_errors:
        endpoint = error_wrapper(
            list_file,
            business_errors=iteration.business_errors,
            recover_aborts=iteration.recover_aborts,
            legacy_status_defect=settings.legacy_status_defect,
        )
    if limiter is not None and settings.rate_limit_enabled:
        endpoint = limiter.limit(settings.rate_limit_default)(endpoint)

    router = APIRouter(tags=["files"])
    router.add_api_route(
        bound_prefix.rstrip("/") + "/{file_path:path}",
        endpoint,
        methods=ALL_METHODS,
        summary="Read a file",
        description="Returns the raw bytes of the file named by the request path.",
        include_in_schema=settings.debug,
    )
    return router
