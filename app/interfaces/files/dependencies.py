"""
Dependency injection for the files bounded context.

Provides FastAPI dependency functions that wire the local file reader
into the read-file use case via constructor injection.
Settings are taken from the application the request was routed by.
"""

from fastapi import Request

from app.application.files.read_file import ReadFileUseCase
from app.core.config import Settings
from app.core.iterations import get_iteration
from app.infrastructure.files.local_file_reader import LocalFileReader


def get_settings(request: Request) -> Settings:
    """Return the settings the current application was created with."""
    return request.app.state.settings


def get_read_file_use_case(request: Request) -> ReadFileUseCase:
    """Build ReadFileUseCase with its infrastructure dependencies."""
    settings = get_settings(request)
    iteration = get_iteration(settings.iteration)
    return ReadFileUseCase(
        file_reader=LocalFileReader(
            root=settings.root_dir,
            confine=settings.confine_to_root,
        ),
        prefix=settings.url_prefix,
        validate_prefix=iteration.validate_prefix,
    )
