"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here — no scattered magic strings.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        host: Interface the server binds to.
        port: TCP port the server listens on.
        iteration: Which error-handling iteration of the file server to run (1-3).
        url_prefix: Request path prefix stripped before resolving a file.
        root_dir: Directory that request paths are resolved against.
        confine_to_root: Reject paths that resolve outside root_dir.
        legacy_status_defect: Answer 404 for every non-business failure,
            as the first releases of the server did.
        rate_limit_enabled: Limit requests per client. Off by default; when
            on, clients over the limit get 429.
        rate_limit_default: Limit applied to the file route when enabled.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "FileList"
    version: str = "0.3.0"
    debug: bool = False
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 8888

    iteration: int = Field(default=3, ge=1, le=3)
    url_prefix: str = "/list/"
    root_dir: str = "."
    confine_to_root: bool = True
    legacy_status_defect: bool = False

    rate_limit_enabled: bool = False
    rate_limit_default: str = "60/minute"


settings = Settings()
