"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (OpenAPI docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rate_limit_enabled: Enforce the default rate limit on every route.
        rate_limit_default: Default rate limit for all endpoints.
        client_errors_as_bad_request: Report bad routes and malformed
            request bodies as 400 instead of 500.
        booking_docs_dir: Directory served under /booking/v1/docs.
            Nothing is mounted when unset.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Cargo Shipping"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    rate_limit_enabled: bool = True
    rate_limit_default: str = "120/minute"
    client_errors_as_bad_request: bool = False
    booking_docs_dir: Optional[str] = None


settings = Settings()
