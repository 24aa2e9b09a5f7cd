"""Configuration management for fastapi-header-binding.

Settings are read from environment variables with the ``HEADER_BINDING_``
prefix, with ``.env`` file support, using Pydantic Settings.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from starlette import status


class HeaderBindingConfig(BaseSettings):
    """Application-wide defaults for header bindings.

    Example:
        ```python
        # HEADER_BINDING_DEFAULT_FAILURE_STATUS_CODE=422
        config = HeaderBindingConfig()

        # Or programmatically
        config = HeaderBindingConfig(default_failure_status_code=422)
        ```

    Attributes:
        default_failure_status_code: Status used by bindings declared without one
        expose_error_details: Include error details in HTTP error payloads
    """

    model_config = SettingsConfigDict(
        env_prefix="HEADER_BINDING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    default_failure_status_code: int = Field(
        default=status.HTTP_400_BAD_REQUEST,
        ge=400,
        le=599,
        description="HTTP status for a missing required header when the binding sets none",
    )

    expose_error_details: bool = Field(
        default=False,
        description="Include error details in HTTP error responses (development only)",
    )


__all__ = ["HeaderBindingConfig"]
