"""
Application Settings.

``AppSettings`` is the immutable record handed to the web application at
startup. It is built by ``pursuit_config.assembler`` from ``PURSUIT_``
environment variables and never mutated afterwards.

``LoggingSettings`` configures the ambient logging stack. It is read with
pydantic-settings (environment or ``.env`` file) before the record is
assembled so assembly diagnostics are already formatted.
"""

from datetime import timedelta
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from pursuit_config.types import HostPreference, SemanticVersion


class AppSettings(BaseModel):
    """Runtime settings to configure the application."""

    model_config = ConfigDict(frozen=True)

    # ========================================================================
    # SERVER
    # ========================================================================
    static_dir: str = Field(description="Directory from which to serve static files")
    app_root: str = Field(description="Base for all generated URLs")
    host: HostPreference = Field(description="Host/interface the server should bind to")
    port: int = Field(description="Port to listen on")
    ip_from_header: bool = Field(
        description="Get the IP address from the header when logging (behind a reverse proxy)"
    )

    # ========================================================================
    # BUILD MODE (derived, never read from the environment)
    # ========================================================================
    detailed_request_logging: bool
    should_log_all: bool
    reload_templates: bool
    mutable_static: bool
    skip_combining: bool

    # ========================================================================
    # APPLICATION
    # ========================================================================
    analytics: Optional[str] = Field(default=None, description="Google Analytics code")
    github_auth_token: Optional[SecretStr] = Field(
        default=None, description="GitHub OAuth token (for fetching READMEs)"
    )
    data_dir: str = Field(description="Directory where package data is kept")
    github_client_id: str = Field(description="GitHub OAuth client ID")
    github_client_secret: SecretStr = Field(description="GitHub OAuth client secret")
    max_hoogle_parse_errors: int = Field(
        description="Parse errors allowed before a Hoogle regeneration is a failure"
    )
    hoogle_database_max_age: timedelta = Field(
        description="Minimum time between Hoogle database regenerations"
    )
    minimum_compiler_version: SemanticVersion = Field(
        description="Minimum compiler version for uploaded data"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration loaded from ``PURSUIT_LOG_*`` variables."""

    model_config = SettingsConfigDict(
        env_prefix="PURSUIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    LOG_LEVEL: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    LOG_FORMAT: str = Field(default="text", pattern="^(json|text)$")
