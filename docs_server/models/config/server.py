"""Server configuration models."""

import re

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")


class ServerConfig(BaseSettings):
    """Server configuration with validation."""

    model_config = SettingsConfigDict(
        env_prefix="DOCS_SERVER_",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    # The port is read from the bare PORT variable, as hosting platforms set it
    port: int = Field(default=3000, ge=1, le=65535, alias="PORT")
    host: str = "0.0.0.0"

    server_name: str = "claude-code-docs"
    server_version: str = "0.1.0"

    uri_scheme: str = "claude-code"
    product_name: str = "Claude Code"

    log_level: str = "INFO"

    @field_validator("host")
    @classmethod
    def validate_host(cls, v: str) -> str:
        """Validate host is not empty."""
        if not v or not v.strip():
            raise ValueError("Host cannot be empty")
        return v.strip()

    @field_validator("uri_scheme")
    @classmethod
    def validate_uri_scheme(cls, v: str) -> str:
        """Validate the resource URI scheme."""
        if not _SCHEME_RE.match(v):
            raise ValueError(f"Invalid URI scheme: {v!r}")
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def resource_prefix(self) -> str:
        """Locator prefix shared by every document resource."""
        return f"{self.uri_scheme}://docs/"


__all__ = ["ServerConfig"]
