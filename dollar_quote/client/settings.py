"""
Quote client settings using Pydantic for environment-based configuration.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Quote client configuration using Pydantic settings."""

    server_url: str = Field(
        default="http://127.0.0.1:8080/cotacao",
        description="Quote server endpoint",
    )
    request_timeout_ms: int = Field(
        default=3000, gt=0, description="Deadline for the whole request"
    )
    output_path: str = Field(
        default="cotacao.txt", description="File overwritten with the quote"
    )
    # Legacy clients rejected anything above 202 Accepted; set to 202 to match.
    max_success_status: int = Field(
        default=299,
        ge=200,
        le=299,
        description="Highest status code treated as success",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


client_settings = ClientSettings()
