"""Library configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables.

    Settings are loaded in this priority order (highest to lowest):
    1. Environment variables (prefixed with ``LEGISXML_``)
    2. .env file (for local development)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="LEGISXML_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # =========================================================================
    # Logging
    # =========================================================================
    log_level: str = Field(
        default="INFO",
        description="Log level used by the command-line program",
    )

    # =========================================================================
    # JSON interchange
    # =========================================================================
    json_indent: int = Field(
        default=2,
        ge=0,
        description="Indentation for encoded JSON (0 for compact output)",
    )


settings = Settings()
