"""Application configuration using pydantic-settings."""
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Database
    database_url: str
    db_pool_size: int = Field(default=5, validation_alias="DB_POOL_SIZE")
    db_max_overflow: int = Field(default=10, validation_alias="DB_MAX_OVERFLOW")

    environment: Literal["development", "test", "production"] = Field(
        default="development", validation_alias="ENVIRONMENT",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    # Mount point for the bookmark routes, e.g. "/api". Empty serves them at the root.
    api_prefix: str = Field(default="", validation_alias="API_PREFIX")

    # CORS - comma-separated list of allowed origins (stored as string, parsed via property)
    cors_origins_str: str = Field(
        default="http://localhost:3000",
        validation_alias="CORS_ORIGINS",
    )

    # Field length limits
    # Capped at the String(500) size of bookmarks.title
    max_title_length: int = Field(default=500, le=500, validation_alias="MAX_TITLE_LENGTH")
    max_description_length: int = Field(
        default=2000, validation_alias="MAX_DESCRIPTION_LENGTH",
    )

    @property
    def cors_origins(self) -> list[str]:
        """Parse comma-separated CORS origins string into a list."""
        if not self.cors_origins_str:
            return []
        return [origin.strip() for origin in self.cors_origins_str.split(",") if origin.strip()]

    @property
    def log_format(self) -> str:
        """Short log lines in production, detailed ones everywhere else."""
        if self.environment == "production":
            return "%(levelname)s %(message)s"
        return "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
