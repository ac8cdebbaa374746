"""Application configuration using Pydantic settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Book Catalog"
    debug: bool = False

    # Catalog
    seed_books: bool = True

    # HTTP
    cors_origins: list[str] = ["*"]
    metrics_enabled: bool = True

    # Client
    client_timeout: float = 10.0  # seconds

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    workers: int = 1


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
