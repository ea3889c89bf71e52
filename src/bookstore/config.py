"""
Configuration management for the Bookstore backend
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Settings
    api_host: str = "0.0.0.0"
    # PORT is honoured for hosting platforms that inject it
    api_port: int = Field(
        default=4000,
        validation_alias=AliasChoices("PORT", "BOOKSTORE_API_PORT"),
    )
    api_reload: bool = False
    cors_origins: list[str] = ["*"]

    # GraphQL
    graphiql: bool = True  # Interactive query console at /graphql

    # Store
    seed_books: bool = True

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="BOOKSTORE_",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )


# Global settings instance
settings = Settings()

# Debug: Log settings initialization (only in debug mode)
if settings.debug:
    from .logging import get_logger

    _logger = get_logger(__name__)
    _logger.debug(
        "Settings initialized",
        environment=settings.environment,
        api_port=settings.api_port,
    )
