"""Application configuration using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Database
    database_url: str = "postgresql://localhost:5432/product_manager"
    seed_database: bool = True

    # Logging
    log_level: str = "INFO"
    log_file: str | None = None

    # Application
    app_title: str = "Product Manager"
    debug: bool = False
    api_host: str = "0.0.0.0"
    api_port: int = 8000


settings = Settings()
