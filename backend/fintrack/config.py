"""
Application configuration using Pydantic settings.
"""

from decimal import Decimal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    # App
    app_name: str = "Fintrack"
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite:///./data/fintrack.sqlite"

    # Dashboard
    default_monthly_budget: Decimal = Decimal("1000")
    currency_symbol: str = "€"

    # Server
    api_host: str = "0.0.0.0"
    api_port: int = 5000
    frontend_url: str = "http://localhost:3000"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )


# Global settings instance
settings = Settings()
