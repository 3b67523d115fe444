"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here — no scattered magic strings.
"""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs). Must be False in production.
        environment: "development" or "production"; only affects logging.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        host: Interface the CLI server binds to.
        port: Port the CLI server listens on (env PORT).
        books_path: Location of the JSON document holding the catalog.
        cors_origins: Origins allowed by the CORS middleware.
        fe_url_prod: Production frontend origin, appended to cors_origins.
        rate_limit_default: Default rate limit for all endpoints.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    project_name: str = "Bookstore"
    version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3001
    books_path: Path = Path("data/books.json")
    cors_origins: list[str] = ["http://localhost:3000"]
    fe_url_prod: Optional[str] = None
    rate_limit_default: str = "60/minute"

    @property
    def allowed_origins(self) -> list[str]:
        """Return the effective CORS whitelist.

        Trailing slashes are dropped since browsers never send them
        in the Origin header.
        """
        origins = list(self.cors_origins)
        if self.fe_url_prod:
            origins.append(self.fe_url_prod)
        return [origin.rstrip("/") for origin in origins if origin]

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


settings = Settings()
