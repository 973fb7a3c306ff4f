"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here — no scattered magic strings.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        sql_echo: Log every SQL statement issued by SQLAlchemy.
        user_min_age: Minimum age in years a user must have to register.
        default_page_size: Page size used when the client sends none.
        max_page_size: Largest page size a client may request.
        rate_limit_enabled: Turn slowapi rate limiting on or off.
        rate_limit_default: Default rate limit for all endpoints.
        database_url: Full SQLAlchemy URL. Overrides the postgres_* values.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "User Service"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    sql_echo: bool = False

    user_min_age: int = 18
    default_page_size: int = 10
    max_page_size: int = 100

    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"

    database_url: Optional[str] = None
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "users"

    def get_database_url(self) -> str:
        """Return the effective database URL.

        Priority:
        1. Explicit `DATABASE_URL`
        2. Build a PostgreSQL URL from postgres_* values (Docker Compose or local setups)
        """
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+psycopg2://{self.postgres_user}:{self.postgres_password}@"
            f"{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


settings = Settings()
