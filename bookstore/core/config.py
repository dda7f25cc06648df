"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, no scattered magic strings.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

TEST_ENVIRONMENT = "test"


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        environment: Deployment environment (development, test, production).
        rate_limit_default: Default rate limit for all endpoints.
        rate_limit_write: Rate limit for endpoints that create or replace books.
        create_tables_on_startup: Create the books table when the app starts.

    Database settings: an explicit URL wins, otherwise the DSN is assembled
    from the postgres_* values.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Bookstore"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    environment: str = "development"
    rate_limit_default: str = "60/minute"
    rate_limit_write: str = "30/minute"
    create_tables_on_startup: bool = True

    database_url: Optional[str] = None
    test_database_url: Optional[str] = None
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "books"

    @property
    def is_test(self) -> bool:
        return self.environment.lower() == TEST_ENVIRONMENT

    def get_database_dsn(self) -> str:
        """Return the effective SQLAlchemy DSN for the books database.

        Test environment:
        1. `TEST_DATABASE_URL`
        2. DSN built from postgres_* values against `<postgres_db>_test`;
           `DATABASE_URL` is ignored so tests never touch the real database

        Any other environment:
        1. `DATABASE_URL`
        2. DSN built from postgres_* values
        """
        if self.is_test and self.test_database_url:
            return self.test_database_url
        if self.database_url and not self.is_test:
            return self.database_url
        database = f"{self.postgres_db}_test" if self.is_test else self.postgres_db
        return (
            f"postgresql+psycopg://{self.postgres_user}:{self.postgres_password}@"
            f"{self.postgres_host}:{self.postgres_port}/{database}"
        )


settings = Settings()
