"""
Application configuration.

Loads settings from environment variables and .env file, once at
process start. All configuration is centralized here, no scattered
magic strings.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL, make_url

_POSTGRES_DRIVERS = {"postgres", "postgresql", "postgresql+psycopg2"}


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        app_name: Service name, also used as the API title.
        app_env: Deployment environment (development, staging, production).
        app_version: Current API version string.
        http_addr: Interface the HTTP server binds to.
        http_port: Port the HTTP server listens on.
        db_driver: Database driver name. ``postgres`` maps to psycopg2.
        db_host, db_port, db_user, db_password, db_name, db_sslmode:
            PostgreSQL connection parameters.
        database_url: Full SQLAlchemy URL. Overrides the db_* values when set.
        db_pool_size: Connections kept open in the pool.
        db_max_overflow: Extra connections allowed above db_pool_size.
        db_pool_recycle_seconds: Connections older than this are replaced.
        db_pool_timeout_seconds: Maximum wait for a free pooled connection.
        request_timeout_seconds: Deadline applied to every persistence call.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rate_limit_enabled: Toggle for the per-client rate limiter.
        rate_limit_default: Default rate limit for all endpoints.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    app_name: str = "product-service"
    app_env: str = "development"
    app_version: str = "0.1.0"

    http_addr: str = "0.0.0.0"
    http_port: int = 8080

    db_driver: str = "postgres"
    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "app_user"
    db_password: str = "app_password"
    db_name: str = "product_db"
    db_sslmode: str = "disable"
    database_url: Optional[str] = None

    db_pool_size: int = 10
    db_max_overflow: int = 15
    db_pool_recycle_seconds: int = 300
    db_pool_timeout_seconds: int = 30

    request_timeout_seconds: int = 30

    log_level: str = "info"

    rate_limit_enabled: bool = True
    rate_limit_default: str = "120/minute"

    @property
    def debug(self) -> bool:
        """Return True when running in the development environment."""
        return self.app_env.lower() == "development"

    @property
    def request_timeout_ms(self) -> int:
        """Return the per-request deadline in milliseconds."""
        return self.request_timeout_seconds * 1000

    def get_database_url(self) -> URL:
        """Return the effective SQLAlchemy URL.

        Priority:
        1. Explicit ``DATABASE_URL``
        2. Build the URL from the db_* values
        """
        if self.database_url:
            return make_url(self.database_url)

        driver = self.db_driver.lower()
        if driver in _POSTGRES_DRIVERS:
            driver = "postgresql+psycopg2"

        return URL.create(
            drivername=driver,
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
            query={"sslmode": self.db_sslmode},
        )


settings = Settings()
