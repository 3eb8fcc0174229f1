"""Application configuration from environment variables."""

from functools import lru_cache
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment (and .env file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Workout Log API"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # API (empty prefix serves /workouts at the root)
    api_prefix: str = ""

    # Database (PostgreSQL)
    database_host: str = "localhost"
    database_port: int = 5432
    database_user: str = "postgres"
    database_password: str = ""  # Set in .env - never commit
    database_name: str = "workout_log"
    database_ssl_mode: str = "prefer"
    # Full async SQLAlchemy URL; wins over the parts above (e.g. sqlite+aiosqlite:///./workouts.db)
    database_url_override: str = ""

    # Pool (ignored for sqlite)
    database_pool_size: int = 5
    database_max_overflow: int = 10

    # Create tables on startup instead of running Alembic (local / sqlite use)
    create_tables: bool = False

    # CORS: comma-separated list of allowed origins in production
    cors_origins: str = ""

    @property
    def async_database_url(self) -> str:
        """Async URL for FastAPI and Alembic (asyncpg driver unless overridden)."""
        if self.database_url_override:
            return self.database_url_override
        user = quote_plus(self.database_user)
        password = quote_plus(self.database_password)
        return (
            f"postgresql+asyncpg://{user}:{password}@{self.database_host}:{self.database_port}"
            f"/{self.database_name}?ssl={self.database_ssl_mode}"
        )


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
