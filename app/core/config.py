"""Application configuration from environment variables."""

from functools import lru_cache

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
    app_name: str = "Coach API"
    debug: bool = False
    environment: str = "development"  # development / test / production
    port: int = 3001
    log_level: str = "INFO"

    # API
    api_prefix: str = ""

    # Auth
    jwt_secret: str = ""  # Set in .env - never commit
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24

    # Database: DATABASE_URL (PostgreSQL) wins; otherwise a local SQLite file
    database_url: str | None = None
    sqlite_db_file: str = "./db/dev.sqlite3"
    sqlite_db_file_test: str = "./db/test.sqlite3"
    auto_create_tables: bool = False

    # Pool (ignored for SQLite)
    database_pool_size: int = 5
    database_max_overflow: int = 10

    # CORS: comma-separated list of allowed origins in production
    cors_origins: str = ""

    @property
    def is_sqlite(self) -> bool:
        return not self.database_url

    @property
    def sqlite_path(self) -> str:
        return self.sqlite_db_file_test if self.environment == "test" else self.sqlite_db_file

    def _postgres_url(self, scheme: str) -> str:
        url = self.database_url or ""
        for prefix in ("postgres://", "postgresql://", "postgresql+asyncpg://"):
            if url.startswith(prefix):
                return f"{scheme}://{url[len(prefix):]}"
        return url

    @property
    def sync_database_url(self) -> str:
        """Synchronous URL for Alembic and tooling."""
        if self.is_sqlite:
            return f"sqlite:///{self.sqlite_path}"
        return self._postgres_url("postgresql")

    @property
    def async_database_url(self) -> str:
        """Async URL for FastAPI (aiosqlite or asyncpg driver)."""
        if self.is_sqlite:
            return f"sqlite+aiosqlite:///{self.sqlite_path}"
        return self._postgres_url("postgresql+asyncpg")


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
