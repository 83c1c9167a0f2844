"""Application settings using Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str = "sqlite:///./employees.db"
    sql_echo: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8090
    cors_origin: str = "http://localhost:8093"

    # Logging
    log_level: str = "INFO"

    # Search
    default_rows_per_page: int = 20
    current_employee_id: int | None = None

    @property
    def is_sqlite(self) -> bool:
        """Whether the configured database is SQLite."""
        return self.database_url.startswith("sqlite")


settings = Settings()
