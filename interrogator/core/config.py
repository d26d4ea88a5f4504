"""Application settings and configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
from typing import Any, Dict, Optional


class Settings(BaseSettings):
    """Application settings with environment variable loading."""

    # Application
    PROJECT_NAME: str = "Interrogator"
    VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Database
    POSTGRES_SERVER: Optional[str] = None
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = ""
    POSTGRES_DB: str = "interrogator"
    POSTGRES_PORT: str = "5432"
    SQLITE_PATH: str = "interrogator.db"
    DATABASE_URI: Optional[str] = None
    SQL_ECHO: bool = False

    # Database connection pool settings
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20

    # Logging
    LOG_DIRECTORY: str = "logs"
    LOG_LEVEL: str = "INFO"
    LOG_MAX_BYTES: int = 10 * 1024 * 1024  # 10MB
    LOG_BACKUP_COUNT: int = 5
    SERVICE_NAME: str = "interrogator"

    # Groups
    RESTORE_WINDOW_SECONDS: int = 1

    @field_validator("DATABASE_URI", mode="before")
    def assemble_db_connection(cls, v: Optional[str], info: Any) -> Any:
        """Build async connection string from components."""
        if isinstance(v, str) and v:
            return v

        values: Dict[str, Any] = info.data
        host = values.get("POSTGRES_SERVER")
        if not host:
            return f"sqlite+aiosqlite:///{values.get('SQLITE_PATH', 'interrogator.db')}"

        user = values.get("POSTGRES_USER", "")
        password = values.get("POSTGRES_PASSWORD", "")
        port = values.get("POSTGRES_PORT", "5432")
        db = values.get("POSTGRES_DB", "")

        auth = f"{user}:{password}" if password else user
        return f"postgresql+asyncpg://{auth}@{host}:{port}/{db}"

    @field_validator("LOG_LEVEL")
    def normalize_log_level(cls, v: str) -> str:
        """Logging level names are upper case."""
        return v.upper()

    @property
    def IS_SQLITE(self) -> bool:
        """Check whether the configured database is SQLite."""
        return self.DATABASE_URI.startswith("sqlite")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        validate_default=True,
        extra="ignore",
    )


# Create global settings instance
settings = Settings()
