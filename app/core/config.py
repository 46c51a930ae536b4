from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    All settings can be configured via .env file or environment variables.
    """

    # =============================================================================
    # APPLICATION
    # =============================================================================
    PROJECT_NAME: str = "Student CRUD API"
    APP_VERSION: str = "1.0.0"
    # Switches logging to DEBUG
    DEBUG: bool = False

    # =============================================================================
    # SERVER
    # =============================================================================
    HOST: str = "0.0.0.0"
    PORT: int = 3030

    # =============================================================================
    # DATABASE
    # =============================================================================
    DATABASE_PATH: str = "./students.db"

    # Database URL - set directly or built from DATABASE_PATH
    DATABASE_URL: Optional[str] = Field(default=None, validate_default=True)

    DB_ECHO_SQL: bool = False

    # Update/delete on an unknown NIM answer 404 instead of silently succeeding
    REPORT_MISSING_ON_MUTATION: bool = False

    # =============================================================================
    # LOGGING
    # =============================================================================
    LOG_LEVEL: str = "INFO"

    @field_validator("DATABASE_URL", mode="before")
    @classmethod
    def build_database_url(cls, v: Optional[str], info) -> str:
        """
        Build DATABASE_URL from DATABASE_PATH if not provided.

        Priority:
        1. Use DATABASE_URL if explicitly set in .env
        2. Build a SQLite URL from DATABASE_PATH
        """
        if isinstance(v, str) and v:
            return v

        path = info.data.get("DATABASE_PATH")
        return f"sqlite:///{path}"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )


# Create global settings instance
settings = Settings()
