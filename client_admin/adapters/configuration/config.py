# client_admin/adapters/configuration/config.py

from typing import Optional, List, Union, Literal
from logging import getLevelName
from pydantic import Field, PostgresDsn, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"

    # Environment
    ENVIRONMENT: str = "development"  # "development", "production", "testing"

    # Debug flag
    DEBUG: bool = False

    # Database
    DB_DRIVER: str = "asyncpg"
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_DB: str = "identity_admin"
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    DATABASE_URL: Optional[str] = Field(default=None, validate_default=True)

    # Caller identity (bearer JWT issued by the identity server)
    SECRET_KEY: str = "change-me"
    ALGORITHM: str = "HS256"

    # Pagination
    PAGE_SIZE_DEFAULT: int = 20
    PAGE_SIZE_MAX: int = 100
    PAGINATION_POLICY: Literal["clamp", "reject"] = "clamp"

    # Client identifier generation
    CLIENT_ID_MAX_ATTEMPTS: int = 3

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:8080", "http://127.0.0.1:8080"]

    @field_validator("DATABASE_URL", mode="before")
    def assemble_db_url(cls, value, info):
        if value:
            return value

        data = info.data
        return str(PostgresDsn.build(
            scheme=f"postgresql+{data.get('DB_DRIVER', 'asyncpg')}",
            username=data["POSTGRES_USER"],
            password=data["POSTGRES_PASSWORD"],
            host=data["POSTGRES_HOST"],
            port=data["POSTGRES_PORT"],
            path=data["POSTGRES_DB"],
        ))

    @field_validator("CORS_ORIGINS", mode="before")
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        """
        A CSV string (e.g. 'a,b,c') becomes a list.
        Lists and JSON arrays are returned unchanged.
        """
        if isinstance(v, str) and not v.startswith("["):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        if isinstance(v, (list, str)):
            return v
        raise ValueError(f"Invalid CORS_ORIGINS: {v!r}")

    @field_validator("LOG_LEVEL", mode="before")
    def validate_log_level(cls, v: str) -> str:
        """Ensures the value is a valid logging level"""
        lvl = v.upper()
        getLevelName(lvl)
        return lvl

    @field_validator("PAGE_SIZE_MAX")
    def validate_page_size_max(cls, v: int) -> int:
        if v < 1:
            raise ValueError("PAGE_SIZE_MAX must be at least 1")
        return v

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
