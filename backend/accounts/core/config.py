"""Application configuration and settings management."""
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global application settings loaded from environment variables or .env."""

    model_config = SettingsConfigDict(
        env_file=(Path(__file__).resolve().parent.parent / ".." / ".env"),
        env_file_encoding="utf-8",
        env_prefix="ACCOUNTS_",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = "Accounts"

    # Database
    database_url: str = "sqlite+aiosqlite:///./accounts.db"
    database_pool_size: int = Field(default=5, ge=1)
    database_max_overflow: int = Field(default=10, ge=0)
    database_echo: bool = False

    # RPC listener
    host: str = "0.0.0.0"
    port: int = Field(default=50051, ge=1, le=65535)

    # Password hashing (Argon2id)
    password_hash_time_cost: int = Field(default=3, ge=1)
    password_hash_memory_cost: int = Field(default=65536, ge=8)  # KiB

    log_level: str = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @property
    def listen_address(self) -> str:
        return f"{self.host}:{self.port}"


@lru_cache
def get_settings() -> Settings:
    """Return memoized settings instance."""

    return Settings()
