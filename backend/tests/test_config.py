"""Tests for settings loading and engine construction."""
from __future__ import annotations

from pathlib import Path

import pytest

from accounts.core.config import Settings
from accounts.db.session import create_engine_from_settings


class TestSettings:
    def test_default_values(self) -> None:
        # Validate declared defaults; the runtime environment may override them.
        fields = Settings.model_fields
        assert fields["database_url"].default == "sqlite+aiosqlite:///./accounts.db"
        assert fields["port"].default == 50051
        assert fields["password_hash_time_cost"].default >= 3

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ACCOUNTS_DATABASE_URL", "postgresql+asyncpg://u:p@db:5432/auth")
        monkeypatch.setenv("ACCOUNTS_PORT", "6000")
        monkeypatch.setenv("ACCOUNTS_LOG_LEVEL", " debug ")

        settings = Settings(_env_file=None)

        assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/auth"
        assert settings.port == 6000
        assert settings.log_level == "DEBUG"

    def test_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("ACCOUNTS_HOST", raising=False)
        monkeypatch.delenv("ACCOUNTS_PORT", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("ACCOUNTS_HOST=127.0.0.1\nACCOUNTS_PORT=9090\n", encoding="utf-8")

        settings = Settings(_env_file=env_file)

        assert settings.listen_address == "127.0.0.1:9090"

    def test_rejects_invalid_port(self) -> None:
        with pytest.raises(ValueError):
            Settings(_env_file=None, port=0)


class TestEngine:
    @pytest.mark.asyncio
    async def test_sqlite_engine(self, test_settings: Settings) -> None:
        engine = create_engine_from_settings(test_settings)
        try:
            assert engine.url.get_backend_name() == "sqlite"
        finally:
            await engine.dispose()

    @pytest.mark.asyncio
    async def test_postgres_engine_uses_pool_settings(self) -> None:
        settings = Settings(
            _env_file=None,
            database_url="postgresql+asyncpg://u:p@localhost:5432/auth",
            database_pool_size=7,
            database_max_overflow=3,
        )

        engine = create_engine_from_settings(settings)
        try:
            assert engine.sync_engine.pool.size() == 7
            assert engine.sync_engine.pool._max_overflow == 3
        finally:
            await engine.dispose()
