"""Shared fixtures: isolated SQLite store, service and HTTP client per test."""
from __future__ import annotations

from collections.abc import AsyncGenerator, Generator
from pathlib import Path

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncEngine

from accounts.core.config import Settings
from accounts.core.security import PasswordHasher
from accounts.db.base import Base
from accounts.db.session import create_engine_from_settings
from accounts.main import create_app
from accounts.services.users import UserService


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings pointing at a throwaway database with cheap hashing."""
    return Settings(
        _env_file=None,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'accounts.db'}",
        password_hash_time_cost=1,
        password_hash_memory_cost=1024,
    )


@pytest_asyncio.fixture
async def db_engine(test_settings: Settings) -> AsyncGenerator[AsyncEngine, None]:
    engine = create_engine_from_settings(test_settings)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def password_hasher(test_settings: Settings) -> PasswordHasher:
    return PasswordHasher(test_settings)


@pytest.fixture
def user_service(db_engine: AsyncEngine, password_hasher: PasswordHasher) -> UserService:
    return UserService(db_engine, password_hasher)


@pytest.fixture
def client(test_settings: Settings) -> Generator[TestClient, None, None]:
    """HTTP client running the full application lifespan."""
    app = create_app(test_settings)
    with TestClient(app) as test_client:
        yield test_client
