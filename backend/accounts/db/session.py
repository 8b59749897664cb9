"""Database engine (connection pool) management."""
from __future__ import annotations

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from accounts.core.config import Settings, get_settings


def create_engine_from_settings(settings: Settings | None = None) -> AsyncEngine:
    """Create the async engine whose pool is shared by concurrent requests."""

    settings = settings or get_settings()
    options: dict[str, object] = {"echo": settings.database_echo, "pool_pre_ping": True}
    if make_url(settings.database_url).get_backend_name() != "sqlite":
        options["pool_size"] = settings.database_pool_size
        options["max_overflow"] = settings.database_max_overflow
    return create_async_engine(settings.database_url, **options)
