"""FastAPI application entrypoint."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from accounts.api import api_router
from accounts.core.config import Settings, get_settings
from accounts.core.errors import register_exception_handlers
from accounts.core.security import PasswordHasher
from accounts.db.base import Base
from accounts.db.session import create_engine_from_settings

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application; the connection pool lives for the lifespan."""

    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = create_engine_from_settings(settings)
        # A store that cannot be reached here aborts startup.
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        app.state.engine = engine
        app.state.password_hasher = PasswordHasher(settings)
        logger.info("Connection pool ready for %s", engine.url.render_as_string(hide_password=True))
        try:
            yield
        finally:
            await engine.dispose()
            logger.info("Connection pool closed")

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    register_exception_handlers(app)
    app.include_router(api_router)
    return app


app = create_app()
