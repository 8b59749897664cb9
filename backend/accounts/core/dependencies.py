"""Reusable dependencies for FastAPI routes."""
from __future__ import annotations

from fastapi import Request

from accounts.services.users import UserService


async def get_user_service(request: Request) -> UserService:
    state = request.app.state
    return UserService(state.engine, state.password_hasher)
