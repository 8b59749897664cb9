"""Security helpers for password hashing."""
from __future__ import annotations

from passlib.context import CryptContext

from .config import Settings, get_settings


class PasswordHasher:
    """Hash and verify user passwords using Argon2id.

    The cost parameters are fixed per process from settings; callers cannot
    change them per request.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        settings = settings or get_settings()
        self.time_cost = settings.password_hash_time_cost
        self.memory_cost = settings.password_hash_memory_cost
        self._context = CryptContext(
            schemes=["argon2"],
            deprecated="auto",
            argon2__time_cost=self.time_cost,
            argon2__memory_cost=self.memory_cost,
        )

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, password: str, hashed: str) -> bool:
        return self._context.verify(password, hashed)
