"""User service: maps UserV1 requests to single SQL statements and back."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import String, delete, insert, select, type_coerce, update
from sqlalchemy.engine import Row
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from accounts.core.errors import AlreadyExistsError, InternalError, NotFoundError
from accounts.core.security import PasswordHasher
from accounts.db.timestamps import utcnow
from accounts.models.user import User
from accounts.schemas.user_v1 import (
    CreateRequest,
    CreateResponse,
    DeleteRequest,
    Empty,
    GetRequest,
    GetResponse,
    Role,
    UpdateRequest,
)

logger = logging.getLogger(__name__)

_ROLE_TO_DB: dict[Role, str] = {
    Role.UNSPECIFIED: "unspecified",
    Role.USER: "user",
    Role.ADMIN: "admin",
}
_DB_TO_ROLE: dict[str, Role] = {value: role for role, value in _ROLE_TO_DB.items()}

_UNIQUE_VIOLATION = "23505"


def role_to_db(role: Role) -> str:
    return _ROLE_TO_DB.get(role, _ROLE_TO_DB[Role.UNSPECIFIED])


def role_from_db(value: Any) -> Role:
    """Map a stored role back to the enumeration; unknown values become UNSPECIFIED."""
    if not isinstance(value, str):
        return Role.UNSPECIFIED
    return _DB_TO_ROLE.get(value.strip().lower(), Role.UNSPECIFIED)


def normalize_name(name: str) -> str:
    return name.strip()


def normalize_email(email: str) -> str:
    return email.strip().lower()


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive UTC timestamps
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _is_unique_violation(exc: IntegrityError) -> bool:
    orig = exc.orig
    if getattr(orig, "sqlstate", None) == _UNIQUE_VIOLATION or getattr(orig, "pgcode", None) == _UNIQUE_VIOLATION:
        return True
    return "unique" in str(orig).lower()


def _row_to_response(row: Row) -> GetResponse:
    return GetResponse(
        id=row.id,
        name=row.name,
        email=row.email,
        role=role_from_db(row.role),
        created_at=_as_utc(row.created_at),
        updated_at=_as_utc(row.updated_at),
    )


class UserService:
    """Create, read, update and delete users through a shared connection pool."""

    def __init__(self, engine: AsyncEngine, hasher: PasswordHasher) -> None:
        self._engine = engine
        self._hasher = hasher

    async def create(self, request: CreateRequest) -> CreateResponse:
        try:
            password_hash = self._hasher.hash(request.password)
        except (ValueError, TypeError, RuntimeError) as exc:
            raise InternalError(f"failed to hash password: {exc}") from exc

        stmt = (
            insert(User)
            .values(
                name=normalize_name(request.name),
                email=normalize_email(request.email),
                password=password_hash,
                role=role_to_db(request.role),
            )
            .returning(User.id)
        )
        try:
            async with self._engine.begin() as conn:
                result = await conn.execute(stmt)
                user_id = result.scalar_one()
        except IntegrityError as exc:
            if _is_unique_violation(exc):
                raise AlreadyExistsError("user with this name or email already exists") from exc
            logger.error("Failed to insert user: %s", exc.orig)
            raise InternalError(f"failed to insert user: {exc.orig}") from exc
        except SQLAlchemyError as exc:
            logger.error("Failed to insert user: %s", exc)
            raise InternalError(f"failed to insert user: {exc}") from exc

        logger.info("Inserted user with id %d", user_id)
        return CreateResponse(id=user_id)

    async def get(self, request: GetRequest) -> GetResponse:
        # Role is read as plain text so unknown stored values cannot fail the read.
        stmt = select(
            User.id,
            User.name,
            User.email,
            type_coerce(User.role, String).label("role"),
            User.created_at,
            User.updated_at,
        ).where(User.id == request.id)
        try:
            async with self._engine.connect() as conn:
                result = await conn.execute(stmt)
                row = result.one_or_none()
        except SQLAlchemyError as exc:
            logger.error("Failed to select user %d: %s", request.id, exc)
            raise InternalError(f"failed to select user: {exc}") from exc

        if row is None:
            raise NotFoundError(f"user {request.id} not found")

        logger.debug("Fetched user %d", row.id)
        return _row_to_response(row)

    async def update(self, request: UpdateRequest) -> Empty:
        values: dict[str, Any] = {}
        if request.email is not None:
            email = normalize_email(request.email)
            if email:
                values["email"] = email
        if request.name is not None:
            name = normalize_name(request.name)
            if name:
                values["name"] = name
        if request.role != Role.UNSPECIFIED:
            values["role"] = role_to_db(request.role)
        values["updated_at"] = utcnow()

        stmt = update(User).where(User.id == request.id).values(**values)
        try:
            async with self._engine.begin() as conn:
                result = await conn.execute(stmt)
        except IntegrityError as exc:
            if _is_unique_violation(exc):
                raise AlreadyExistsError("user with this name or email already exists") from exc
            logger.error("Failed to update user %d: %s", request.id, exc.orig)
            raise InternalError(f"failed to update user: {exc.orig}") from exc
        except SQLAlchemyError as exc:
            logger.error("Failed to update user %d: %s", request.id, exc)
            raise InternalError(f"failed to update user: {exc}") from exc

        logger.info("Updated user count: %d", result.rowcount)
        return Empty()

    async def delete(self, request: DeleteRequest) -> Empty:
        stmt = delete(User).where(User.id == request.id)
        try:
            async with self._engine.begin() as conn:
                result = await conn.execute(stmt)
        except SQLAlchemyError as exc:
            logger.error("Failed to delete user %d: %s", request.id, exc)
            raise InternalError(f"failed to delete user: {exc}") from exc

        logger.info("Deleted user count: %d", result.rowcount)
        return Empty()
