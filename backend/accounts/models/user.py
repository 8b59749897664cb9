"""Database model for account users."""
from __future__ import annotations

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Enum, Integer, Text, UniqueConstraint
from sqlalchemy.dialects import postgresql
from sqlalchemy.orm import Mapped, mapped_column

from accounts.db.base import Base
from accounts.db.timestamps import utcnow

# Stored role values, in enumeration order.
USER_ROLE_VALUES = ("unspecified", "user", "admin")

_Timestamp = DateTime(timezone=True).with_variant(postgresql.TIMESTAMP(precision=3, timezone=True), "postgresql")


class User(Base):
    """Account with a unique name and email, a password hash and a role."""

    __tablename__ = "users"
    __table_args__ = (
        UniqueConstraint("name", name="users_name_key"),
        UniqueConstraint("email", name="users_email_key"),
    )

    id: Mapped[int] = mapped_column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    password: Mapped[str] = mapped_column(Text, nullable=False)
    role: Mapped[str] = mapped_column(
        Enum(*USER_ROLE_VALUES, name="user_role", create_constraint=True),
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        _Timestamp, nullable=False, server_default=utcnow()
    )
    updated_at: Mapped[datetime] = mapped_column(
        _Timestamp, nullable=False, server_default=utcnow()
    )
