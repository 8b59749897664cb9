"""Request and response messages of the UserV1 RPC service."""
from __future__ import annotations

from datetime import datetime
from enum import IntEnum
from typing import Annotated

from pydantic import BaseModel, Field, field_serializer, field_validator

# Identifiers are 64-bit signed integers in the store.
Int64 = Annotated[int, Field(ge=-(2**63), le=2**63 - 1)]


class Role(IntEnum):
    UNSPECIFIED = 0
    USER = 1
    ADMIN = 2


def _coerce_role(value: object) -> object:
    """Accept enumeration names ("ADMIN", "admin") as well as numbers."""
    if isinstance(value, str):
        member = Role.__members__.get(value.strip().upper())
        if member is not None:
            return member
    return value


class RoleMessage(BaseModel):
    """Mixin for messages carrying a role; serializes it by name."""

    role: Role = Role.UNSPECIFIED

    @field_validator("role", mode="before")
    @classmethod
    def _parse_role(cls, value: object) -> object:
        return _coerce_role(value)

    @field_serializer("role")
    def _serialize_role(self, role: Role) -> str:
        return role.name


class CreateRequest(RoleMessage):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

    @field_validator("name", "email")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class CreateResponse(BaseModel):
    id: Int64


class GetRequest(BaseModel):
    id: Int64


class GetResponse(RoleMessage):
    id: Int64
    name: str
    email: str
    created_at: datetime
    updated_at: datetime


class UpdateRequest(RoleMessage):
    id: Int64
    email: str | None = None
    name: str | None = None


class DeleteRequest(BaseModel):
    id: Int64


class Empty(BaseModel):
    pass
