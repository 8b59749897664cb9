"""Error taxonomy for user operations and its HTTP rendering."""
from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel


class ErrorDetail(BaseModel):
    """Body returned for a failed RPC call."""

    code: str
    message: str


class UserServiceError(Exception):
    """Base class for failures raised by the user service."""

    code = "unknown"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InternalError(UserServiceError):
    """Statement construction, hashing or store execution failed."""

    code = "internal"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class NotFoundError(InternalError):
    """The requested user row does not exist."""

    code = "not_found"
    status_code = status.HTTP_404_NOT_FOUND


class AlreadyExistsError(InternalError):
    """A unique constraint on name or email was violated."""

    code = "already_exists"
    status_code = status.HTTP_409_CONFLICT


async def user_service_exception_handler(_: Request, exc: UserServiceError) -> JSONResponse:
    detail = ErrorDetail(code=exc.code, message=exc.message)
    return JSONResponse(status_code=exc.status_code, content=detail.model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(UserServiceError, user_service_exception_handler)
