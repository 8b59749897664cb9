"""UserV1 RPC methods, one POST endpoint per method."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from accounts.core.dependencies import get_user_service
from accounts.core.errors import ErrorDetail
from accounts.schemas.user_v1 import (
    CreateRequest,
    CreateResponse,
    DeleteRequest,
    Empty,
    GetRequest,
    GetResponse,
    UpdateRequest,
)
from accounts.services.users import UserService

router = APIRouter(
    prefix="/user_v1",
    tags=["UserV1"],
    responses={
        404: {"model": ErrorDetail},
        409: {"model": ErrorDetail},
        500: {"model": ErrorDetail},
    },
)


@router.post("/Create", response_model=CreateResponse)
async def create(payload: CreateRequest, service: UserService = Depends(get_user_service)) -> CreateResponse:
    return await service.create(payload)


@router.post("/Get", response_model=GetResponse)
async def get(payload: GetRequest, service: UserService = Depends(get_user_service)) -> GetResponse:
    return await service.get(payload)


@router.post("/Update", response_model=Empty)
async def update(payload: UpdateRequest, service: UserService = Depends(get_user_service)) -> Empty:
    return await service.update(payload)


@router.post("/Delete", response_model=Empty)
async def delete(payload: DeleteRequest, service: UserService = Depends(get_user_service)) -> Empty:
    return await service.delete(payload)
