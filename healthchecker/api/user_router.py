"""User management endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from healthchecker.api.params import UserIdPath
from healthchecker.dependencies import get_user_service
from healthchecker.schemas.response_schema import error_responses
from healthchecker.schemas.user_schema import (
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)
from healthchecker.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])

UserServiceDep = Annotated[UserService, Depends(get_user_service)]


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses=error_responses(400, 409),
)
async def create_user(body: UserCreateRequest, service: UserServiceDep) -> UserResponse:
    """Register a new user."""
    return await service.create(body)


@router.get("", response_model=list[UserResponse])
async def list_users(service: UserServiceDep) -> list[UserResponse]:
    return await service.list_all()


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses=error_responses(400, 404),
)
async def get_user(user_id: UserIdPath, service: UserServiceDep) -> UserResponse:
    return await service.get(user_id)


@router.patch(
    "/{user_id}",
    response_model=UserResponse,
    responses=error_responses(400, 404),
)
async def update_user(
    user_id: UserIdPath, body: UserUpdateRequest, service: UserServiceDep
) -> UserResponse:
    """Update a user's name or age."""
    return await service.update(user_id, body)
