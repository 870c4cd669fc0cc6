"""User management business logic."""

import structlog

from healthchecker.core.exceptions import UserAlreadyExistsError, UserNotFoundError
from healthchecker.models.user import User
from healthchecker.repositories.user_repo import UserRepository
from healthchecker.schemas.user_schema import (
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)

logger = structlog.get_logger()


class UserService:
    """Create, read and update users."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def create(self, request: UserCreateRequest) -> UserResponse:
        if await self._user_repo.exists_by_email(request.email):
            raise UserAlreadyExistsError
        user = await self._user_repo.create(
            name=request.name,
            email=request.email,
            age=request.age,
        )
        logger.info("User created", user_id=user.id)
        return UserResponse.model_validate(user)

    async def get(self, user_id: int) -> UserResponse:
        return UserResponse.model_validate(await self._require(user_id))

    async def list_all(self) -> list[UserResponse]:
        users = await self._user_repo.find_all()
        return [UserResponse.model_validate(user) for user in users]

    async def update(self, user_id: int, request: UserUpdateRequest) -> UserResponse:
        user = await self._require(user_id)
        changes = request.model_dump(exclude_unset=True, exclude_none=True)
        if changes:
            user = await self._user_repo.update(user, **changes)
        return UserResponse.model_validate(user)

    async def _require(self, user_id: int) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError
        return user
