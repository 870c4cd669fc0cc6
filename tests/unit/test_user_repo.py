"""Tests for UserRepository."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from healthchecker.repositories.user_repo import UserRepository


@pytest.fixture
def repo(db_session: AsyncSession) -> UserRepository:
    return UserRepository(db_session)


class TestUserRepository:
    """Tests for user CRUD operations."""

    async def test_create_user(self, repo: UserRepository) -> None:
        user = await repo.create(name="New", email="new@test.com", age=30)
        assert user.id is not None
        assert user.email == "new@test.com"
        assert user.age == 30

    async def test_find_by_email(
        self, repo: UserRepository, db_session: AsyncSession
    ) -> None:
        await repo.create(name="Find", email="find@test.com")
        await db_session.commit()
        found = await repo.find_by_email("find@test.com")
        assert found is not None
        assert found.name == "Find"

    async def test_find_by_email_not_found(self, repo: UserRepository) -> None:
        assert await repo.find_by_email("nonexistent@test.com") is None

    async def test_find_by_id(
        self, repo: UserRepository, db_session: AsyncSession
    ) -> None:
        user = await repo.create(name="ById", email="byid@test.com")
        await db_session.commit()
        found = await repo.find_by_id(user.id)
        assert found is not None
        assert found.email == "byid@test.com"

    async def test_find_all_ordered(self, repo: UserRepository) -> None:
        await repo.create(name="A", email="a@test.com")
        await repo.create(name="B", email="b@test.com")
        users = await repo.find_all()
        assert [u.name for u in users] == ["A", "B"]

    async def test_update(self, repo: UserRepository) -> None:
        user = await repo.create(name="Old", email="upd@test.com")
        updated = await repo.update(user, name="New", age=41)
        assert updated.name == "New"
        assert updated.age == 41

    async def test_exists_by_email(self, repo: UserRepository) -> None:
        await repo.create(name="E", email="exists@test.com")
        assert await repo.exists_by_email("exists@test.com") is True
        assert await repo.exists_by_email("nobody@test.com") is False
