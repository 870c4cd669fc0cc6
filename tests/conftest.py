"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LLM_PROVIDER", "google")

from collections.abc import AsyncGenerator  # noqa: E402
from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from langchain_core.language_models import BaseChatModel  # noqa: E402
from langchain_core.messages import AIMessage  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from healthchecker.core.database import Base  # noqa: E402
from healthchecker.models.chat_message import ChatMessage  # noqa: E402, F401
from healthchecker.models.health_report import HealthReport  # noqa: E402, F401
from healthchecker.models.user import User  # noqa: E402
from healthchecker.services.ai_gateway import AIGateway  # noqa: E402

# --- Test DB (SQLite in-memory) ---

test_engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
test_session_factory = async_sessionmaker(
    test_engine, class_=AsyncSession, expire_on_commit=False
)


@pytest.fixture(autouse=True)
async def setup_db() -> AsyncGenerator[None, None]:
    """Create all tables before each test, drop after."""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


async def override_get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """Provide a test database session."""
    async with test_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# --- Seed helpers ---


async def seed_user(email: str = "user@test.com", name: str = "Test User") -> int:
    """Insert a user and return its id."""
    async with test_session_factory() as session:
        user = User(name=name, email=email)
        session.add(user)
        await session.flush()
        user_id = user.id
        await session.commit()
    return user_id


async def seed_message(
    user_id: int, text: str, timestamp: str, response: str | None = None
) -> None:
    """Insert a stored chat message."""
    async with test_session_factory() as session:
        session.add(
            ChatMessage(
                user_id=user_id,
                text=text,
                sender="user",
                timestamp=timestamp,
                response=response,
            )
        )
        await session.commit()


# --- Mock LLM ---


@pytest.fixture
def mock_llm() -> MagicMock:
    """Create a mock LLM for testing."""
    mock = MagicMock(spec=BaseChatModel)
    mock.ainvoke = AsyncMock(return_value=AIMessage(content="Test response"))
    return mock


@pytest.fixture
def ai_gateway(mock_llm: MagicMock) -> AIGateway:
    """AIGateway backed by the mock LLM."""
    return AIGateway(mock_llm)


# --- App override & client fixtures ---


def _get_app(ai_gateway: AIGateway):  # type: ignore[no-untyped-def]
    """Import app lazily and apply overrides."""
    from healthchecker.core.database import get_async_session as original_dep
    from healthchecker.dependencies import get_ai_gateway
    from healthchecker.main import app

    app.dependency_overrides[original_dep] = override_get_async_session
    app.dependency_overrides[get_ai_gateway] = lambda: ai_gateway
    return app


@pytest.fixture
async def async_client(ai_gateway: AIGateway) -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client with the mock LLM behind the AI gateway."""
    application = _get_app(ai_gateway)
    transport = ASGITransport(app=application)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    application.dependency_overrides.clear()


# --- DB session for tests ---


@pytest.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Provide a raw async session for repository tests."""
    async with test_session_factory() as session:
        yield session
