"""Integration tests for GET /entire-report/{user_id}."""

from collections.abc import AsyncGenerator
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import SQLAlchemyError

from healthchecker.dependencies import get_health_report_repository
from healthchecker.models.health_report import HealthReport
from healthchecker.repositories.health_report_repo import HealthReportRepository
from healthchecker.services.ai_gateway import AIGateway
from healthchecker.services.prompt_builder import NO_HEALTH_REPORTS
from tests.conftest import _get_app, seed_user, test_session_factory


async def _seed_report(user_id: int, date: str, updated_at: datetime) -> None:
    async with test_session_factory() as session:
        session.add(
            HealthReport(
                user_id=user_id,
                date=date,
                type="Blood test",
                description=f"result {date}",
                updated_at=updated_at,
            )
        )
        await session.commit()


class TestEntireReport:
    """Summary over stored health reports."""

    @pytest.mark.asyncio
    async def test_returns_plain_text(
        self, async_client: AsyncClient, mock_llm: MagicMock
    ) -> None:
        user_id = await seed_user()
        await _seed_report(user_id, "2026-01-01", datetime(2026, 1, 1, tzinfo=timezone.utc))

        resp = await async_client.get(f"/entire-report/{user_id}")
        assert resp.status_code == 200
        assert resp.text == "Test response"
        assert resp.headers["content-type"].startswith("text/plain")

    @pytest.mark.asyncio
    async def test_reports_sent_newest_first(
        self, async_client: AsyncClient, mock_llm: MagicMock
    ) -> None:
        user_id = await seed_user()
        await _seed_report(user_id, "old", datetime(2026, 1, 1, tzinfo=timezone.utc))
        await _seed_report(user_id, "new", datetime(2026, 3, 1, tzinfo=timezone.utc))

        await async_client.get(f"/entire-report/{user_id}")

        sent = mock_llm.ainvoke.call_args[0][0]
        assert len(sent) == 3
        assert sent[1].content.startswith("Date: new")
        assert sent[2].content.startswith("Date: old")

    @pytest.mark.asyncio
    async def test_no_reports(
        self, async_client: AsyncClient, mock_llm: MagicMock
    ) -> None:
        resp = await async_client.get("/entire-report/42")
        assert resp.status_code == 200
        sent = mock_llm.ainvoke.call_args[0][0]
        assert sent[-1].content == NO_HEALTH_REPORTS

    @pytest.mark.asyncio
    async def test_ai_failure(
        self, async_client: AsyncClient, mock_llm: MagicMock
    ) -> None:
        mock_llm.ainvoke.side_effect = RuntimeError("boom")
        resp = await async_client.get("/entire-report/1")
        assert resp.status_code == 500
        assert resp.json()["code"] == "AI_GATEWAY_ERROR"

    @pytest.mark.asyncio
    async def test_invalid_user_id(self, async_client: AsyncClient) -> None:
        resp = await async_client.get("/entire-report/not-a-number")
        assert resp.status_code == 400

    @pytest.mark.asyncio
    async def test_out_of_range_user_id(
        self, async_client: AsyncClient, mock_llm: MagicMock
    ) -> None:
        resp = await async_client.get("/entire-report/99999999999999999999")
        assert resp.status_code == 400
        assert resp.json()["code"] == "INVALID_REQUEST"
        mock_llm.ainvoke.assert_not_called()


@pytest.fixture
async def client_with_broken_db(
    ai_gateway: AIGateway,
) -> AsyncGenerator[AsyncClient, None]:
    repo = MagicMock(spec=HealthReportRepository)
    repo.find_by_user = AsyncMock(side_effect=SQLAlchemyError("db down"))
    application = _get_app(ai_gateway)
    application.dependency_overrides[get_health_report_repository] = lambda: repo
    transport = ASGITransport(app=application)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    application.dependency_overrides.clear()


class TestEntireReportReadFailure:
    """A failed read is fatal here, unlike the chat pipeline."""

    @pytest.mark.asyncio
    async def test_returns_500_without_ai_call(
        self, client_with_broken_db: AsyncClient, mock_llm: MagicMock
    ) -> None:
        resp = await client_with_broken_db.get("/entire-report/1")
        assert resp.status_code == 500
        assert resp.json()["code"] == "DATABASE_ERROR"
        mock_llm.ainvoke.assert_not_called()
