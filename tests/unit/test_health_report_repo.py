"""Unit tests for HealthReportRepository."""

from datetime import datetime, timezone

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from healthchecker.models.health_report import HealthReport
from healthchecker.models.user import User
from healthchecker.repositories.health_report_repo import HealthReportRepository


@pytest.fixture
def repo(db_session: AsyncSession) -> HealthReportRepository:
    return HealthReportRepository(db_session)


async def _create_user(db_session: AsyncSession) -> int:
    user = User(name="reporter", email="reporter@test.com")
    db_session.add(user)
    await db_session.flush()
    return user.id


async def _create_report_with_ts(
    db_session: AsyncSession, user_id: int, date: str, updated_at: datetime
) -> HealthReport:
    """Helper: insert a report with explicit updated_at for ordering tests."""
    report = HealthReport(
        user_id=user_id,
        date=date,
        type="checkup",
        description=f"report {date}",
        updated_at=updated_at,
    )
    db_session.add(report)
    await db_session.flush()
    return report


class TestHealthReportRepository:
    """Tests for health report persistence."""

    async def test_create(
        self, repo: HealthReportRepository, db_session: AsyncSession
    ) -> None:
        user_id = await _create_user(db_session)
        report = await repo.create(
            user_id=user_id, date="2026-01-01", type="BP", description="120/80"
        )
        assert report.id is not None
        assert report.type == "BP"
        assert report.updated_at is not None

    async def test_find_by_user_newest_first(
        self, repo: HealthReportRepository, db_session: AsyncSession
    ) -> None:
        user_id = await _create_user(db_session)
        await _create_report_with_ts(
            db_session, user_id, "old", datetime(2026, 1, 1, tzinfo=timezone.utc)
        )
        await _create_report_with_ts(
            db_session, user_id, "new", datetime(2026, 1, 3, tzinfo=timezone.utc)
        )
        await _create_report_with_ts(
            db_session, user_id, "mid", datetime(2026, 1, 2, tzinfo=timezone.utc)
        )

        reports = await repo.find_by_user(user_id)
        assert [r.date for r in reports] == ["new", "mid", "old"]

    async def test_find_by_id_missing(self, repo: HealthReportRepository) -> None:
        assert await repo.find_by_id(404) is None

    async def test_update(
        self, repo: HealthReportRepository, db_session: AsyncSession
    ) -> None:
        user_id = await _create_user(db_session)
        report = await repo.create(
            user_id=user_id, date="2026-01-01", type="BP", description="high"
        )
        updated = await repo.update(report, description="normal")
        assert updated.description == "normal"
        assert updated.type == "BP"

    async def test_delete(
        self, repo: HealthReportRepository, db_session: AsyncSession
    ) -> None:
        user_id = await _create_user(db_session)
        report = await repo.create(
            user_id=user_id, date="2026-01-01", type="BP", description="x"
        )
        await repo.delete_by_id(report.id)
        db_session.expunge_all()
        assert await repo.find_by_id(report.id) is None
