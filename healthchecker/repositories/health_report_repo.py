"""Health report repository for database operations."""

from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from healthchecker.models.health_report import HealthReport


class HealthReportRepository:
    """Encapsulates health report database queries."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, report_id: int) -> HealthReport | None:
        """Find a health report by primary key."""
        result = await self._session.execute(
            select(HealthReport).where(HealthReport.id == report_id)
        )
        return result.scalar_one_or_none()

    async def find_by_user(self, user_id: int) -> list[HealthReport]:
        """Retrieve a user's reports, most recently updated first."""
        result = await self._session.execute(
            select(HealthReport)
            .where(HealthReport.user_id == user_id)
            .order_by(HealthReport.updated_at.desc(), HealthReport.id.desc())
        )
        return list(result.scalars().all())

    async def create(
        self,
        user_id: int,
        date: str,
        type: str,
        description: str,
    ) -> HealthReport:
        """Create a new health report."""
        report = HealthReport(
            user_id=user_id,
            date=date,
            type=type,
            description=description,
        )
        self._session.add(report)
        await self._session.flush()
        await self._session.refresh(report)
        return report

    async def update(self, report: HealthReport, **values: Any) -> HealthReport:
        """Apply field changes to an existing report."""
        for field, value in values.items():
            setattr(report, field, value)
        await self._session.flush()
        await self._session.refresh(report)
        return report

    async def delete_by_id(self, report_id: int) -> None:
        """Hard-delete a report."""
        await self._session.execute(
            delete(HealthReport).where(HealthReport.id == report_id)
        )
