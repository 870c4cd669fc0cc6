"""Health report CRUD business logic."""

import structlog

from healthchecker.core.exceptions import HealthReportNotFoundError, UserNotFoundError
from healthchecker.models.health_report import HealthReport
from healthchecker.repositories.health_report_repo import HealthReportRepository
from healthchecker.repositories.user_repo import UserRepository
from healthchecker.schemas.health_report_schema import (
    HealthReportCreateRequest,
    HealthReportResponse,
    HealthReportUpdateRequest,
)

logger = structlog.get_logger()


class HealthReportService:
    """Plain persistence operations over a user's health reports."""

    def __init__(
        self,
        report_repo: HealthReportRepository,
        user_repo: UserRepository,
    ) -> None:
        self._report_repo = report_repo
        self._user_repo = user_repo

    async def create(self, request: HealthReportCreateRequest) -> HealthReportResponse:
        """Record a report for an existing user."""
        if await self._user_repo.find_by_id(request.user_id) is None:
            raise UserNotFoundError
        report = await self._report_repo.create(
            user_id=request.user_id,
            date=request.date,
            type=request.type,
            description=request.description,
        )
        logger.info(
            "Health report created", report_id=report.id, user_id=report.user_id
        )
        return HealthReportResponse.model_validate(report)

    async def get(self, report_id: int) -> HealthReportResponse:
        return HealthReportResponse.model_validate(await self._require(report_id))

    async def list_for_user(self, user_id: int) -> list[HealthReportResponse]:
        """Reports of a user, most recently updated first."""
        reports = await self._report_repo.find_by_user(user_id)
        return [HealthReportResponse.model_validate(r) for r in reports]

    async def update(
        self, report_id: int, request: HealthReportUpdateRequest
    ) -> HealthReportResponse:
        report = await self._require(report_id)
        changes = request.model_dump(exclude_unset=True, exclude_none=True)
        if changes:
            report = await self._report_repo.update(report, **changes)
        return HealthReportResponse.model_validate(report)

    async def delete(self, report_id: int) -> None:
        await self._require(report_id)
        await self._report_repo.delete_by_id(report_id)
        logger.info("Health report deleted", report_id=report_id)

    async def _require(self, report_id: int) -> HealthReport:
        report = await self._report_repo.find_by_id(report_id)
        if report is None:
            raise HealthReportNotFoundError
        return report
