"""Whole-history medical summary built from a user's health reports."""

import structlog
from sqlalchemy.exc import SQLAlchemyError

from healthchecker.core.exceptions import AIGatewayError, PersistenceError
from healthchecker.repositories.health_report_repo import HealthReportRepository
from healthchecker.services.ai_gateway import AIGateway
from healthchecker.services.prompt_builder import build_entire_report_request

logger = structlog.get_logger()


class MedicalReportService:
    """Summarizes every health report of a user. Read-only."""

    def __init__(
        self,
        report_repo: HealthReportRepository,
        ai_gateway: AIGateway,
        response_mime_type: str = "text/plain",
    ) -> None:
        self._report_repo = report_repo
        self._ai_gateway = ai_gateway
        self._response_mime_type = response_mime_type

    async def summarize(self, user_id: int) -> str:
        """Return the AI summary text; unlike chat, a failed read is fatal."""
        try:
            reports = await self._report_repo.find_by_user(user_id)
        except SQLAlchemyError as exc:
            logger.exception("Failed to fetch health reports", user_id=user_id)
            raise PersistenceError("Failed to fetch health reports") from exc

        logger.info(
            "Generating entire medical report",
            user_id=user_id,
            report_count=len(reports),
        )
        payload = build_entire_report_request(
            reports, response_mime_type=self._response_mime_type
        )
        result = await self._ai_gateway.generate(payload)
        if not result.ok:
            raise AIGatewayError(result.error or "AI service failed")
        return result.text
