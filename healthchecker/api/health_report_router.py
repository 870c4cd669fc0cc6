"""Health report CRUD endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from healthchecker.api.params import ReportIdPath, UserIdPath
from healthchecker.dependencies import get_health_report_service
from healthchecker.schemas.health_report_schema import (
    HealthReportCreateRequest,
    HealthReportResponse,
    HealthReportUpdateRequest,
)
from healthchecker.schemas.response_schema import error_responses
from healthchecker.services.health_report_service import HealthReportService

router = APIRouter(prefix="/health-reports", tags=["health-reports"])

HealthReportServiceDep = Annotated[
    HealthReportService, Depends(get_health_report_service)
]


@router.post(
    "",
    response_model=HealthReportResponse,
    status_code=status.HTTP_201_CREATED,
    responses=error_responses(400, 404),
)
async def create_health_report(
    body: HealthReportCreateRequest, service: HealthReportServiceDep
) -> HealthReportResponse:
    """Record a health report for a user."""
    return await service.create(body)


@router.get(
    "/user/{user_id}",
    response_model=list[HealthReportResponse],
    responses=error_responses(400),
)
async def list_user_health_reports(
    user_id: UserIdPath, service: HealthReportServiceDep
) -> list[HealthReportResponse]:
    """List a user's reports, most recently updated first."""
    return await service.list_for_user(user_id)


@router.get(
    "/{report_id}",
    response_model=HealthReportResponse,
    responses=error_responses(400, 404),
)
async def get_health_report(
    report_id: ReportIdPath, service: HealthReportServiceDep
) -> HealthReportResponse:
    return await service.get(report_id)


@router.put(
    "/{report_id}",
    response_model=HealthReportResponse,
    responses=error_responses(400, 404),
)
async def update_health_report(
    report_id: ReportIdPath,
    body: HealthReportUpdateRequest,
    service: HealthReportServiceDep,
) -> HealthReportResponse:
    return await service.update(report_id, body)


@router.delete(
    "/{report_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=error_responses(400, 404),
)
async def delete_health_report(
    report_id: ReportIdPath, service: HealthReportServiceDep
) -> Response:
    await service.delete(report_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
