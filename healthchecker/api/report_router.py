"""Entire medical report API router."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from healthchecker.api.params import UserIdPath
from healthchecker.dependencies import get_chat_service, get_medical_report_service
from healthchecker.schemas.chat_schema import ChatReplyResponse, ChatRequest
from healthchecker.schemas.response_schema import error_responses
from healthchecker.services.chat_service import ChatService
from healthchecker.services.medical_report_service import MedicalReportService

router = APIRouter(prefix="/entire-report", tags=["entire-report"])

MedicalReportServiceDep = Annotated[
    MedicalReportService, Depends(get_medical_report_service)
]
ChatServiceDep = Annotated[ChatService, Depends(get_chat_service)]


@router.get(
    "/{user_id}",
    response_class=PlainTextResponse,
    responses=error_responses(400, 500),
)
async def get_entire_report(
    user_id: UserIdPath, service: MedicalReportServiceDep
) -> PlainTextResponse:
    """Summarize all of a user's health reports."""
    summary = await service.summarize(user_id)
    return PlainTextResponse(summary)


@router.post(
    "",
    response_model=ChatReplyResponse,
    responses=error_responses(400, 500),
)
async def create_entire_report_message(
    request: ChatRequest, service: ChatServiceDep
) -> ChatReplyResponse:
    """Chat endpoint that always stamps the server time on the stored message."""
    return await service.reply(request, stamp_timestamp=True)
