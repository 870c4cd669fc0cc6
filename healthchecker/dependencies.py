"""Global dependencies for the application."""

from functools import lru_cache

from fastapi import Depends
from langchain_anthropic import ChatAnthropic
from langchain_core.language_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_openai import ChatOpenAI
from sqlalchemy.ext.asyncio import AsyncSession

from healthchecker.core.config import settings
from healthchecker.core.database import get_async_session
from healthchecker.repositories.chat_repo import ChatRepository
from healthchecker.repositories.health_report_repo import HealthReportRepository
from healthchecker.repositories.user_repo import UserRepository
from healthchecker.services.ai_gateway import AIGateway
from healthchecker.services.chat_service import ChatService
from healthchecker.services.health_report_service import HealthReportService
from healthchecker.services.medical_report_service import MedicalReportService
from healthchecker.services.user_service import UserService

# --- AI ---


@lru_cache
def get_llm() -> BaseChatModel:
    """Get the LLM instance based on the configured provider."""
    llm_config = settings.llm
    match llm_config.provider:
        case "google":
            return ChatGoogleGenerativeAI(
                model=llm_config.google_model,
                google_api_key=llm_config.google_api_key,
                response_mime_type=llm_config.response_mime_type,
            )
        case "openai":
            return ChatOpenAI(
                model=llm_config.openai_model,
                api_key=llm_config.openai_api_key,
            )
        case "anthropic":
            return ChatAnthropic(  # type: ignore[call-arg]
                model_name=llm_config.anthropic_model,
                api_key=llm_config.anthropic_api_key,
            )
        case _:
            raise ValueError(f"Unsupported LLM provider: {llm_config.provider}")


def get_ai_gateway() -> AIGateway:
    """Get the AI gateway wrapping the shared chat model."""
    return AIGateway(
        get_llm(),
        forward_response_mime_type=settings.llm.provider == "google",
    )


# --- Repositories ---


def get_user_repository(
    session: AsyncSession = Depends(get_async_session),
) -> UserRepository:
    """Get UserRepository bound to the current session."""
    return UserRepository(session)


def get_chat_repository(
    session: AsyncSession = Depends(get_async_session),
) -> ChatRepository:
    """Get ChatRepository bound to the current session."""
    return ChatRepository(session)


def get_health_report_repository(
    session: AsyncSession = Depends(get_async_session),
) -> HealthReportRepository:
    """Get HealthReportRepository bound to the current session."""
    return HealthReportRepository(session)


# --- Services ---


def get_user_service(
    user_repo: UserRepository = Depends(get_user_repository),
) -> UserService:
    return UserService(user_repo)


def get_health_report_service(
    report_repo: HealthReportRepository = Depends(get_health_report_repository),
    user_repo: UserRepository = Depends(get_user_repository),
) -> HealthReportService:
    return HealthReportService(report_repo=report_repo, user_repo=user_repo)


def get_chat_service(
    chat_repo: ChatRepository = Depends(get_chat_repository),
    ai_gateway: AIGateway = Depends(get_ai_gateway),
) -> ChatService:
    """Get ChatService with DB persistence and the AI gateway."""
    return ChatService(
        chat_repo=chat_repo,
        ai_gateway=ai_gateway,
        response_mime_type=settings.llm.response_mime_type,
    )


def get_medical_report_service(
    report_repo: HealthReportRepository = Depends(get_health_report_repository),
    ai_gateway: AIGateway = Depends(get_ai_gateway),
) -> MedicalReportService:
    """Get MedicalReportService reading health reports."""
    return MedicalReportService(
        report_repo=report_repo,
        ai_gateway=ai_gateway,
        response_mime_type=settings.llm.response_mime_type,
    )
