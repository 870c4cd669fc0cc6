"""FastAPI application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from healthchecker.api.health_report_router import router as health_report_router
from healthchecker.api.history_router import router as history_router
from healthchecker.api.report_router import router as report_router
from healthchecker.api.user_router import router as user_router
from healthchecker.core.config import settings
from healthchecker.core.database import Base, engine
from healthchecker.core.exceptions import (
    AppException,
    app_exception_handler,
    validation_exception_handler,
)
from healthchecker.core.middleware import RequestLoggingMiddleware

# Register all models on Base.metadata before create_all runs.
from healthchecker.models import chat_message, health_report, user  # noqa: F401

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info(
        "Starting application",
        app_name=settings.app.name,
        environment=settings.app.env,
        llm_provider=settings.llm.provider,
        llm_model=settings.llm.model_name,
    )
    if settings.app.is_development:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    yield
    await engine.dispose()
    logger.info("Shutting down application")


app = FastAPI(
    title=settings.app.name,
    description="Health chat backend with AI replies and medical report summaries",
    version=settings.app.version,
    lifespan=lifespan,
    debug=settings.app.debug,
)

# Exception handlers
app.add_exception_handler(AppException, app_exception_handler)  # type: ignore[arg-type]
app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]

# Middleware (registration order: inner→outer, execution order: outer→inner)
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors.allow_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Origin", "Content-Type", "Accept", "Authorization"],
    expose_headers=["Content-Length"],
    max_age=12 * 60 * 60,
)


@app.get("/health")
async def health_check() -> dict:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
async def root() -> dict:
    """Root endpoint."""
    return {
        "app": settings.app.name,
        "version": settings.app.version,
        "docs": "/docs",
    }


# Register routers
app.include_router(user_router)
app.include_router(health_report_router)
app.include_router(history_router)
app.include_router(report_router)


def run() -> None:
    """Serve the application with uvicorn."""
    logger.info("Serving", bind=settings.server.bind, reload=settings.server.reload)
    uvicorn.run(
        "healthchecker.main:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.server.reload,
    )


if __name__ == "__main__":
    run()
