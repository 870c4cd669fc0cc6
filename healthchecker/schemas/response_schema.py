"""Shared API response schemas."""

from typing import Any

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error body produced by the exception handlers."""

    error: str
    code: str


def error_responses(*status_codes: int) -> dict[int | str, dict[str, Any]]:
    """OpenAPI ``responses`` entries documenting the error body."""
    return {code: {"model": ErrorResponse} for code in status_codes}
