"""User request/response schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class UserCreateRequest(BaseModel):
    """New user registration."""

    name: str = Field(min_length=1, max_length=100, description="Display name")
    email: EmailStr = Field(description="User email address")
    age: int | None = Field(default=None, ge=0, le=150)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower().strip()


class UserUpdateRequest(BaseModel):
    """Partial user update."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    age: int | None = Field(default=None, ge=0, le=150)


class UserResponse(BaseModel):
    """Public user representation."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: int
    name: str
    email: str
    age: int | None = None
    created_at: datetime
