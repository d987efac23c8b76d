"""Pydantic schemas for Profile API."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict


class ProfileResponse(BaseModel):
    """Schema for a persisted profile."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "first_name": "John",
                "last_name": "Doe",
                "date_of_birth": "1990-01-15",
                "created_at": "2026-01-28T10:00:00+00:00",
                "updated_at": "2026-01-28T10:00:00+00:00",
            }
        },
    )

    id: int
    first_name: str
    last_name: str
    date_of_birth: date
    created_at: datetime
    updated_at: datetime


class ProfileListResponse(BaseModel):
    """Envelope for a list of profiles."""

    success: bool = True
    data: list[ProfileResponse]
    count: int


class ProfileDetailResponse(BaseModel):
    """Envelope for a single profile."""

    success: bool = True
    data: ProfileResponse


class ProfileMutationResponse(ProfileDetailResponse):
    """Envelope for a created or updated profile."""

    message: str
