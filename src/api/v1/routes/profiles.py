"""Profile API routes."""

from typing import Any

import structlog
from fastapi import APIRouter, Body, Depends, status

from api.v1.dependencies import get_profile_service
from api.v1.schemas.common import ErrorResponse
from api.v1.schemas.profile import (
    ProfileDetailResponse,
    ProfileListResponse,
    ProfileMutationResponse,
    ProfileResponse,
)
from core.exceptions import InvalidProfileIdError, ProfileNotFoundError, ProfileValidationError
from domain.entities.profile import ProfileInput
from domain.services.profile_service import ProfileService

logger = structlog.get_logger()

router = APIRouter(prefix="/profiles", tags=["profiles"])

# user_profiles.id is a SERIAL (int4) column.
MAX_PROFILE_ID = 2_147_483_647

PROFILE_EXAMPLE = {
    "firstName": "John",
    "lastName": "Doe",
    "dateOfBirth": "1990-01-15",
}

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    500: {"model": ErrorResponse, "description": "Internal server error"},
}


def parse_profile_id(raw_id: str) -> int:
    """Parse a path segment as a positive base-10 profile ID."""
    if not raw_id.isascii() or not raw_id.isdigit():
        raise InvalidProfileIdError(raw_id)
    profile_id = int(raw_id)
    if profile_id <= 0 or profile_id > MAX_PROFILE_ID:
        raise InvalidProfileIdError(raw_id)
    return profile_id


def decode_profile(service: ProfileService, body: Any) -> ProfileInput:
    """Validate a raw request body and decode it into a ProfileInput."""
    errors = service.validate(body)
    if errors:
        raise ProfileValidationError(errors)
    return ProfileInput.from_payload(body)


@router.get(
    "",
    response_model=ProfileListResponse,
    summary="List all profiles",
    responses=_ERROR_RESPONSES,
)
async def list_profiles(
    service: ProfileService = Depends(get_profile_service),
) -> ProfileListResponse:
    """Get every profile, most recently created first."""
    logger.info("profiles_list_requested")
    profiles = await service.list_profiles()
    return ProfileListResponse(
        data=[ProfileResponse.model_validate(profile) for profile in profiles],
        count=len(profiles),
    )


@router.get(
    "/{profile_id}",
    response_model=ProfileDetailResponse,
    summary="Get a profile",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid profile ID"},
        404: {"model": ErrorResponse, "description": "Profile not found"},
        **_ERROR_RESPONSES,
    },
)
async def get_profile(
    profile_id: str,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Get a single profile by its numeric ID."""
    parsed_id = parse_profile_id(profile_id)
    logger.info("profile_requested", profile_id=parsed_id)

    profile = await service.get_by_id(parsed_id)
    if profile is None:
        raise ProfileNotFoundError(parsed_id)

    return ProfileDetailResponse(data=ProfileResponse.model_validate(profile))


@router.post(
    "",
    response_model=ProfileMutationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a profile",
    responses={
        201: {"description": "Profile created successfully"},
        400: {"model": ErrorResponse, "description": "Validation failed"},
        **_ERROR_RESPONSES,
    },
)
async def create_profile(
    body: dict[str, Any] = Body(..., examples=[PROFILE_EXAMPLE]),
    service: ProfileService = Depends(get_profile_service),
) -> ProfileMutationResponse:
    """Create a profile. Names are trimmed; the date must be YYYY-MM-DD and not in the future."""
    data = decode_profile(service, body)
    profile = await service.create(data)
    logger.info("profile_created", profile_id=profile.id)

    return ProfileMutationResponse(
        data=ProfileResponse.model_validate(profile),
        message="Profile created successfully",
    )


@router.put(
    "/{profile_id}",
    response_model=ProfileMutationResponse,
    summary="Replace a profile",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid profile ID or validation failed"},
        404: {"model": ErrorResponse, "description": "Profile not found"},
        **_ERROR_RESPONSES,
    },
)
async def update_profile(
    profile_id: str,
    # Optional so the ID is checked first; non-object bodies fail validation.
    body: Any = Body(None, examples=[PROFILE_EXAMPLE]),
    service: ProfileService = Depends(get_profile_service),
) -> ProfileMutationResponse:
    """Overwrite all fields of an existing profile."""
    parsed_id = parse_profile_id(profile_id)
    data = decode_profile(service, body)

    profile = await service.update(parsed_id, data)
    if profile is None:
        raise ProfileNotFoundError(parsed_id)
    logger.info("profile_updated", profile_id=parsed_id)

    return ProfileMutationResponse(
        data=ProfileResponse.model_validate(profile),
        message="Profile updated successfully",
    )
