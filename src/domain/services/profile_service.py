"""Profile service layer: payload validation and persistence calls."""

from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager
from datetime import date, datetime, timezone
from typing import Any, Callable

import structlog
from sqlalchemy.exc import SQLAlchemyError

from core.exceptions import DatabaseError
from domain.entities.profile import ProfileInput, UserProfile, parse_date_of_birth
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()

FIRST_NAME_REQUIRED = "firstName is required and must be a non-empty string"
LAST_NAME_REQUIRED = "lastName is required and must be a non-empty string"
DATE_OF_BIRTH_REQUIRED = "dateOfBirth is required"
DATE_OF_BIRTH_INVALID = "dateOfBirth must be a valid date"
DATE_OF_BIRTH_IN_FUTURE = "dateOfBirth cannot be in the future"

# Driver-level connection failures (refused, timed out) surface as OSError.
_DOWNSTREAM_ERRORS = (SQLAlchemyError, OSError)


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


class ProfileService:
    """Service layer for UserProfile business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def validate(self, data: Any, today: date | None = None) -> list[str]:
        """Check a raw payload and return every failing rule's message.

        An empty list means the payload can be decoded with
        ``ProfileInput.from_payload``.
        """
        if not isinstance(data, Mapping):
            data = {}
        today = today or datetime.now(timezone.utc).date()
        errors: list[str] = []

        if _is_blank(data.get("firstName")):
            errors.append(FIRST_NAME_REQUIRED)

        if _is_blank(data.get("lastName")):
            errors.append(LAST_NAME_REQUIRED)

        raw_date = data.get("dateOfBirth")
        if raw_date is None or raw_date == "":
            errors.append(DATE_OF_BIRTH_REQUIRED)
        else:
            try:
                date_of_birth = parse_date_of_birth(raw_date)
            except ValueError:
                errors.append(DATE_OF_BIRTH_INVALID)
            else:
                if date_of_birth > today:
                    errors.append(DATE_OF_BIRTH_IN_FUTURE)

        return errors

    async def list_profiles(self) -> list[UserProfile]:
        """Get every profile, most recently created first."""
        async with self._unit_of_work("list_profiles") as uow:
            return await uow.profiles.list_all()

    async def get_by_id(self, profile_id: int) -> UserProfile | None:
        """Get a profile, or None when no row matches."""
        async with self._unit_of_work("get_profile") as uow:
            return await uow.profiles.get(profile_id)

    async def create(self, data: ProfileInput) -> UserProfile:
        """Persist a new profile. The payload must already be validated."""
        async with self._unit_of_work("create_profile") as uow:
            created = await uow.profiles.create(data)
            await uow.commit()
            return created

    async def update(self, profile_id: int, data: ProfileInput) -> UserProfile | None:
        """Overwrite a profile's fields, or return None when it does not exist."""
        async with self._unit_of_work("update_profile") as uow:
            updated = await uow.profiles.update(profile_id, data)
            if updated is not None:
                await uow.commit()
            return updated

    @asynccontextmanager
    async def _unit_of_work(self, operation: str) -> AsyncIterator[IUnitOfWork]:
        """Open a unit of work and turn database failures into DatabaseError."""
        try:
            async with self._uow_factory() as uow:
                yield uow
        except _DOWNSTREAM_ERRORS as exc:
            logger.error(
                "profile_store_failed",
                operation=operation,
                error=str(exc),
                error_type=type(exc).__name__,
                exc_info=True,
            )
            raise DatabaseError() from exc
