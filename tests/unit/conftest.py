"""Shared fixtures for unit tests."""

from datetime import date, datetime, timezone
from typing import Any
from unittest.mock import AsyncMock

import pytest

from domain.entities.profile import UserProfile


class FakeUnitOfWork:
    """Fake Unit of Work with a mocked profile repository."""

    def __init__(self) -> None:
        self.profiles = AsyncMock()
        self.committed = False
        self.rolled_back = False

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True

    async def __aenter__(self) -> "FakeUnitOfWork":
        return self

    async def __aexit__(self, *args: Any) -> None:
        pass


def make_profile(id: int = 1, **overrides: Any) -> UserProfile:
    """Build a persisted-looking profile."""
    created = datetime(2026, 1, 28, 10, 0, tzinfo=timezone.utc)
    fields: dict[str, Any] = {
        "id": id,
        "first_name": "John",
        "last_name": "Doe",
        "date_of_birth": date(1990, 1, 1),
        "created_at": created,
        "updated_at": created,
    }
    fields.update(overrides)
    return UserProfile(**fields)


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def valid_payload() -> dict[str, Any]:
    """A payload that passes every validation rule."""
    return {"firstName": "John", "lastName": "Doe", "dateOfBirth": "1990-01-01"}
