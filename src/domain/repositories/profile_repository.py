"""User profile repository protocol."""

from typing import Protocol

from domain.entities.profile import ProfileInput, UserProfile


class IProfileRepository(Protocol):
    """Repository interface for UserProfile entities."""

    async def list_all(self) -> list[UserProfile]:
        """Get all profiles, most recently created first."""
        ...

    async def get(self, id: int) -> UserProfile | None:
        """Get a profile by ID."""
        ...

    async def create(self, data: ProfileInput) -> UserProfile:
        """Insert a profile and return the persisted row."""
        ...

    async def update(self, id: int, data: ProfileInput) -> UserProfile | None:
        """Overwrite a profile's mutable fields and return the new row."""
        ...
