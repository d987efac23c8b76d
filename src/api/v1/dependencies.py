"""Dependency injection factories for API v1."""

from fastapi import Request

from domain.services.profile_service import ProfileService
from infrastructure.database.session import Database


def get_database(request: Request) -> Database:
    """Get the Database attached to the running application."""
    database: Database | None = getattr(request.app.state, "database", None)
    if database is None:
        raise RuntimeError("Database not initialized. Is the app lifespan running?")
    return database


def get_profile_service(request: Request) -> ProfileService:
    """Get Profile service instance."""
    return ProfileService(get_database(request).unit_of_work)
