"""Common Pydantic schemas shared across the API."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standardized error envelope."""

    success: bool = False
    error: str
    details: list[str] | None = None
