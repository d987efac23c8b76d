"""User profile domain entities."""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


def parse_date_of_birth(value: Any) -> date:
    """Parse an ISO 8601 calendar date (``YYYY-MM-DD``).

    Raises:
        ValueError: If the value is not a string in that form or does not
            name a real calendar day.
    """
    if not isinstance(value, str) or not _ISO_DATE.fullmatch(value):
        raise ValueError(f"Not an ISO 8601 calendar date: {value!r}")
    return date.fromisoformat(value)


@dataclass
class ProfileInput:
    """Validated profile payload, decoded from the request body."""

    first_name: str
    last_name: str
    date_of_birth: date

    def __post_init__(self) -> None:
        """Names are stored without surrounding whitespace."""
        self.first_name = self.first_name.strip()
        self.last_name = self.last_name.strip()

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "ProfileInput":
        """Decode a camelCase payload that has already passed validation."""
        return cls(
            first_name=data["firstName"],
            last_name=data["lastName"],
            date_of_birth=parse_date_of_birth(data["dateOfBirth"]),
        )


@dataclass
class UserProfile:
    """Domain entity for a persisted user profile."""

    id: int
    first_name: str
    last_name: str
    date_of_birth: date
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        """Ensure updated_at is always at least as recent as created_at."""
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at
