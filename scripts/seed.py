"""Seed the user_profiles table with sample profiles.

Profiles go through the same validation and store as the API, so the
table must already exist (``alembic upgrade head``).

Usage::

    python scripts/seed.py [--dry-run]
"""

from __future__ import annotations

import argparse
import asyncio
import sys

import structlog

from core.config import settings
from core.logging import setup_logging
from domain.entities.profile import ProfileInput
from domain.services.profile_service import ProfileService
from infrastructure.database.session import Database

logger = structlog.get_logger("seed")

SAMPLE_PROFILES = [
    {"firstName": "John", "lastName": "Doe", "dateOfBirth": "1990-01-15"},
    {"firstName": "Jane", "lastName": "Smith", "dateOfBirth": "1985-03-22"},
    {"firstName": "Michael", "lastName": "Johnson", "dateOfBirth": "1992-07-10"},
    {"firstName": "Sarah", "lastName": "Williams", "dateOfBirth": "1988-11-05"},
    {"firstName": "David", "lastName": "Brown", "dateOfBirth": "1995-09-18"},
]


async def seed(service: ProfileService, dry_run: bool = False) -> int:
    """Insert every sample profile and return how many were written."""
    written = 0
    for payload in SAMPLE_PROFILES:
        errors = service.validate(payload)
        if errors:
            logger.warning("seed_profile_skipped", payload=payload, errors=errors)
            continue
        if dry_run:
            logger.info("seed_profile_dry_run", payload=payload)
            continue
        profile = await service.create(ProfileInput.from_payload(payload))
        logger.info("seed_profile_created", profile_id=profile.id)
        written += 1
    return written


async def _run(dry_run: bool) -> int:
    database = Database.from_settings(settings)
    try:
        return await seed(ProfileService(database.unit_of_work), dry_run=dry_run)
    finally:
        await database.dispose()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Seed sample user profiles.")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate and list the sample profiles without writing them",
    )
    args = parser.parse_args(argv)
    setup_logging()

    written = asyncio.run(_run(args.dry_run))
    logger.info("seed_completed", written=written, dry_run=args.dry_run)
    return 0


if __name__ == "__main__":
    sys.exit(main())
