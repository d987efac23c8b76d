"""Check that the configured database is reachable.

Prints the connection pool counters, then runs one round trip. Exits 0 when
the database answers and 1 otherwise, so it can gate deployments::

    python scripts/check_database.py
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from core.config import settings
from core.logging import setup_logging
from infrastructure.database.session import Database


async def check(database: Database) -> bool:
    """Print pool status and the connectivity check, return success."""
    pool_status = database.get_status()
    print("Connection pool status:")
    print(f"  Connected:          {'yes' if pool_status.connected else 'no'}")
    print(f"  Total connections:  {pool_status.total}")
    print(f"  Idle connections:   {pool_status.idle}")
    print(f"  In-use connections: {pool_status.in_use}")
    print()

    try:
        result = await database.check_connection()
    finally:
        await database.dispose()

    if result.connected:
        print("Database connection successful")
        print(f"  Timestamp: {result.timestamp}")
    else:
        print("Database connection failed")
        print(f"  Error: {result.error}")
    print(f"  Message: {result.message}")
    return result.connected


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.parse_args(argv)
    setup_logging(level="warning")

    ok = asyncio.run(check(Database.from_settings(settings)))
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
