"""Database engine, connection pool and session management."""

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any

import structlog
from sqlalchemy import event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import QueuePool

from core.config import Settings
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork

logger = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class ConnectionCheck:
    """Outcome of one round trip to the database."""

    connected: bool
    message: str
    timestamp: datetime | str | None = None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class PoolStatus:
    """Connection pool counters, read without touching the database."""

    connected: bool
    size: int
    total: int
    idle: int
    in_use: int
    overflow: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def create_database_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine with a bounded connection pool."""
    url = settings.async_database_url
    if url.startswith("sqlite"):
        # SQLite has no server-side pool to bound.
        return create_async_engine(url, echo=settings.debug)

    return create_async_engine(
        url,
        echo=settings.debug,
        pool_size=settings.db_pool_size,
        max_overflow=0,
        pool_timeout=settings.db_pool_timeout,
        pool_recycle=settings.db_pool_recycle,
        pool_pre_ping=True,
        connect_args={"timeout": settings.db_connect_timeout},
    )


class Database:
    """Owns the engine and session factory for the lifetime of the process."""

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine
        self._connected = False
        self.session_factory = async_sessionmaker(
            bind=engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autocommit=False,
            autoflush=False,
        )
        event.listen(engine.sync_engine, "connect", self._on_connect)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(create_database_engine(settings))

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    def unit_of_work(self) -> SQLAlchemyUnitOfWork:
        """Create a Unit of Work bound to this database."""
        return SQLAlchemyUnitOfWork(self.session_factory)

    async def check_connection(self) -> ConnectionCheck:
        """Run one query to verify the database is reachable."""
        try:
            async with self._engine.connect() as conn:
                result = await conn.execute(text("SELECT CURRENT_TIMESTAMP"))
                timestamp = result.scalar_one()
        except (SQLAlchemyError, OSError) as exc:
            self._connected = False
            logger.warning("database_check_failed", error=str(exc))
            return ConnectionCheck(
                connected=False,
                message="Database connection failed",
                error=str(exc),
            )

        self._connected = True
        return ConnectionCheck(
            connected=True,
            message="Database connection is healthy",
            timestamp=timestamp,
        )

    def get_status(self) -> PoolStatus:
        """Report pool counters. Pools without counters report zeros."""
        pool = self._engine.pool
        if not isinstance(pool, QueuePool):
            return PoolStatus(
                connected=self._connected, size=0, total=0, idle=0, in_use=0, overflow=0
            )

        idle = pool.checkedin()
        in_use = pool.checkedout()
        return PoolStatus(
            connected=self._connected,
            size=pool.size(),
            total=idle + in_use,
            idle=idle,
            in_use=in_use,
            overflow=max(pool.overflow(), 0),
        )

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self._engine.dispose()
        self._connected = False
        logger.info("database_pool_closed")

    def _on_connect(self, dbapi_connection: Any, connection_record: Any) -> None:
        if not self._connected:
            logger.info("database_connected")
        self._connected = True
