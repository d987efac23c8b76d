"""SQLAlchemy ORM models."""

from datetime import date, datetime

from sqlalchemy import Date, DateTime, Index, Integer, String, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class UserProfileModel(Base):
    """User profile model.

    On PostgreSQL the ``update_user_profiles_updated_at`` trigger (see
    migrations) also refreshes ``updated_at`` on every row update.
    """

    __tablename__ = "user_profiles"
    __table_args__ = (
        Index("idx_user_profiles_name", "first_name", "last_name"),
        Index("idx_user_profiles_created_at", "created_at"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
    )
