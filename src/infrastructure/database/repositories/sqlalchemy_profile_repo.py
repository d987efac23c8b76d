"""SQLAlchemy implementation of UserProfile repository."""

from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.profile import ProfileInput, UserProfile
from infrastructure.database.models import UserProfileModel


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository.

    Every method issues exactly one statement.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_all(self) -> list[UserProfile]:
        """Get all profiles, most recently created first."""
        stmt = select(UserProfileModel).order_by(
            UserProfileModel.created_at.desc(),
            UserProfileModel.id.desc(),
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def get(self, id: int) -> UserProfile | None:
        """Get a profile by ID."""
        stmt = select(UserProfileModel).where(UserProfileModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def create(self, data: ProfileInput) -> UserProfile:
        """Insert a profile and return the persisted row."""
        stmt = (
            insert(UserProfileModel)
            .values(**self._to_values(data))
            .returning(UserProfileModel)
        )
        result = await self._session.execute(stmt)
        return self._to_entity(result.scalar_one())

    async def update(self, id: int, data: ProfileInput) -> UserProfile | None:
        """Overwrite a profile's mutable fields and return the new row."""
        stmt = (
            update(UserProfileModel)
            .where(UserProfileModel.id == id)
            .values(**self._to_values(data), updated_at=func.now())
            .returning(UserProfileModel)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    def _to_entity(self, model: UserProfileModel) -> UserProfile:
        """Convert ORM model to domain entity."""
        return UserProfile(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            date_of_birth=model.date_of_birth,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_values(self, data: ProfileInput) -> dict[str, object]:
        """Map a validated payload onto column values."""
        return {
            "first_name": data.first_name,
            "last_name": data.last_name,
            "date_of_birth": data.date_of_birth,
        }
