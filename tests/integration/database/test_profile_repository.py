"""Integration tests for the SQLAlchemy profile repository."""

from datetime import date

import pytest
from sqlalchemy import select

from domain.entities.profile import ProfileInput
from infrastructure.database.models import UserProfileModel
from infrastructure.database.session import Database


def _input(first: str = "John", last: str = "Doe", born: date = date(1990, 1, 1)) -> ProfileInput:
    return ProfileInput(first_name=first, last_name=last, date_of_birth=born)


class TestProfileRepository:
    @pytest.mark.asyncio
    async def test_create_stores_trimmed_names(self, database: Database):
        async with database.unit_of_work() as uow:
            created = await uow.profiles.create(_input("  John  ", "  Doe  "))
            await uow.commit()

        async with database.session_factory() as session:
            row = (
                await session.execute(
                    select(UserProfileModel).where(UserProfileModel.id == created.id)
                )
            ).scalar_one()

        assert row.first_name == "John"
        assert row.last_name == "Doe"
        assert row.date_of_birth == date(1990, 1, 1)

    @pytest.mark.asyncio
    async def test_ids_are_unique(self, database: Database):
        async with database.unit_of_work() as uow:
            first = await uow.profiles.create(_input())
            second = await uow.profiles.create(_input())
            await uow.commit()

        assert first.id != second.id

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self, database: Database):
        async with database.unit_of_work() as uow:
            assert await uow.profiles.get(123) is None

    @pytest.mark.asyncio
    async def test_update_keeps_id_and_created_at(self, database: Database):
        async with database.unit_of_work() as uow:
            created = await uow.profiles.create(_input())
            await uow.commit()

        async with database.unit_of_work() as uow:
            updated = await uow.profiles.update(created.id, _input("Jane", "Roe", date(1980, 5, 5)))
            await uow.commit()

        assert updated is not None
        assert updated.id == created.id
        assert updated.created_at == created.created_at
        assert updated.updated_at >= updated.created_at
        assert (updated.first_name, updated.last_name) == ("Jane", "Roe")
        assert updated.date_of_birth == date(1980, 5, 5)

    @pytest.mark.asyncio
    async def test_update_missing_returns_none(self, database: Database):
        async with database.unit_of_work() as uow:
            assert await uow.profiles.update(77, _input()) is None

    @pytest.mark.asyncio
    async def test_rollback_on_error_discards_insert(self, database: Database):
        with pytest.raises(RuntimeError):
            async with database.unit_of_work() as uow:
                await uow.profiles.create(_input())
                raise RuntimeError("abort")

        async with database.unit_of_work() as uow:
            assert await uow.profiles.list_all() == []
