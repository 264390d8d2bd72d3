"""SQLAlchemy implementation of CarRecordStore.

Works with any async driver SQLAlchemy supports (aiosqlite, asyncpg, ...).
Each operation runs in its own session; SQLAlchemy failures are rolled back
and re-raised as StoreError.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import Select, delete, func, select, text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from car_rental.entities import FILTER_ATTRIBUTES, CarFields, CarQuery, CarRecord
from car_rental.errors import CarNotFoundError, StoreError, UnknownFilterError
from car_rental.models import CarModel

logger = logging.getLogger(__name__)

# Include aliases the store knows how to join
_ASSOCIATIONS = {
    "userCar": CarModel.user_car,
}


class SqlAlchemyCarRepository:
    """Car store backed by the ``cars`` table.

    This class satisfies the CarRecordStore protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize the repository.

        Args:
            session_factory: Factory producing async sessions bound to the engine.
        """
        self._session_factory = session_factory

    @classmethod
    def from_session_factory(
        cls, session_factory: async_sessionmaker[AsyncSession],
    ) -> "SqlAlchemyCarRepository":
        """Factory method, like the other repositories. Not named create: that is the store operation."""
        return cls(session_factory=session_factory)

    @asynccontextmanager
    async def _session(self, operation: str) -> AsyncGenerator[AsyncSession, None]:
        """Provide a session that rolls back and wraps SQLAlchemy errors."""
        async with self._session_factory() as session:
            try:
                yield session
            except IntegrityError as e:
                await session.rollback()
                logger.error(f"DB integrity error during {operation}: {e}")
                raise StoreError("Integrity constraint violated", operation) from e
            except SQLAlchemyError as e:
                await session.rollback()
                logger.error(f"DB error during {operation}: {e}")
                raise StoreError("Database operation failed", operation) from e

    def _to_record(self, car: CarModel) -> CarRecord:
        return CarRecord(
            id=car.id,
            name=car.name,
            price=car.price,
            size=car.size,
            image=car.image,
            is_currently_rented=car.is_currently_rented,
            renter_id=car.renter_id,
            updater=self.update_record,
        )

    def _apply_query(self, statement: Select, query: CarQuery) -> Select:
        """Add the include join and the where filters of a query."""
        association = _ASSOCIATIONS.get(query.include.as_)
        if association is None:
            raise UnknownFilterError(query.include.as_)
        if query.include.required:
            statement = statement.join(association)
        else:
            statement = statement.outerjoin(association)

        for key, value in query.where.items():
            attribute = FILTER_ATTRIBUTES.get(key)
            if attribute is None:
                raise UnknownFilterError(key)
            statement = statement.where(getattr(CarModel, attribute) == value)
        return statement

    async def find_all(self, query: CarQuery) -> list[CarRecord]:
        statement = self._apply_query(select(CarModel), query).order_by(CarModel.id)
        if query.offset is not None:
            statement = statement.offset(query.offset)
        if query.limit is not None:
            statement = statement.limit(query.limit)

        async with self._session("find_all") as session:
            result = await session.scalars(statement)
            return [self._to_record(car) for car in result.all()]

    async def count(self, query: CarQuery) -> int:
        statement = self._apply_query(select(func.count(CarModel.id)).select_from(CarModel), query)
        async with self._session("count") as session:
            return (await session.scalar(statement)) or 0

    async def create(self, fields: CarFields) -> CarRecord:
        car = CarModel(**fields.supplied())
        async with self._session("create") as session:
            session.add(car)
            await session.commit()
            await session.refresh(car)
            logger.info(f"Created car {car.id}")
            return self._to_record(car)

    async def find_by_pk(self, car_id: Any) -> CarRecord | None:
        async with self._session("find_by_pk") as session:
            car = await session.get(CarModel, car_id)
            return self._to_record(car) if car is not None else None

    async def destroy(self, car_id: Any) -> int:
        async with self._session("destroy") as session:
            result = await session.execute(delete(CarModel).where(CarModel.id == car_id))
            await session.commit()
            return result.rowcount or 0

    async def update_record(self, car_id: Any, fields: CarFields) -> CarRecord:
        """Merge the supplied fields onto a stored car.

        Raises:
            CarNotFoundError: If the car no longer exists
        """
        async with self._session("update") as session:
            car = await session.get(CarModel, car_id)
            if car is None:
                raise CarNotFoundError(car_id)

            for attribute, value in fields.supplied().items():
                setattr(car, attribute, value)
            await session.commit()
            await session.refresh(car)
            return self._to_record(car)

    async def health_check(self) -> bool:
        try:
            async with self._session("health_check") as session:
                await session.execute(text("SELECT 1"))
            return True
        except StoreError:
            return False
