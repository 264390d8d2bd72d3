"""In-memory implementation of CarRecordStore.

Keeps cars in a dict keyed by id. Handy for tests and local demos where no
database is available; it satisfies the CarRecordStore protocol.
"""

import dataclasses
import itertools
from collections.abc import Iterable
from typing import Any

from car_rental.entities import FILTER_ATTRIBUTES, CarFields, CarQuery, CarRecord
from car_rental.errors import CarNotFoundError, UnknownFilterError


class InMemoryCarRepository:
    """Dictionary-backed car store.

    Records handed out are copies bound to this repository, so mutating a
    returned record never changes the stored one except through ``update``.
    """

    def __init__(self, records: Iterable[CarRecord] = ()) -> None:
        """Initialize the repository.

        Args:
            records: Cars to preload. Their ids are kept as given.
        """
        self._cars: dict[Any, CarRecord] = {}
        for record in records:
            self._cars[record.id] = dataclasses.replace(record, updater=None)
        start = max((car_id for car_id in self._cars if isinstance(car_id, int)), default=0) + 1
        self._ids = itertools.count(start)

    def _bind(self, record: CarRecord) -> CarRecord:
        return dataclasses.replace(record, updater=self.update_record)

    def _matches(self, record: CarRecord, query: CarQuery) -> bool:
        for key, value in query.where.items():
            attribute = FILTER_ATTRIBUTES.get(key)
            if attribute is None:
                raise UnknownFilterError(key)
            if getattr(record, attribute) != value:
                return False
        if query.include.required and record.renter_id is None:
            return False
        return True

    async def find_all(self, query: CarQuery) -> list[CarRecord]:
        matching = [car for car in self._cars.values() if self._matches(car, query)]
        start = query.offset or 0
        end = None if query.limit is None else start + query.limit
        return [self._bind(car) for car in matching[start:end]]

    async def count(self, query: CarQuery) -> int:
        return sum(1 for car in self._cars.values() if self._matches(car, query))

    async def create(self, fields: CarFields) -> CarRecord:
        values = fields.supplied()
        record = CarRecord(
            id=next(self._ids),
            name=values.get("name"),
            price=values.get("price"),
            size=values.get("size"),
            image=values.get("image"),
            is_currently_rented=fields.is_currently_rented,
        )
        self._cars[record.id] = record
        return self._bind(record)

    async def find_by_pk(self, car_id: Any) -> CarRecord | None:
        record = self._cars.get(car_id)
        return self._bind(record) if record is not None else None

    async def destroy(self, car_id: Any) -> int:
        return 1 if self._cars.pop(car_id, None) is not None else 0

    async def update_record(self, car_id: Any, fields: CarFields) -> CarRecord:
        """Merge the supplied fields onto a stored car.

        Raises:
            CarNotFoundError: If the car was deleted in the meantime
        """
        record = self._cars.get(car_id)
        if record is None:
            raise CarNotFoundError(car_id)

        updated = dataclasses.replace(record, **fields.supplied())
        self._cars[car_id] = updated
        return self._bind(updated)

    async def health_check(self) -> bool:
        return True
