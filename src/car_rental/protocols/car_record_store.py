"""Car record store protocol.

Defines the interface for any persistence backend holding rentable cars.

Implementations can include:
- SQLAlchemy ORM over any async driver (default)
- In-memory dictionary (tests, local demos)
"""

from typing import Any, Protocol, runtime_checkable

from car_rental.entities import CarFields, CarQuery, CarRecord


@runtime_checkable
class CarRecordStore(Protocol):
    """Protocol for car persistence backends.

    Any type that implements these methods satisfies the protocol, no
    explicit inheritance needed. Records returned by the store must be bound
    to it so that ``CarRecord.update`` writes back through the same backend.

    Example:
        ```python
        from car_rental.protocols import CarRecordStore

        store: CarRecordStore = SqlAlchemyCarRepository.from_session_factory(session_factory)
        store: CarRecordStore = InMemoryCarRepository()
        ```
    """

    async def find_all(self, query: CarQuery) -> list[CarRecord]:
        """Find cars matching a query.

        Args:
            query: Filter, include directive and offset/limit window

        Returns:
            The cars in the requested window, ordered by id
        """
        ...

    async def count(self, query: CarQuery) -> int:
        """Count cars matching a query, ignoring its window.

        Args:
            query: Filter and include directive

        Returns:
            Total number of matching cars
        """
        ...

    async def create(self, fields: CarFields) -> CarRecord:
        """Store a new car.

        Args:
            fields: Attributes of the new car

        Returns:
            The created record with its assigned id
        """
        ...

    async def find_by_pk(self, car_id: Any) -> CarRecord | None:
        """Find a car by primary key.

        Args:
            car_id: The id, as received from the caller

        Returns:
            The record, or None if no car has that id
        """
        ...

    async def destroy(self, car_id: Any) -> int:
        """Delete a car by primary key.

        Args:
            car_id: The id, as received from the caller

        Returns:
            Number of deleted rows (0 when nothing matched)
        """
        ...

    async def health_check(self) -> bool:
        """Check if the backend is reachable.

        Returns:
            True if healthy, False otherwise
        """
        ...
