"""Car Rental - REST resource for rentable cars backed by an ORM store.

This package provides a layered architecture for the car resource:

Layers:
    - protocols: Interface contracts (CarRecordStore, ResponseSink)
    - repositories: Data access implementations (SQLAlchemy, in-memory)
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from car_rental.handlers import CarHandler
    from car_rental.repositories import InMemoryCarRepository

    handler = CarHandler(car_store=InMemoryCarRepository())
    ```

For HTTP API:
    ```python
    from car_rental.api.app import app
    ```
"""

from car_rental.config import get_settings, settings
from car_rental.dto import CarPayload, CarResponse
from car_rental.entities import CarFields, CarQuery, CarRecord, CarRequest, apply_defaults
from car_rental.errors import CarNotFoundError, CarRentalError
from car_rental.handlers import CarHandler
from car_rental.protocols import CarRecordStore, ResponseSink
from car_rental.repositories import InMemoryCarRepository, SqlAlchemyCarRepository

__all__ = [
    # Configuration
    "settings",
    "get_settings",
    # Protocols (interfaces)
    "CarRecordStore",
    "ResponseSink",
    # Handlers (HTTP)
    "CarHandler",
    # Repositories (data access)
    "InMemoryCarRepository",
    "SqlAlchemyCarRepository",
    # Entities (domain models)
    "CarFields",
    "CarRecord",
    "CarQuery",
    "CarRequest",
    "apply_defaults",
    # Errors
    "CarRentalError",
    "CarNotFoundError",
    # DTOs (API contracts)
    "CarPayload",
    "CarResponse",
]
