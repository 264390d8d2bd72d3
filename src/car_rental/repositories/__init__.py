"""Repository layer for data access.

This layer hides the database behind the CarRecordStore protocol.
The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from car_rental.protocols import CarRecordStore

from .memory_repository import InMemoryCarRepository
from .sqlalchemy_repository import SqlAlchemyCarRepository

__all__ = [
    "CarRecordStore",
    "InMemoryCarRepository",
    "SqlAlchemyCarRepository",
]
