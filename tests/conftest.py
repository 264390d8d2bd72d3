"""Shared test configuration and fixtures."""

import os

# Settings are read at import time; keep tests off the on-disk database
os.environ.setdefault("CAR_RENTAL_STORE", "memory")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

from typing import Any  # noqa: E402

import pytest  # noqa: E402

from car_rental.entities import CarFields  # noqa: E402
from car_rental.handlers import CarHandler  # noqa: E402
from car_rental.repositories import InMemoryCarRepository  # noqa: E402

_MISSING = object()


class RecordingSink:
    """ResponseSink that remembers what the handler wrote."""

    def __init__(self) -> None:
        self.status_code: int | None = None
        self.body: Any = _MISSING
        self.ended = False

    @property
    def has_body(self) -> bool:
        return self.body is not _MISSING

    def status(self, code: int) -> "RecordingSink":
        self.status_code = code
        return self

    def json(self, body: Any) -> "RecordingSink":
        self.body = body
        return self

    def end(self) -> None:
        self.ended = True


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def car_store():
    return InMemoryCarRepository()


@pytest.fixture
def handler(car_store):
    return CarHandler(car_store=car_store, default_page_size=10)


@pytest.fixture
def honda():
    return CarFields(name="Honda", price=200000, size="small", image="honda.png")
