"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Store and handler stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from car_rental.config import settings
from car_rental.database import create_engine, create_schema, create_session_factory
from car_rental.handlers import CarHandler
from car_rental.observability import setup_logging
from car_rental.protocols import CarRecordStore
from car_rental.repositories import InMemoryCarRepository, SqlAlchemyCarRepository

logger = logging.getLogger(__name__)


def get_car_store(request: Request) -> CarRecordStore:
    """Dependency injection for the CarRecordStore from app.state.

    Raises:
        RuntimeError: If the store is not initialized
    """
    store = getattr(request.app.state, "car_store", None)
    if store is None:
        raise RuntimeError("Car store not initialized. Check lifespan setup.")
    return store


def get_handler(request: Request) -> CarHandler:
    """Dependency injection for CarHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "car_handler", None)
    if handler is None:
        raise RuntimeError("CarHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes the layers and stores them in app.state:
    1. Store (data access) - SQLAlchemy or in-memory, per CAR_RENTAL_STORE
    2. Handler (HTTP endpoints) - stored in app.state.car_handler

    Cleanup:
        Removes the instances from app.state and disposes the engine on shutdown
    """
    setup_logging(settings.log_level, settings.log_format, settings.database_echo)

    engine = None
    try:
        if settings.uses_memory_store:
            car_store: CarRecordStore = InMemoryCarRepository()
        else:
            engine = create_engine()
            await create_schema(engine)
            car_store = SqlAlchemyCarRepository.from_session_factory(create_session_factory(engine))

        app.state.car_store = car_store
        app.state.car_handler = CarHandler(car_store=car_store)
        logger.info(f"Car rental API started with {settings.store_backend} store")

        yield

        del app.state.car_handler
        del app.state.car_store
    finally:
        if engine is not None:
            await engine.dispose()
        logger.info("Car rental API shut down")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[CarHandler, Depends(get_handler)]
StoreDep = Annotated[CarRecordStore, Depends(get_car_store)]
