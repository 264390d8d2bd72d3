"""Handler layer for HTTP endpoints.

This layer contains the HTTP request/response handlers.
Handlers depend on the store protocol, not on a concrete repository.

Architecture:
    Route   -> Handler -> Repository
    (HTTP)  -> (Status/Body) -> (Data Access)
"""

from .car_handler import CarHandler

__all__ = [
    "CarHandler",
]
