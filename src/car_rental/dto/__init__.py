"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request validation, response serialization and the
OpenAPI schema.

Internal logic should use entities from the entities package.
"""

from .requests import CarPayload
from .responses import (
    CarListResponse,
    CarResponse,
    ErrorDetail,
    ErrorResponse,
    ListMeta,
    PaginationResponse,
)

__all__ = [
    "CarPayload",
    "CarResponse",
    "CarListResponse",
    "ListMeta",
    "PaginationResponse",
    "ErrorDetail",
    "ErrorResponse",
]
