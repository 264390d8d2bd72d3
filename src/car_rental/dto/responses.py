"""Response DTOs for API endpoints."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CarResponse(BaseModel):
    """Response DTO for a single car."""

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: int | str = Field(..., description="Car id assigned by the store")
    name: str | None = Field(None, description="Display name of the car")
    price: float | None = Field(None, description="Rental price")
    size: str | None = Field(None, description="Size category")
    image: str | None = Field(None, description="Path or URL of the car picture")
    is_currently_rented: bool = Field(False, description="Whether the car is rented out right now")
    renter_id: int | None = Field(None, description="Id of the renting user, if any")


class PaginationResponse(BaseModel):
    """Pagination block of a car listing."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    page: int = Field(..., ge=1)
    page_size: int = Field(..., ge=1)
    count: int = Field(..., description="Total number of matching cars", ge=0)
    page_count: int = Field(..., description="ceil(count / pageSize)", ge=0)


class ListMeta(BaseModel):
    pagination: PaginationResponse


class CarListResponse(BaseModel):
    """Response DTO for GET /v1/cars."""

    cars: list[CarResponse] = Field(default_factory=list)
    meta: ListMeta


class ErrorDetail(BaseModel):
    name: str = Field(..., description="Kind of error, e.g. CarNotFoundError")
    message: str = Field(..., description="Human-readable error message")


class ErrorResponse(BaseModel):
    """Uniform error body: {"error": {"name", "message"}}."""

    error: ErrorDetail
