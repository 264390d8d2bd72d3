"""Request DTOs for API endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class CarPayload(BaseModel):
    """Request DTO for creating or updating a car.

    The handler turns the dumped payload into CarFields; a missing
    isCurrentlyRented becomes False there, not here.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = Field(None, description="Display name of the car", max_length=100)
    price: float | None = Field(None, description="Rental price", ge=0)
    size: str | None = Field(None, description="Size category, e.g. small, medium, large", max_length=20)
    image: str | None = Field(None, description="Path or URL of the car picture", max_length=255)
    is_currently_rented: bool | None = Field(
        None,
        alias="isCurrentlyRented",
        description="Whether the car is rented out right now (defaults to false)",
    )

    def to_body(self) -> dict:
        """Dump the fields the client actually sent, with API names."""
        return self.model_dump(by_alias=True, exclude_unset=True)
