"""Query directives passed to a CarRecordStore."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class IncludeDirective:
    """Association to load together with each car.

    Attributes:
        model: Name of the associated model
        as_: Association alias
        required: Inner join when True, outer join when False
    """

    model: str
    as_: str
    required: bool = False


# Request-facing attribute names accepted in `where`, mapped to CarRecord attributes
FILTER_ATTRIBUTES = {
    "name": "name",
    "price": "price",
    "size": "size",
    "isCurrentlyRented": "is_currently_rented",
    "renterId": "renter_id",
}

# Renter of a car, joined optionally so unrented cars are still listed
RENTER_INCLUDE = IncludeDirective(model="User", as_="userCar", required=False)


@dataclass(frozen=True)
class CarQuery:
    """Filter, include and window for find_all and count.

    ``offset`` and ``limit`` are None for count queries.
    """

    where: Mapping[str, Any] = field(default_factory=dict)
    include: IncludeDirective = RENTER_INCLUDE
    offset: int | None = None
    limit: int | None = None
