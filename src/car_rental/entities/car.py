"""Car domain entities."""

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field, fields as dataclass_fields
from typing import Any

from car_rental.errors import InvalidCarFieldError


class _Unset:
    """Marker for an attribute the caller did not send."""

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


@dataclass(frozen=True)
class CarFields:
    """Writable attributes of a car, as passed to create and update.

    Attributes left as ``UNSET`` were not supplied: create stores them as
    None, update leaves the stored value alone. ``is_currently_rented``
    is always set.

    Attributes:
        name: Display name of the car
        price: Rental price
        size: Size category (small, medium, large, ...)
        image: Path or URL of the car picture
        is_currently_rented: Whether the car is rented out right now
    """

    name: str | None = UNSET
    price: float | int | None = UNSET
    size: str | None = UNSET
    image: str | None = UNSET
    is_currently_rented: bool = False

    def supplied(self) -> dict[str, Any]:
        """Attribute values that were actually supplied, keyed by attribute name."""
        return {
            f.name: getattr(self, f.name)
            for f in dataclass_fields(self)
            if getattr(self, f.name) is not UNSET
        }


def apply_defaults(payload: Mapping[str, Any]) -> CarFields:
    """Build the CarFields for a create or update from a request body.

    A missing or null ``isCurrentlyRented`` becomes ``False``; other missing
    attributes stay UNSET.

    Raises:
        InvalidCarFieldError: If isCurrentlyRented is not a boolean
    """
    is_currently_rented = payload.get("isCurrentlyRented")
    if is_currently_rented is None:
        is_currently_rented = False
    elif not isinstance(is_currently_rented, bool):
        raise InvalidCarFieldError(
            f"isCurrentlyRented must be a boolean, got {is_currently_rented!r}"
        )

    return CarFields(
        name=payload.get("name", UNSET),
        price=payload.get("price", UNSET),
        size=payload.get("size", UNSET),
        image=payload.get("image", UNSET),
        is_currently_rented=is_currently_rented,
    )


RecordUpdater = Callable[[Any, CarFields], Awaitable["CarRecord"]]


@dataclass
class CarRecord:
    """A stored car.

    Records come out of a CarRecordStore and remember how to write
    themselves back through ``updater``. ``id`` never changes once assigned.
    """

    id: Any
    name: str | None
    price: float | int | None
    size: str | None
    image: str | None
    is_currently_rented: bool = False
    renter_id: int | None = None
    updater: RecordUpdater | None = field(default=None, repr=False, compare=False)

    async def update(self, fields: CarFields) -> "CarRecord":
        """Merge ``fields`` onto this record through its store.

        The record is refreshed in place from the stored copy and returned.

        Raises:
            RuntimeError: If the record is not bound to a store
        """
        if self.updater is None:
            raise RuntimeError(f"Car {self.id!r} is not bound to a store")

        stored = await self.updater(self.id, fields)
        self.name = stored.name
        self.price = stored.price
        self.size = stored.size
        self.image = stored.image
        self.is_currently_rented = stored.is_currently_rented
        self.renter_id = stored.renter_id
        return self
