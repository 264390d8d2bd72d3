"""Error types raised by the car rental layers.

Every error carries a human-readable message. The HTTP layer reports errors
as ``{"error": {"name": <class name>, "message": <message>}}``.
"""


class CarRentalError(Exception):
    """Base class for car rental errors."""


class CarNotFoundError(CarRentalError):
    """No car exists for the requested id."""

    def __init__(self, car_id: object) -> None:
        self.car_id = car_id
        super().__init__(f"Car with id {car_id!r} not found")


class MissingCarIdError(CarRentalError, ValueError):
    """The request does not carry a car id."""

    def __init__(self) -> None:
        super().__init__("Request params must include an 'id'")


class InvalidPaginationError(CarRentalError, ValueError):
    """page or pageSize is not a positive integer."""


class UnknownFilterError(CarRentalError, ValueError):
    """A list filter names an attribute the store cannot filter on."""

    def __init__(self, attribute: str) -> None:
        self.attribute = attribute
        super().__init__(f"Cannot filter cars by {attribute!r}")


class StoreError(CarRentalError):
    """The record store failed to execute an operation."""

    def __init__(self, message: str, operation: str) -> None:
        self.operation = operation
        super().__init__(message)


class InvalidCarFieldError(CarRentalError, ValueError):
    """A car attribute in a request body has the wrong type."""
