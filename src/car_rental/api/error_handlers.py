"""Error Handlers: global exception handlers for the car rental API.

Every error body has the shape ``{"error": {"name", "message"}}``, the same
shape the car handler uses for failed creates and updates.

- CarRentalError: status from ERROR_STATUS (400 for bad input, 503 for store failures)
- RequestValidationError: 422 with field-level details
- Exception (catch-all): 500, never leaks internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from car_rental.entities import OperationFailure
from car_rental.errors import (
    CarRentalError,
    InvalidPaginationError,
    StoreError,
    UnknownFilterError,
)

logger = logging.getLogger(__name__)

ERROR_STATUS: dict[type[CarRentalError], int] = {
    InvalidPaginationError: status.HTTP_400_BAD_REQUEST,
    UnknownFilterError: status.HTTP_400_BAD_REQUEST,
    StoreError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def status_for(exc: CarRentalError) -> int:
    for error_type in type(exc).__mro__:
        if error_type in ERROR_STATUS:
            return ERROR_STATUS[error_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_car_rental_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_car_rental_error_handler(app: FastAPI) -> None:

    @app.exception_handler(CarRentalError)
    async def car_rental_error_handler(request: Request, exc: CarRentalError):
        code = status_for(exc)
        logger.warning(
            f"{type(exc).__name__}: {exc}",
            extra={"path": request.url.path, "error_name": type(exc).__name__, "status_code": code},
        )
        return JSONResponse(status_code=code, content=OperationFailure.from_exception(exc).to_dict())


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "error": {
                    "name": "ValidationError",
                    "message": "Invalid request data",
                    "details": [
                        {
                            "field": ".".join(str(loc) for loc in e["loc"]),
                            "message": e["msg"],
                        }
                        for e in exc.errors()
                    ],
                },
            },
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "name": "InternalServerError",
                    "message": "An unexpected error occurred",
                },
            },
        )
