"""HTTP handlers for car operations.

Handlers read a CarRequest, make a single call into the car store and write
the outcome into a ResponseSink. They never return a value.
"""

import logging
from collections.abc import Mapping
from typing import Any

from fastapi import status

from car_rental.config import settings
from car_rental.entities import (
    RENTER_INCLUDE,
    CarQuery,
    CarRecord,
    CarRequest,
    Err,
    Ok,
    OperationFailure,
    Pagination,
    Result,
    apply_defaults,
)
from car_rental.errors import CarNotFoundError, MissingCarIdError
from car_rental.protocols import CarRecordStore, ResponseSink

logger = logging.getLogger(__name__)

# Query string values that narrow a listing, mapped to store filter names
LIST_FILTERS = ("size",)


class CarHandler:
    """HTTP handlers for the car resource.

    This handler depends on the CarRecordStore protocol and handles
    HTTP-specific concerns like:
    - Reading query, body and path values
    - Setting appropriate status codes
    - Turning create/update failures into 422 responses

    List, get and delete failures are not handled here; they propagate to
    the application's error handlers.

    Example:
        ```python
        from car_rental.handlers import CarHandler
        from car_rental.repositories import InMemoryCarRepository

        handler = CarHandler(car_store=InMemoryCarRepository())

        # Use in FastAPI route
        @app.get("/v1/cars")
        async def list_cars(request: Request):
            sink = JSONResponseSink()
            await handler.list_cars(CarRequest(query=request.query_params), sink)
            return sink.render()
        ```
    """

    def __init__(self, car_store: CarRecordStore, default_page_size: int | None = None) -> None:
        """Initialize the car handler.

        Args:
            car_store: The car record store (required).
            default_page_size: Page size when a listing omits pageSize. Defaults to settings.
        """
        self._store = car_store
        self._default_page_size = default_page_size or settings.default_page_size

    async def list_cars(self, request: CarRequest, response: ResponseSink) -> None:
        """Handle GET /v1/cars requests.

        Responds 200 with ``{"cars": [...], "meta": {"pagination": {...}}}``.

        Raises:
            InvalidPaginationError: If page or pageSize is not a positive integer
        """
        pagination = Pagination.from_query(request.query, self._default_page_size)
        query = self._build_list_query(request.query)

        cars = await self._store.find_all(
            CarQuery(
                where=query.where,
                include=query.include,
                offset=pagination.offset,
                limit=pagination.limit,
            )
        )
        count = await self._store.count(query)

        response.status(status.HTTP_200_OK).json({
            "cars": cars,
            "meta": {
                "pagination": pagination.meta(count).to_dict(),
            },
        })

    async def create_car(self, request: CarRequest, response: ResponseSink) -> None:
        """Handle POST /v1/cars requests.

        Responds 201 with the created car, or 422 with the error.
        """
        result = await self._resolve_create(request.body)
        self._send_result(response, result, success_status=status.HTTP_201_CREATED)

    async def get_car(self, request: CarRequest, response: ResponseSink) -> None:
        """Handle GET /v1/cars/{id} requests.

        The id is passed to the store as received. Responds 200 with
        whatever the store returns, None included.
        """
        car = await self._store.find_by_pk(request.params.get("id"))
        response.status(status.HTTP_200_OK).json(car)

    async def update_car(self, request: CarRequest, response: ResponseSink) -> None:
        """Handle PUT /v1/cars/{id} requests.

        Responds 200 with the updated car, or 422 when the car cannot be
        resolved or the update fails.
        """
        result = await self._resolve_update(request)
        self._send_result(response, result, success_status=status.HTTP_200_OK)

    async def delete_car(self, request: CarRequest, response: ResponseSink) -> None:
        """Handle DELETE /v1/cars/{id} requests.

        Always responds 204 without a body, whether or not a row was removed.
        """
        await self._store.destroy(request.params.get("id"))
        response.status(status.HTTP_204_NO_CONTENT).end()

    async def get_car_from_request(self, request: CarRequest) -> CarRecord:
        """Resolve the car named by the request's ``id`` path parameter.

        Raises:
            MissingCarIdError: If the request has no id
            CarNotFoundError: If no car has that id
        """
        car_id = request.params.get("id")
        if car_id is None:
            raise MissingCarIdError()

        car = await self._store.find_by_pk(car_id)
        if car is None:
            raise CarNotFoundError(car_id)
        return car

    def _build_list_query(self, query: Mapping[str, Any]) -> CarQuery:
        where = {name: query[name] for name in LIST_FILTERS if query.get(name) is not None}
        return CarQuery(where=where, include=RENTER_INCLUDE)

    async def _resolve_create(self, body: Mapping[str, Any]) -> Result[CarRecord]:
        try:
            car = await self._store.create(apply_defaults(body))
        except Exception as e:
            logger.warning(f"Failed to create car: {e}", extra={"error_name": type(e).__name__})
            return Err(OperationFailure.from_exception(e))
        return Ok(car)

    async def _resolve_update(self, request: CarRequest) -> Result[CarRecord]:
        try:
            car = await self.get_car_from_request(request)
            updated = await car.update(apply_defaults(request.body))
        except Exception as e:
            logger.warning(
                f"Failed to update car: {e}",
                extra={"car_id": request.params.get("id"), "error_name": type(e).__name__},
            )
            return Err(OperationFailure.from_exception(e))
        return Ok(updated)

    def _send_result(self, response: ResponseSink, result: Result[CarRecord], success_status: int) -> None:
        if isinstance(result, Ok):
            response.status(success_status).json(result.value)
        else:
            response.status(status.HTTP_422_UNPROCESSABLE_ENTITY).json(result.failure.to_dict())
