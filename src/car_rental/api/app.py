from typing import Any

from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware

from car_rental.api.dependencies import HandlerDep, StoreDep, lifespan
from car_rental.api.error_handlers import register_error_handlers
from car_rental.api.sink import JSONResponseSink
from car_rental.config import settings
from car_rental.dto import CarListResponse, CarPayload, CarResponse, ErrorResponse
from car_rental.entities import CarRequest

app = FastAPI(
    title="Car Rental API",
    description="CRUD and paginated listing of rentable cars",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_422_UNPROCESSABLE_ENTITY: {"model": ErrorResponse},
}


@app.get("/")
async def root() -> dict[str, Any]:
    """Root endpoint with API information."""
    return {
        "name": "Car Rental API",
        "version": "0.1.0",
        "description": "CRUD and paginated listing of rentable cars",
        "endpoints": {
            "cars": "/v1/cars",
            "health": "/health",
            "docs": "/docs",
        },
    }


@app.get("/health")
async def health(store: StoreDep) -> Response:
    """Health check endpoint."""
    is_healthy = await store.health_check()
    sink = JSONResponseSink()
    sink.status(status.HTTP_200_OK if is_healthy else status.HTTP_503_SERVICE_UNAVAILABLE).json({
        "status": "healthy" if is_healthy else "unhealthy",
        "store": settings.store_backend,
    })
    return sink.render()


@app.get("/v1/cars", response_model=CarListResponse)
async def list_cars(request: Request, handler: HandlerDep) -> Response:
    """
    List cars one page at a time.

    Query parameters: ``page`` (default 1), ``pageSize`` (default from
    settings) and an optional ``size`` filter.
    """
    sink = JSONResponseSink()
    await handler.list_cars(CarRequest(query=dict(request.query_params)), sink)
    return sink.render()


@app.post(
    "/v1/cars",
    response_model=CarResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
)
async def create_car(payload: CarPayload, handler: HandlerDep) -> Response:
    """Create a car. A missing isCurrentlyRented is stored as false."""
    sink = JSONResponseSink()
    await handler.create_car(CarRequest(body=payload.to_body()), sink)
    return sink.render()


@app.get("/v1/cars/{car_id}", response_model=CarResponse | None)
async def get_car(car_id: int, handler: HandlerDep) -> Response:
    """Get a car by id. Responds with null when no car has that id."""
    sink = JSONResponseSink()
    await handler.get_car(CarRequest(params={"id": car_id}), sink)
    return sink.render()


@app.put("/v1/cars/{car_id}", response_model=CarResponse, responses=_ERROR_RESPONSES)
async def update_car(car_id: int, payload: CarPayload, handler: HandlerDep) -> Response:
    """Replace a car's fields. A missing isCurrentlyRented is stored as false."""
    sink = JSONResponseSink()
    await handler.update_car(CarRequest(body=payload.to_body(), params={"id": car_id}), sink)
    return sink.render()


@app.delete("/v1/cars/{car_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_car(car_id: int, handler: HandlerDep) -> Response:
    """Delete a car. Responds 204 whether or not the car existed."""
    sink = JSONResponseSink()
    await handler.delete_car(CarRequest(params={"id": car_id}), sink)
    return sink.render()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "car_rental.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
