"""ResponseSink that renders into a FastAPI response."""

from typing import Any

from fastapi import Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from car_rental.dto import CarResponse
from car_rental.entities import CarRecord


def encode_car(car: CarRecord) -> dict[str, Any]:
    return CarResponse.model_validate(car).model_dump(by_alias=True)


class JSONResponseSink:
    """Collects what a handler writes and turns it into a response.

    Satisfies the ResponseSink protocol. A sink that was ended, or that
    never received a body, renders an empty response.
    """

    def __init__(self) -> None:
        self.status_code = status.HTTP_200_OK
        self.body: Any = None
        self.has_body = False
        self.ended = False

    def status(self, code: int) -> "JSONResponseSink":
        self.status_code = code
        return self

    def json(self, body: Any) -> "JSONResponseSink":
        self.body = body
        self.has_body = True
        return self

    def end(self) -> None:
        self.ended = True

    def render(self) -> Response:
        if self.ended or not self.has_body:
            return Response(status_code=self.status_code)
        content = jsonable_encoder(self.body, custom_encoder={CarRecord: encode_car})
        return JSONResponse(status_code=self.status_code, content=content)
