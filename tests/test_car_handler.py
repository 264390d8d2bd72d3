"""
Tests for CarHandler against fake stores.
"""

from unittest.mock import AsyncMock

import pytest

from car_rental.entities import RENTER_INCLUDE, CarFields, CarQuery, CarRecord, CarRequest
from car_rental.errors import InvalidPaginationError, StoreError
from car_rental.handlers import CarHandler
from car_rental.protocols import ResponseSink


def make_car(car_id, name="Honda", price=200000, size="small", image="honda.png"):
    return CarRecord(id=car_id, name=name, price=price, size=size, image=image)


def test_recording_sink_satisfies_protocol(sink):
    assert isinstance(sink, ResponseSink)


# list_cars


async def test_list_cars_first_page(sink):
    """page=1, pageSize=10, count=10 gives offset 0, limit 10 and one page."""
    cars = [make_car(i) for i in range(1, 11)]
    store = AsyncMock()
    store.find_all.return_value = cars
    store.count.return_value = 10
    handler = CarHandler(car_store=store)

    await handler.list_cars(CarRequest(query={"page": 1, "pageSize": 10}), sink)

    store.find_all.assert_awaited_once_with(
        CarQuery(where={}, include=RENTER_INCLUDE, offset=0, limit=10)
    )
    store.count.assert_awaited_once_with(CarQuery(where={}, include=RENTER_INCLUDE))
    assert sink.status_code == 200
    assert sink.body == {
        "cars": cars,
        "meta": {
            "pagination": {
                "page": 1,
                "pageSize": 10,
                "count": 10,
                "pageCount": 1,
            },
        },
    }


def test_renter_include_is_optional_user_car():
    assert RENTER_INCLUDE.model == "User"
    assert RENTER_INCLUDE.as_ == "userCar"
    assert RENTER_INCLUDE.required is False


async def test_list_cars_last_partial_page(handler, car_store, honda, sink):
    for _ in range(25):
        await car_store.create(honda)

    await handler.list_cars(CarRequest(query={"page": "3", "pageSize": "10"}), sink)

    assert sink.status_code == 200
    assert [car.id for car in sink.body["cars"]] == [21, 22, 23, 24, 25]
    assert sink.body["meta"]["pagination"] == {
        "page": 3,
        "pageSize": 10,
        "count": 25,
        "pageCount": 3,
    }


async def test_list_cars_uses_default_page_size(car_store, honda, sink):
    for _ in range(7):
        await car_store.create(honda)
    handler = CarHandler(car_store=car_store, default_page_size=5)

    await handler.list_cars(CarRequest(), sink)

    assert len(sink.body["cars"]) == 5
    assert sink.body["meta"]["pagination"]["page"] == 1
    assert sink.body["meta"]["pagination"]["pageCount"] == 2


async def test_list_cars_filters_by_size(handler, car_store, honda, sink):
    await car_store.create(honda)
    await car_store.create(CarFields(name="Alphard", price=900000, size="large", image="alphard.png"))

    await handler.list_cars(CarRequest(query={"size": "large"}), sink)

    assert [car.name for car in sink.body["cars"]] == ["Alphard"]
    assert sink.body["meta"]["pagination"]["count"] == 1


async def test_list_cars_empty_store(handler, sink):
    await handler.list_cars(CarRequest(query={"page": 1, "pageSize": 10}), sink)

    assert sink.body["cars"] == []
    assert sink.body["meta"]["pagination"]["count"] == 0
    assert sink.body["meta"]["pagination"]["pageCount"] == 0


async def test_list_cars_rejects_bad_page(handler, sink):
    with pytest.raises(InvalidPaginationError):
        await handler.list_cars(CarRequest(query={"page": 0, "pageSize": 10}), sink)

    assert sink.status_code is None


async def test_list_cars_store_failure_propagates(sink):
    store = AsyncMock()
    store.find_all.side_effect = StoreError("Database operation failed", "find_all")
    handler = CarHandler(car_store=store)

    with pytest.raises(StoreError):
        await handler.list_cars(CarRequest(query={"page": 1, "pageSize": 10}), sink)

    assert sink.status_code is None


# create_car


async def test_create_car_defaults_is_currently_rented(sink):
    car = make_car(1)
    store = AsyncMock()
    store.create.return_value = car
    handler = CarHandler(car_store=store)

    body = {"name": "Honda", "price": 200000, "size": "small", "image": "honda.png"}
    await handler.create_car(CarRequest(body=body), sink)

    store.create.assert_awaited_once_with(
        CarFields(name="Honda", price=200000, size="small", image="honda.png", is_currently_rented=False)
    )
    assert sink.status_code == 201
    assert sink.body is car


async def test_create_car_store_rejection_gives_422(sink):
    store = AsyncMock()
    store.create.side_effect = Exception("Something")
    handler = CarHandler(car_store=store)

    body = {"name": "Honda", "price": 200000, "size": "small", "image": "honda.png", "isCurrentlyRented": False}
    await handler.create_car(CarRequest(body=body), sink)

    store.create.assert_awaited_once_with(
        CarFields(name="Honda", price=200000, size="small", image="honda.png", is_currently_rented=False)
    )
    assert sink.status_code == 422
    assert sink.body == {"error": {"name": "Exception", "message": "Something"}}


async def test_create_car_persists_in_store(handler, car_store, sink):
    body = {"name": "Honda", "price": 200000, "size": "small", "image": "honda.png", "isCurrentlyRented": True}
    await handler.create_car(CarRequest(body=body), sink)

    assert sink.status_code == 201
    stored = await car_store.find_by_pk(sink.body.id)
    assert stored.is_currently_rented is True
    assert stored.name == "Honda"


# get_car


async def test_get_car_passes_id_through(sink):
    car = make_car(1, price=300000)
    store = AsyncMock()
    store.find_by_pk.return_value = car
    handler = CarHandler(car_store=store)

    await handler.get_car(CarRequest(params={"id": 1}), sink)

    store.find_by_pk.assert_awaited_once_with(1)
    assert sink.status_code == 200
    assert sink.body is car


async def test_get_car_does_not_coerce_id(sink):
    store = AsyncMock()
    store.find_by_pk.return_value = None
    handler = CarHandler(car_store=store)

    await handler.get_car(CarRequest(params={"id": "1"}), sink)

    store.find_by_pk.assert_awaited_once_with("1")


async def test_get_car_missing_responds_with_none(handler, sink):
    await handler.get_car(CarRequest(params={"id": 42}), sink)

    assert sink.status_code == 200
    assert sink.has_body
    assert sink.body is None


# update_car


async def test_update_car_merges_default(sink):
    car = make_car(1, price=300000)
    car.update = AsyncMock(return_value=car)
    handler = CarHandler(car_store=AsyncMock())
    handler.get_car_from_request = AsyncMock(return_value=car)

    request = CarRequest(
        body={"name": "Updated Honda", "price": 400000, "size": "medium", "image": "updated_honda.png"},
        params={"id": 1},
    )
    await handler.update_car(request, sink)

    handler.get_car_from_request.assert_awaited_once_with(request)
    car.update.assert_awaited_once_with(
        CarFields(
            name="Updated Honda",
            price=400000,
            size="medium",
            image="updated_honda.png",
            is_currently_rented=False,
        )
    )
    assert sink.status_code == 200
    assert sink.body is car


async def test_update_car_resolution_failure_gives_422(sink):
    store = AsyncMock()
    handler = CarHandler(car_store=store)
    handler.get_car_from_request = AsyncMock(side_effect=ValueError("Validation Error"))

    await handler.update_car(CarRequest(body={}), sink)

    assert sink.status_code == 422
    assert sink.body == {"error": {"name": "ValueError", "message": "Validation Error"}}
    assert store.method_calls == []


async def test_update_car_writes_through_store(handler, car_store, honda, sink):
    car = await car_store.create(CarFields(name="Honda", price=300000, size="small", image="honda.png",
                                           is_currently_rented=True))

    request = CarRequest(
        body={"name": "Updated Honda", "price": 400000, "size": "medium", "image": "updated_honda.png"},
        params={"id": car.id},
    )
    await handler.update_car(request, sink)

    assert sink.status_code == 200
    assert sink.body.id == car.id
    assert sink.body.name == "Updated Honda"
    stored = await car_store.find_by_pk(car.id)
    assert stored.price == 400000
    assert stored.is_currently_rented is False


async def test_update_car_not_found_gives_422(handler, sink):
    await handler.update_car(CarRequest(body={"name": "Ghost"}, params={"id": 99}), sink)

    assert sink.status_code == 422
    assert sink.body["error"]["name"] == "CarNotFoundError"
    assert "99" in sink.body["error"]["message"]


async def test_update_car_without_id_gives_422(handler, sink):
    await handler.update_car(CarRequest(body={"name": "Ghost"}), sink)

    assert sink.status_code == 422
    assert sink.body["error"]["name"] == "MissingCarIdError"


async def test_update_car_store_rejection_gives_422(sink):
    car = make_car(1)
    car.update = AsyncMock(side_effect=StoreError("Integrity constraint violated", "update"))
    store = AsyncMock()
    store.find_by_pk.return_value = car
    handler = CarHandler(car_store=store)

    await handler.update_car(CarRequest(body={"name": "X"}, params={"id": 1}), sink)

    store.find_by_pk.assert_awaited_once_with(1)
    assert sink.status_code == 422
    assert sink.body == {"error": {"name": "StoreError", "message": "Integrity constraint violated"}}


# delete_car


async def test_delete_car_responds_204_without_body(sink):
    store = AsyncMock()
    store.destroy.return_value = None
    handler = CarHandler(car_store=store)

    await handler.delete_car(CarRequest(params={"id": 1}), sink)

    store.destroy.assert_awaited_once_with(1)
    assert sink.status_code == 204
    assert sink.ended
    assert not sink.has_body


async def test_delete_car_twice_is_still_204(handler, car_store, honda, sink):
    car = await car_store.create(honda)

    await handler.delete_car(CarRequest(params={"id": car.id}), sink)
    assert sink.status_code == 204

    again = type(sink)()
    await handler.delete_car(CarRequest(params={"id": car.id}), again)
    assert again.status_code == 204
    assert again.ended
    assert await car_store.find_by_pk(car.id) is None


async def test_update_car_keeps_fields_not_sent(handler, car_store, honda, sink):
    car = await car_store.create(honda)

    await handler.update_car(CarRequest(body={"price": 250000}, params={"id": car.id}), sink)

    assert sink.status_code == 200
    stored = await car_store.find_by_pk(car.id)
    assert stored.name == "Honda"
    assert stored.size == "small"
    assert stored.image == "honda.png"
    assert stored.price == 250000


async def test_create_car_rejects_string_rented_flag(handler, car_store, sink):
    body = {"name": "Honda", "price": 200000, "size": "small", "image": "honda.png", "isCurrentlyRented": "false"}

    await handler.create_car(CarRequest(body=body), sink)

    assert sink.status_code == 422
    assert sink.body["error"]["name"] == "InvalidCarFieldError"
    assert await car_store.count(CarQuery()) == 0
