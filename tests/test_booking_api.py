from __future__ import annotations

from dataclasses import replace

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app import create_app
from backend.controllers.booking_controller import router
from backend.domain.constraints import AllocationConfig
from backend.utils.config import get_settings


def _build_test_client(**overrides) -> TestClient:
    get_settings.cache_clear()
    settings = replace(get_settings(), random_occupancy_seed=None, **overrides)
    return TestClient(create_app(settings))


def test_get_hotel_returns_layout_and_stats() -> None:
    client = _build_test_client()

    response = client.get("/hotel")

    assert response.status_code == 200
    body = response.json()
    assert body["stats"] == {"total": 97, "free": 97, "booked": 0, "blocked": 0}
    assert [floor["floor"] for floor in body["floors"]] == list(range(10, 0, -1))
    assert body["last_booking"] is None


def test_booking_endpoint_books_rooms() -> None:
    client = _build_test_client()

    response = client.post("/bookings", json={"room_count": 3})

    assert response.status_code == 200
    body = response.json()
    assert [room["room_id"] for room in body["rooms"]] == [101, 102, 103]
    assert body["total_travel_time"] == 1

    hotel = client.get("/hotel").json()
    assert hotel["stats"]["booked"] == 3
    assert hotel["last_booking"]["total_travel_time"] == 1
    assert hotel["message"].startswith("Booked 3 rooms")


def test_booking_endpoint_rejects_invalid_count() -> None:
    client = _build_test_client()

    response = client.post("/bookings", json={"room_count": 6})

    assert response.status_code == 400
    assert response.json()["detail"]["reason"] == "invalid_count"
    assert client.get("/hotel").json()["stats"]["booked"] == 0


def test_booking_endpoint_rejects_when_hotel_is_full() -> None:
    client = _build_test_client()
    client.post("/occupancy/random", json={"probability": 1.0})

    response = client.post("/bookings", json={"room_count": 1})

    assert response.status_code == 409
    detail = response.json()["detail"]
    assert detail["reason"] == "insufficient_free_rooms"
    assert detail["message"] == "Only 0 free rooms remain; cannot book 1."


def test_preview_endpoint_does_not_book() -> None:
    client = _build_test_client()

    response = client.post("/bookings/preview", json={"room_count": 2})

    assert response.status_code == 200
    assert [room["room_id"] for room in response.json()["rooms"]] == [101, 102]
    assert client.get("/hotel").json()["stats"]["booked"] == 0


def test_random_occupancy_validates_probability() -> None:
    client = _build_test_client()

    response = client.post("/occupancy/random", json={"probability": 1.5})

    assert response.status_code == 422


def test_random_occupancy_with_seed_is_reproducible() -> None:
    first = _build_test_client().post("/occupancy/random", json={"seed": 11}).json()
    second = _build_test_client().post("/occupancy/random", json={"seed": 11}).json()

    assert first["floors"] == second["floors"]
    assert first["message"] == "Random occupancy applied."


def test_reset_endpoint_frees_all_rooms() -> None:
    client = _build_test_client()
    client.post("/bookings", json={"room_count": 5})

    response = client.post("/reset")

    assert response.status_code == 200
    assert response.json()["stats"]["free"] == 97
    assert response.json()["message"] == "Hotel has been reset to all rooms free."


def test_missing_booking_service_returns_503() -> None:
    app = FastAPI()
    app.include_router(router)

    response = TestClient(app).get("/hotel")

    assert response.status_code == 503


def test_startup_runs_with_default_policy() -> None:
    get_settings.cache_clear()

    with TestClient(create_app(get_settings())) as client:
        response = client.post("/bookings", json={"room_count": 5})

    assert response.status_code == 200
    assert len(response.json()["rooms"]) == 5


def test_startup_rejects_booking_limit_above_policy() -> None:
    get_settings.cache_clear()
    app = create_app(get_settings(), AllocationConfig(max_rooms_per_booking=6))

    with pytest.raises(ValueError):
        with TestClient(app):
            pass
