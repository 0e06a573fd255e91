from __future__ import annotations

from backend.domain.layout import build_rooms
from backend.domain.models import Room
from backend.domain.travel import pairwise_travel_time, set_travel_time


def _room(floor: int, position: int) -> Room:
    return Room(room_id=floor * 100 + position + 1, floor=floor, position_on_floor=position)


def test_pairwise_travel_time_weights_floors_double() -> None:
    assert pairwise_travel_time(_room(1, 0), _room(1, 3)) == 3
    assert pairwise_travel_time(_room(1, 0), _room(4, 0)) == 6
    assert pairwise_travel_time(_room(2, 1), _room(5, 7)) == 12


def test_pairwise_travel_time_is_symmetric_and_zero_on_same_room() -> None:
    rooms = build_rooms()[::7]
    for a in rooms:
        assert pairwise_travel_time(a, a) == 0
        for b in rooms:
            assert pairwise_travel_time(a, b) == pairwise_travel_time(b, a)


def test_set_travel_time_empty_and_single_room_is_zero() -> None:
    assert set_travel_time([]) == 0
    assert set_travel_time([_room(3, 2)]) == 0


def test_set_travel_time_is_minimum_over_all_pairs() -> None:
    # Consecutive distances are 9 and 11; the closest pair is first/last.
    rooms = [_room(1, 0), _room(1, 9), _room(2, 0)]

    assert set_travel_time(rooms) == 2


def test_set_travel_time_is_not_sum_or_diameter() -> None:
    rooms = [_room(1, 0), _room(1, 1), _room(9, 9)]

    assert set_travel_time(rooms) == 1
