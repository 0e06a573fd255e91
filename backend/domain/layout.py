"""Fixed hotel layout: 9 standard floors of 10 rooms and a 7-room top floor."""

from __future__ import annotations

from backend.domain.models import Room, RoomStatus


STANDARD_FLOORS = range(1, 10)
ROOMS_PER_STANDARD_FLOOR = 10
TOP_FLOOR = 10
TOP_FLOOR_ROOMS = 7
TOP_FLOOR_FIRST_ROOM_ID = 1001
TOTAL_ROOMS = len(STANDARD_FLOORS) * ROOMS_PER_STANDARD_FLOOR + TOP_FLOOR_ROOMS


def room_number(floor: int, position_on_floor: int) -> int:
    if floor == TOP_FLOOR:
        return TOP_FLOOR_FIRST_ROOM_ID + position_on_floor
    return floor * 100 + position_on_floor + 1


def build_rooms() -> list[Room]:
    """Return a fresh, all-free room list ordered by floor then position."""
    rooms: list[Room] = []
    for floor in STANDARD_FLOORS:
        for position in range(ROOMS_PER_STANDARD_FLOOR):
            rooms.append(
                Room(
                    room_id=room_number(floor, position),
                    floor=floor,
                    position_on_floor=position,
                    status=RoomStatus.FREE,
                )
            )
    for position in range(TOP_FLOOR_ROOMS):
        rooms.append(
            Room(
                room_id=room_number(TOP_FLOOR, position),
                floor=TOP_FLOOR,
                position_on_floor=position,
                status=RoomStatus.FREE,
            )
        )
    return rooms
