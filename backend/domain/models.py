"""Domain models for the hotel layout, bookings and session state."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class RoomStatus(str, Enum):
    FREE = "free"
    BOOKED = "booked"
    BLOCKED = "blocked"


class AllocationFailureReason(str, Enum):
    INVALID_COUNT = "invalid_count"
    INSUFFICIENT_FREE_ROOMS = "insufficient_free_rooms"
    NO_FEASIBLE_ALLOCATION = "no_feasible_allocation"


@dataclass(frozen=True)
class Room:
    room_id: int
    floor: int
    position_on_floor: int
    status: RoomStatus = RoomStatus.FREE

    @property
    def is_free(self) -> bool:
        return self.status is RoomStatus.FREE


@dataclass(frozen=True)
class BookingResult:
    rooms: tuple[Room, ...]
    total_travel_time: int

    @property
    def room_ids(self) -> list[int]:
        return [room.room_id for room in self.rooms]


@dataclass(frozen=True)
class HotelState:
    """One snapshot of the hotel; every mutation yields a new instance."""

    rooms: tuple[Room, ...]
    last_booking: Optional[BookingResult] = None
    message: Optional[str] = None
    failure_reason: Optional[AllocationFailureReason] = None

    def status_counts(self) -> dict[str, int]:
        counts = Counter(room.status for room in self.rooms)
        return {
            "total": len(self.rooms),
            "free": counts.get(RoomStatus.FREE, 0),
            "booked": counts.get(RoomStatus.BOOKED, 0),
            "blocked": counts.get(RoomStatus.BLOCKED, 0),
        }

    def rooms_by_floor(self) -> list[tuple[int, list[Room]]]:
        """Floors from the top down, rooms ordered from the stairs/lift end."""
        grouped: dict[int, list[Room]] = {}
        for room in self.rooms:
            grouped.setdefault(room.floor, []).append(room)
        return [
            (floor, sorted(grouped[floor], key=lambda room: room.position_on_floor))
            for floor in sorted(grouped, reverse=True)
        ]
