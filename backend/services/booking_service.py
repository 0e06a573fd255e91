"""Booking state controller.

Transitions are plain functions from one `HotelState` snapshot to the next.
`BookingService` keeps the current snapshot for the running process and
serialises allocate-then-apply under a lock.
"""

from __future__ import annotations

import random
from dataclasses import replace
from threading import RLock
from typing import Optional

from backend.domain.constraints import AllocationConfig
from backend.domain.layout import build_rooms
from backend.domain.models import (
    AllocationFailureReason,
    BookingResult,
    HotelState,
    Room,
    RoomStatus,
)
from backend.services.allocation_service import allocate, classify_allocation_failure
from backend.utils.config import Settings, get_settings
from backend.utils.logger import get_logger


logger = get_logger(__name__)

RANDOM_OCCUPANCY_MESSAGE = "Random occupancy applied."
RESET_MESSAGE = "Hotel has been reset to all rooms free."


class BookingValidationError(Exception):
    """Raised when a state transition receives invalid parameters."""


class BookingRejectedError(Exception):
    """Raised when a booking request cannot be satisfied."""

    def __init__(self, reason: AllocationFailureReason, message: str) -> None:
        super().__init__(message)
        self.reason = reason
        self.message = message


def failure_message(
    reason: AllocationFailureReason,
    *,
    count: int,
    free_rooms: int,
    config: AllocationConfig,
) -> str:
    if reason is AllocationFailureReason.INVALID_COUNT:
        return (
            f"Please enter a valid room count between 1 and {config.max_rooms_per_booking}."
        )
    if reason is AllocationFailureReason.INSUFFICIENT_FREE_ROOMS:
        return f"Only {free_rooms} free rooms remain; cannot book {count}."
    return "Unable to allocate the requested number of rooms with current availability."


def success_message(result: BookingResult) -> str:
    return (
        f"Booked {len(result.rooms)} rooms. Travel time between closest rooms: "
        f"{result.total_travel_time} minutes."
    )


def initial_state() -> HotelState:
    return HotelState(rooms=tuple(build_rooms()))


def apply_booking(
    state: HotelState,
    count: int,
    config: Optional[AllocationConfig] = None,
) -> HotelState:
    """Book `count` rooms, or return the unchanged rooms with a failure reason."""
    resolved = config or AllocationConfig()
    result = allocate(state.rooms, count, resolved)
    if result is None:
        reason = classify_allocation_failure(state.rooms, count, resolved)
        free_rooms = sum(1 for room in state.rooms if room.is_free)
        logger.info(
            "Booking rejected | count=%s | reason=%s | free_rooms=%s",
            count,
            reason.value,
            free_rooms,
        )
        return HotelState(
            rooms=state.rooms,
            last_booking=None,
            message=failure_message(reason, count=count, free_rooms=free_rooms, config=resolved),
            failure_reason=reason,
        )

    booked_ids = set(result.room_ids)
    rooms = tuple(
        replace(room, status=RoomStatus.BOOKED) if room.room_id in booked_ids else room
        for room in state.rooms
    )
    logger.info(
        "Booking applied | rooms=%s | travel_time=%s",
        result.room_ids,
        result.total_travel_time,
    )
    return HotelState(
        rooms=rooms,
        last_booking=result,
        message=success_message(result),
        failure_reason=None,
    )


def randomize_occupancy(
    state: HotelState,
    probability: float = 0.45,
    rng: Optional[random.Random] = None,
) -> HotelState:
    """Re-roll every room as booked with `probability`, otherwise free."""
    if not 0.0 <= probability <= 1.0:
        raise BookingValidationError("probability must be between 0 and 1")
    generator = rng or random.Random()

    rooms: list[Room] = []
    for room in state.rooms:
        status = RoomStatus.BOOKED if generator.random() < probability else RoomStatus.FREE
        rooms.append(replace(room, status=status))

    new_state = HotelState(rooms=tuple(rooms), message=RANDOM_OCCUPANCY_MESSAGE)
    logger.info(
        "Random occupancy applied | probability=%.2f | booked=%s",
        probability,
        new_state.status_counts()["booked"],
    )
    return new_state


def reset_hotel() -> HotelState:
    logger.info("Hotel reset")
    return HotelState(rooms=tuple(build_rooms()), message=RESET_MESSAGE)


class BookingService:
    """Owns the hotel snapshot for the single in-process session."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        state: Optional[HotelState] = None,
        config: Optional[AllocationConfig] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._config = config or AllocationConfig()
        self._lock = RLock()
        self._state = state or initial_state()

    @property
    def config(self) -> AllocationConfig:
        return self._config

    @property
    def state(self) -> HotelState:
        with self._lock:
            return self._state

    def book(self, count: int) -> BookingResult:
        with self._lock:
            next_state = apply_booking(self._state, count, self._config)
            self._state = next_state
        if next_state.last_booking is None:
            raise BookingRejectedError(next_state.failure_reason, next_state.message or "")
        return next_state.last_booking

    def preview(self, count: int) -> BookingResult:
        with self._lock:
            rooms = self._state.rooms
        result = allocate(rooms, count, self._config)
        if result is None:
            reason = classify_allocation_failure(rooms, count, self._config)
            free_rooms = sum(1 for room in rooms if room.is_free)
            raise BookingRejectedError(
                reason,
                failure_message(reason, count=count, free_rooms=free_rooms, config=self._config),
            )
        return result

    def randomize(
        self,
        probability: Optional[float] = None,
        seed: Optional[int] = None,
    ) -> HotelState:
        resolved_probability = (
            probability
            if probability is not None
            else self._settings.random_occupancy_probability
        )
        resolved_seed = seed if seed is not None else self._settings.random_occupancy_seed
        rng = random.Random(resolved_seed)
        with self._lock:
            self._state = randomize_occupancy(self._state, resolved_probability, rng)
            return self._state

    def reset(self) -> HotelState:
        with self._lock:
            self._state = reset_hotel()
            return self._state
