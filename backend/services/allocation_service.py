"""Travel-time optimal room allocation.

Single-floor placement is always preferred. Only when no floor has enough
free rooms does the search fall back to combinations across floors, drawn
from a bounded pool of the lowest free rooms.
"""

from __future__ import annotations

from itertools import combinations
from typing import Iterable, Optional, Sequence

from backend.domain.constraints import (
    AllocationConfig,
    is_valid_room_count,
    validate_allocation_config,
)
from backend.domain.models import AllocationFailureReason, BookingResult, Room
from backend.domain.travel import set_travel_time
from backend.utils.logger import get_logger


logger = get_logger(__name__)


def _free_rooms(rooms: Iterable[Room]) -> list[Room]:
    return [room for room in rooms if room.is_free]


def _resolve_config(config: Optional[AllocationConfig]) -> AllocationConfig:
    resolved = config or AllocationConfig()
    validate_allocation_config(resolved)
    return resolved


def allocate_single_floor(free_rooms: Sequence[Room], count: int) -> Optional[BookingResult]:
    """Best contiguous-by-position window of `count` rooms on any one floor."""
    rooms_by_floor: dict[int, list[Room]] = {}
    for room in free_rooms:
        rooms_by_floor.setdefault(room.floor, []).append(room)

    best: Optional[BookingResult] = None
    for floor, floor_rooms in rooms_by_floor.items():
        if len(floor_rooms) < count:
            continue
        ordered = sorted(floor_rooms, key=lambda room: room.position_on_floor)
        for start in range(len(ordered) - count + 1):
            window = tuple(ordered[start:start + count])
            travel_time = set_travel_time(window)
            if best is None or travel_time < best.total_travel_time:
                best = BookingResult(rooms=window, total_travel_time=travel_time)
        logger.debug("Single-floor windows evaluated | floor=%s | free_rooms=%s", floor, len(ordered))
    return best


def allocate_across_floors(
    free_rooms: Sequence[Room],
    count: int,
    candidate_pool_size: int,
) -> Optional[BookingResult]:
    """Best `count`-combination from the lowest `candidate_pool_size` free rooms."""
    pool = sorted(free_rooms, key=lambda room: (room.floor, room.position_on_floor))
    pool = pool[:candidate_pool_size]
    if len(pool) < count:
        return None

    best: Optional[BookingResult] = None
    # combinations() yields index tuples in increasing-start, depth-first order.
    for candidate in combinations(pool, count):
        travel_time = set_travel_time(candidate)
        if best is None or travel_time < best.total_travel_time:
            best = BookingResult(rooms=tuple(candidate), total_travel_time=travel_time)
    return best


def allocate(
    rooms: Sequence[Room],
    count: int,
    config: Optional[AllocationConfig] = None,
) -> Optional[BookingResult]:
    """Pick the rooms for a booking of `count` rooms, or None if impossible.

    Never mutates `rooms`; applying the result is the caller's job.
    """
    resolved = _resolve_config(config)
    if not is_valid_room_count(count, resolved):
        return None

    free_rooms = _free_rooms(rooms)
    if len(free_rooms) < count:
        return None

    result = allocate_single_floor(free_rooms, count)
    if result is not None:
        logger.info(
            "Allocation found on single floor | count=%s | rooms=%s | travel_time=%s",
            count,
            result.room_ids,
            result.total_travel_time,
        )
        return result

    result = allocate_across_floors(free_rooms, count, resolved.candidate_pool_size)
    if result is None:
        logger.warning(
            "No feasible allocation | count=%s | free_rooms=%s | pool_size=%s",
            count,
            len(free_rooms),
            resolved.candidate_pool_size,
        )
        return None

    logger.info(
        "Allocation found across floors | count=%s | rooms=%s | travel_time=%s",
        count,
        result.room_ids,
        result.total_travel_time,
    )
    return result


def classify_allocation_failure(
    rooms: Sequence[Room],
    count: int,
    config: Optional[AllocationConfig] = None,
) -> AllocationFailureReason:
    """Explain why `allocate` returned None for the same inputs."""
    resolved = _resolve_config(config)
    if not is_valid_room_count(count, resolved):
        return AllocationFailureReason.INVALID_COUNT
    if len(_free_rooms(rooms)) < count:
        return AllocationFailureReason.INSUFFICIENT_FREE_ROOMS
    return AllocationFailureReason.NO_FEASIBLE_ALLOCATION
