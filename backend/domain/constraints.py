"""Domain-level validation rules for room allocation."""

from __future__ import annotations

from dataclasses import dataclass


MAX_ROOMS_PER_BOOKING = 5
DEFAULT_CANDIDATE_POOL_SIZE = 20


@dataclass(frozen=True)
class AllocationConfig:
    max_rooms_per_booking: int = MAX_ROOMS_PER_BOOKING
    candidate_pool_size: int = DEFAULT_CANDIDATE_POOL_SIZE


def validate_allocation_config(config: AllocationConfig) -> None:
    if not 1 <= config.max_rooms_per_booking <= MAX_ROOMS_PER_BOOKING:
        raise ValueError(
            f"max_rooms_per_booking must be between 1 and {MAX_ROOMS_PER_BOOKING}"
        )
    if config.candidate_pool_size < 1:
        raise ValueError("candidate_pool_size must be >= 1")


def is_valid_room_count(count: int, config: AllocationConfig) -> bool:
    return 1 <= count <= config.max_rooms_per_booking
