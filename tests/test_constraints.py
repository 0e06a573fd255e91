"""Tests for allocation config validation."""

from __future__ import annotations

import pytest

from backend.domain.constraints import (
    AllocationConfig,
    is_valid_room_count,
    validate_allocation_config,
)


def valid_config(**overrides) -> AllocationConfig:
    """Return a valid baseline AllocationConfig, optionally overriding fields."""
    defaults = {
        "max_rooms_per_booking": 5,
        "candidate_pool_size": 20,
    }
    defaults.update(overrides)
    return AllocationConfig(**defaults)


def test_valid_config_passes() -> None:
    validate_allocation_config(valid_config())


def test_defaults_match_booking_policy() -> None:
    config = AllocationConfig()

    assert config.max_rooms_per_booking == 5
    assert config.candidate_pool_size == 20


def test_max_rooms_per_booking_zero_raises() -> None:
    with pytest.raises(ValueError):
        validate_allocation_config(valid_config(max_rooms_per_booking=0))


def test_max_rooms_per_booking_above_policy_raises() -> None:
    with pytest.raises(ValueError):
        validate_allocation_config(valid_config(max_rooms_per_booking=6))


def test_max_rooms_per_booking_at_policy_limit_passes() -> None:
    """Exact upper boundary must pass."""
    validate_allocation_config(valid_config(max_rooms_per_booking=5))


def test_candidate_pool_size_zero_raises() -> None:
    with pytest.raises(ValueError):
        validate_allocation_config(valid_config(candidate_pool_size=0))


def test_candidate_pool_size_one_passes() -> None:
    """Exact lower boundary must pass."""
    validate_allocation_config(valid_config(candidate_pool_size=1))


@pytest.mark.parametrize("count,expected", [(0, False), (1, True), (5, True), (6, False), (-2, False)])
def test_room_count_range_is_inclusive(count: int, expected: bool) -> None:
    assert is_valid_room_count(count, valid_config()) is expected
