"""Travel-time metric between rooms."""

from __future__ import annotations

from itertools import combinations
from typing import Sequence

from backend.domain.models import Room


VERTICAL_UNIT = 2
HORIZONTAL_UNIT = 1


def pairwise_travel_time(a: Room, b: Room) -> int:
    vertical = abs(a.floor - b.floor) * VERTICAL_UNIT
    horizontal = abs(a.position_on_floor - b.position_on_floor) * HORIZONTAL_UNIT
    return vertical + horizontal


def set_travel_time(rooms: Sequence[Room]) -> int:
    """Smallest travel time over every unordered pair in `rooms`.

    This is the closest reachable pair, not a walking tour: for three or more
    rooms it is neither the sum nor the diameter of the set.
    """
    if len(rooms) < 2:
        return 0
    return min(pairwise_travel_time(a, b) for a, b in combinations(rooms, 2))
