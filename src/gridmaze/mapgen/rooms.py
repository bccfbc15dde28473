# src/gridmaze/mapgen/rooms.py
# Post-carve room placement: shuffle interior candidates, greedily accept those
# far enough from every earlier room, then swap the cell for a room in place.

import logging
import math
from dataclasses import dataclass, field
from typing import Callable, List, MutableSequence, Optional

from ..cell import MazeCell, make_room
from ..grid import Coord, Grid

logger = logging.getLogger(__name__)

START_CLEARANCE = 3     # Manhattan, from the carve start
ROOM_SPACING = 4.0      # Euclidean, between any two rooms

RoomFactory = Callable[[int, int], MazeCell]


@dataclass
class RoomPlacement:
    requested: int
    positions: List[Coord] = field(default_factory=list)
    converted: List[Coord] = field(default_factory=list)

    @property
    def placed(self) -> int:
        return len(self.positions)

    @property
    def shortfall(self) -> int:
        return self.requested - self.placed


def manhattan(a: Coord, b: Coord) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def euclidean(a: Coord, b: Coord) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def room_candidates(grid: Grid, start: Coord = (0, 0),
                    min_start_distance: int = START_CLEARANCE) -> List[Coord]:
    """Interior cells (edge rows/columns excluded) far enough from start, raster order."""
    out = []
    for x in range(1, grid.width - 1):
        for z in range(1, grid.depth - 1):
            if manhattan((x, z), start) >= min_start_distance:
                out.append((x, z))
    return out


def shuffle_in_place(items: MutableSequence, rng) -> None:
    """Fisher–Yates over the whole sequence; rng needs only randrange(n)."""
    for i in range(len(items) - 1, 0, -1):
        j = rng.randrange(i + 1)
        items[i], items[j] = items[j], items[i]


def convert_to_room(grid: Grid, x: int, z: int,
                    room_factory: Optional[RoomFactory] = make_room) -> bool:
    """
    Overwrite the carved cell at (x, z) with a room carrying the same walls.
    Returns False (and leaves the cell alone) when no room factory is set.
    """
    if room_factory is None:
        logger.warning("No room factory configured; (%d, %d) stays a plain cell", x, z)
        return False
    old = grid.get(x, z)
    room = room_factory(x, z)
    room.visit()
    if not old.has_left_wall():
        room.clear_left_wall()
    if not old.has_right_wall():
        room.clear_right_wall()
    if not old.has_front_wall():
        room.clear_front_wall()
    if not old.has_back_wall():
        room.clear_back_wall()
    grid.set(x, z, room)
    return True


def place_rooms(
    grid: Grid,
    rng,
    count: int,
    start: Coord = (0, 0),
    room_factory: Optional[RoomFactory] = make_room,
    min_start_distance: int = START_CLEARANCE,
    min_spacing: float = ROOM_SPACING,
) -> RoomPlacement:
    if count < 0:
        raise ValueError(f"room count must be >= 0, got {count}")
    result = RoomPlacement(requested=count)
    if count == 0:
        return result

    candidates = room_candidates(grid, start, min_start_distance)
    shuffle_in_place(candidates, rng)

    for cand in candidates:
        if result.placed >= count:
            break
        if any(euclidean(cand, pos) < min_spacing for pos in result.positions):
            continue
        # The position counts even if conversion is skipped, so spacing
        # decisions do not depend on the factory.
        result.positions.append(cand)
        if convert_to_room(grid, cand[0], cand[1], room_factory):
            result.converted.append(cand)
        logger.info("Room %d placed at (%d, %d) - Manhattan distance from start: %d",
                    result.placed, cand[0], cand[1], manhattan(cand, start))

    if result.placed < count:
        logger.warning("Could only place %d rooms out of %d requested", result.placed, count)
    return result
