# src/gridmaze/mapgen/builder.py
# Orchestrates one generation: allocate grid -> carve -> place rooms -> publish.
# Immediate and paced runs consume the same step sequence, so they agree bit for bit.

import logging
import time
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from ..cell import MazeCell, make_room
from ..config import MazeConfig
from ..grid import Coord, Grid
from ..rng import PMRandom
from ..timing import Sleep, paced
from .carve import CarveStep, carve_steps
from .rooms import RoomFactory, RoomPlacement, place_rooms

logger = logging.getLogger(__name__)


@dataclass
class Maze:
    grid: Grid
    rooms: RoomPlacement
    start: Coord = (0, 0)
    cell_size: float = 1.0

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def depth(self) -> int:
        return self.grid.depth

    @property
    def room_positions(self) -> Tuple[Coord, ...]:
        return tuple(self.rooms.positions)

    def get_cell(self, x: int, z: int) -> Optional[MazeCell]:
        """Occupant at (x, z), or None when out of bounds."""
        if not self.grid.in_bounds(x, z):
            return None
        return self.grid.get(x, z)

    def world_position(self, x: int, z: int) -> Tuple[float, float, float]:
        return (x * self.cell_size, 0.0, z * self.cell_size)

    def passages(self) -> List[Tuple[Coord, Coord]]:
        return self.grid.passages()


class MazeBuilder:
    """
    Owns the grid for the duration of one generation. `maze` stays None until
    carving and room placement have both finished.
    """

    def __init__(self, config: MazeConfig, rng=None,
                 room_factory: Optional[RoomFactory] = make_room):
        self.config = config
        self.rng = rng if rng is not None else PMRandom.from_seed(config.seed)
        self.room_factory = room_factory
        self.grid: Optional[Grid] = None
        self._maze: Optional[Maze] = None
        self._started = False

    @property
    def maze(self) -> Optional[Maze]:
        return self._maze

    def prepare(self) -> Grid:
        if self.grid is None:
            self.grid = Grid.empty(self.config.width, self.config.depth)
        return self.grid

    def steps(self) -> Iterator[CarveStep]:
        # One carve per builder: a second pass over a half-carved grid would
        # stop early and publish a non-spanning maze.
        if self._started:
            raise RuntimeError("builder already started generating; create a new builder")
        self._started = True
        cfg = self.config
        grid = self.prepare()
        logger.debug("Carving %dx%d maze from %s", cfg.width, cfg.depth, cfg.start)
        yield from carve_steps(grid, self.rng, cfg.start)
        rooms = place_rooms(grid, self.rng, cfg.room_count, start=cfg.start,
                            room_factory=self.room_factory)
        self._maze = Maze(grid=grid, rooms=rooms, start=cfg.start, cell_size=cfg.cell_size)

    def build(self) -> Maze:
        for _ in self.steps():
            pass
        return self._maze

    def run(self, sleep: Sleep = time.sleep) -> Maze:
        cfg = self.config
        if not cfg.animate:
            return self.build()
        self.prepare()
        for _ in paced(self.steps(), cfg.step_delay, cfg.initial_delay, sleep):
            pass
        return self._maze


def generate_maze(config: MazeConfig, rng=None,
                  room_factory: Optional[RoomFactory] = make_room) -> Maze:
    return MazeBuilder(config, rng=rng, room_factory=room_factory).run()
