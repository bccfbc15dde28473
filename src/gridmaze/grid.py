from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .cell import MazeCell, make_cell

Coord = Tuple[int, int]

# Neighbour order is part of the carve contract: the carver picks by index
# into this order, so changing it changes every seeded maze.
NEIGHBOR_OFFSETS = ((1, 0), (-1, 0), (0, 1), (0, -1))


@dataclass
class Grid:
    width: int
    depth: int
    cells: List[MazeCell]

    @classmethod
    def empty(cls, width: int, depth: int) -> "Grid":
        if width < 1 or depth < 1:
            raise ValueError(f"grid size must be positive, got {width}x{depth}")
        # Row-major by z; every slot starts with all four walls and unvisited.
        cells = [make_cell(x, z) for z in range(depth) for x in range(width)]
        return cls(width=width, depth=depth, cells=cells)

    def idx(self, x: int, z: int) -> int:
        return z * self.width + x

    def in_bounds(self, x: int, z: int) -> bool:
        return 0 <= x < self.width and 0 <= z < self.depth

    def get(self, x: int, z: int) -> MazeCell:
        if not self.in_bounds(x, z):
            raise IndexError(f"({x}, {z}) outside {self.width}x{self.depth} grid")
        return self.cells[self.idx(x, z)]

    def set(self, x: int, z: int, cell: MazeCell) -> None:
        if not self.in_bounds(x, z):
            raise IndexError(f"({x}, {z}) outside {self.width}x{self.depth} grid")
        self.cells[self.idx(x, z)] = cell

    def coords(self) -> Iterator[Coord]:
        for z in range(self.depth):
            for x in range(self.width):
                yield (x, z)

    def neighbors(self, x: int, z: int) -> Iterator[Coord]:
        for dx, dz in NEIGHBOR_OFFSETS:
            nx, nz = x + dx, z + dz
            if self.in_bounds(nx, nz):
                yield (nx, nz)

    def has_passage(self, a: Coord, b: Coord) -> bool:
        """True when a and b are adjacent and both sides of their shared wall are clear."""
        (ax, az), (bx, bz) = a, b
        ca, cb = self.get(ax, az), self.get(bx, bz)
        if bx == ax + 1 and bz == az:
            return not ca.right_wall and not cb.left_wall
        if bx == ax - 1 and bz == az:
            return not ca.left_wall and not cb.right_wall
        if bz == az + 1 and bx == ax:
            return not ca.front_wall and not cb.back_wall
        if bz == az - 1 and bx == ax:
            return not ca.back_wall and not cb.front_wall
        return False

    def passages(self) -> List[Tuple[Coord, Coord]]:
        """Every open wall pair once, oriented towards +x or +z."""
        out = []
        for x, z in self.coords():
            if x + 1 < self.width and self.has_passage((x, z), (x + 1, z)):
                out.append(((x, z), (x + 1, z)))
            if z + 1 < self.depth and self.has_passage((x, z), (x, z + 1)):
                out.append(((x, z), (x, z + 1)))
        return out
