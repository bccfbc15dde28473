# src/gridmaze/cell.py
# Per-position maze state: four boundary walls, a visited flag and a kind.
# Directions: left = x-1, right = x+1, back = z-1, front = z+1.

from dataclasses import dataclass
from typing import Tuple

CELL = "cell"
ROOM = "room"

Walls = Tuple[bool, bool, bool, bool]  # (left, right, front, back)


@dataclass
class MazeCell:
    x: int
    z: int
    kind: str = CELL
    left_wall: bool = True
    right_wall: bool = True
    front_wall: bool = True
    back_wall: bool = True
    visited: bool = False

    def visit(self) -> None:
        self.visited = True

    @property
    def is_visited(self) -> bool:
        return self.visited

    @property
    def is_room(self) -> bool:
        return self.kind == ROOM

    def has_left_wall(self) -> bool:
        return self.left_wall

    def has_right_wall(self) -> bool:
        return self.right_wall

    def has_front_wall(self) -> bool:
        return self.front_wall

    def has_back_wall(self) -> bool:
        return self.back_wall

    # Walls only ever come down; there is no matching setter.
    def clear_left_wall(self) -> None:
        self.left_wall = False

    def clear_right_wall(self) -> None:
        self.right_wall = False

    def clear_front_wall(self) -> None:
        self.front_wall = False

    def clear_back_wall(self) -> None:
        self.back_wall = False

    def walls(self) -> Walls:
        return (self.left_wall, self.right_wall, self.front_wall, self.back_wall)


def make_cell(x: int, z: int) -> MazeCell:
    return MazeCell(x, z)


def make_room(x: int, z: int) -> MazeCell:
    return MazeCell(x, z, kind=ROOM)
