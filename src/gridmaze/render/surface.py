# src/gridmaze/render/surface.py
from __future__ import annotations

from typing import Iterable, Optional, Tuple

import pygame

from ..grid import Coord, Grid

COLORS = {
    "background": (24, 24, 24),
    "unvisited": (60, 60, 60),
    "floor": (200, 200, 200),
    "room": (255, 220, 0),
    "highlight": (0, 200, 255),
    "wall": (10, 10, 10),
}


def cell_rect(x: int, z: int, tile: int, origin: Tuple[int, int] = (0, 0)) -> pygame.Rect:
    ox, oy = origin
    return pygame.Rect(ox + x * tile, oy + z * tile, tile, tile)


def draw_grid(
    surface: pygame.Surface,
    grid: Grid,
    tile: int,
    origin: Tuple[int, int] = (0, 0),
    rooms: Iterable[Coord] = (),
    highlight: Optional[Coord] = None,
) -> None:
    """
    Draw the grid onto any Surface. Safe to call between carve steps: it only
    reads cell state. Does not flip the display.
    """
    room_set = set(rooms)
    for x, z in grid.coords():
        cell = grid.get(x, z)
        r = cell_rect(x, z, tile, origin)
        if (x, z) == highlight:
            color = COLORS["highlight"]
        elif (x, z) in room_set or cell.is_room:
            color = COLORS["room"]
        elif cell.is_visited:
            color = COLORS["floor"]
        else:
            color = COLORS["unvisited"]
        pygame.draw.rect(surface, color, r)
        wall = COLORS["wall"]
        if cell.has_back_wall():
            pygame.draw.line(surface, wall, r.topleft, (r.right - 1, r.top))
        if cell.has_front_wall():
            pygame.draw.line(surface, wall, (r.left, r.bottom - 1), (r.right - 1, r.bottom - 1))
        if cell.has_left_wall():
            pygame.draw.line(surface, wall, r.topleft, (r.left, r.bottom - 1))
        if cell.has_right_wall():
            pygame.draw.line(surface, wall, (r.right - 1, r.top), (r.right - 1, r.bottom - 1))
