# src/gridmaze/render/image.py
# Render a carved grid to an RGB image using Pillow.

from __future__ import annotations

import os
from typing import Iterable, Tuple

from PIL import Image, ImageDraw

from ..grid import Coord, Grid

BACKGROUND = (24, 24, 24)
FLOOR = (220, 220, 220)
UNVISITED = (80, 80, 80)
ROOM_FILL = (255, 220, 0)
START_FILL = (0, 220, 0)
WALL = (0, 0, 0)


def maze_image(grid: Grid, rooms: Iterable[Coord] = (), start: Coord | None = None,
               tile: int = 16, margin: int = 4) -> Image.Image:
    room_set = set(rooms)
    w = grid.width * tile + 2 * margin
    h = grid.depth * tile + 2 * margin
    img = Image.new("RGB", (w, h), BACKGROUND)
    draw = ImageDraw.Draw(img)

    for x, z in grid.coords():
        cell = grid.get(x, z)
        x0, y0 = margin + x * tile, margin + z * tile
        x1, y1 = x0 + tile - 1, y0 + tile - 1
        if (x, z) == start:
            fill = START_FILL
        elif (x, z) in room_set or cell.is_room:
            fill = ROOM_FILL
        elif cell.is_visited:
            fill = FLOOR
        else:
            fill = UNVISITED
        draw.rectangle((x0, y0, x1, y1), fill=fill)
        if cell.has_back_wall():
            draw.line((x0, y0, x1, y0), fill=WALL)
        if cell.has_front_wall():
            draw.line((x0, y1, x1, y1), fill=WALL)
        if cell.has_left_wall():
            draw.line((x0, y0, x0, y1), fill=WALL)
        if cell.has_right_wall():
            draw.line((x1, y0, x1, y1), fill=WALL)
    return img


def save_png(maze, path: str, tile: int = 16, margin: int = 4) -> Tuple[int, int]:
    """Write a finished Maze to `path`; returns the image size."""
    img = maze_image(maze.grid, maze.room_positions, maze.start, tile=tile, margin=margin)
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    img.save(path)
    return img.size
