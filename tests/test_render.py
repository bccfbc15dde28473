import pytest

from gridmaze.config import MazeConfig
from gridmaze.grid import Grid
from gridmaze.mapgen.builder import generate_maze
from gridmaze.mapgen.carve import remove_wall_between
from gridmaze.render.ascii import render_ascii

def test_ascii_uncarved_grid():
    assert render_ascii(Grid.empty(2, 1)) == ["+--+--+", "|  |  |", "+--+--+"]

def test_ascii_marks_and_openings():
    g = Grid.empty(2, 2)
    remove_wall_between(g, (0, 0), (1, 0))
    remove_wall_between(g, (1, 0), (1, 1))
    lines = render_ascii(g, rooms=[(0, 1)], start=(0, 0))
    assert lines == [
        "+--+--+",
        "| S   |",
        "+--+  +",
        "| R|  |",
        "+--+--+",
    ]

def test_ascii_dimensions_for_generated_maze():
    maze = generate_maze(MazeConfig(width=7, depth=4, seed=12))
    lines = render_ascii(maze.grid, maze.room_positions, maze.start)
    assert len(lines) == 2 * 4 + 1
    assert all(len(line) == 3 * 7 + 1 for line in lines)

def test_image_colors_and_size(tmp_path):
    pytest.importorskip("PIL")
    from gridmaze.render.image import ROOM_FILL, START_FILL, WALL, maze_image, save_png

    g = Grid.empty(3, 3)
    img = maze_image(g, rooms=[(2, 2)], start=(0, 0), tile=10, margin=2)
    assert img.size == (34, 34)
    assert img.getpixel((7, 7)) == START_FILL
    assert img.getpixel((27, 27)) == ROOM_FILL
    assert img.getpixel((2, 2)) == WALL

    maze = generate_maze(MazeConfig(width=5, depth=4, seed=3))
    out = tmp_path / "out" / "maze.png"
    assert save_png(maze, str(out), tile=8, margin=0) == (40, 32)
    assert out.exists()

def test_surface_drawing():
    pygame = pytest.importorskip("pygame")
    from gridmaze.render.surface import COLORS, cell_rect, draw_grid

    g = Grid.empty(3, 3)
    g.get(0, 0).visit()
    surf = pygame.Surface((30, 30))
    draw_grid(surf, g, 10, rooms=[(1, 1)], highlight=(2, 2))
    assert tuple(surf.get_at((15, 15)))[:3] == COLORS["room"]
    assert tuple(surf.get_at((25, 25)))[:3] == COLORS["highlight"]
    assert tuple(surf.get_at((5, 5)))[:3] == COLORS["floor"]
    assert tuple(surf.get_at((15, 5)))[:3] == COLORS["unvisited"]
    assert tuple(surf.get_at((0, 0)))[:3] == COLORS["wall"]
    assert cell_rect(2, 1, 10, origin=(5, 5)).topleft == (25, 15)
