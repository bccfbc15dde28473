# src/gridmaze/mapgen/carve.py
# Randomized depth-first backtracker over the flat grid, driven by an explicit
# coordinate stack. Each carve step clears one mirrored wall pair; dead ends pop.

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from ..grid import Coord, Grid


@dataclass(frozen=True)
class CarveStep:
    index: int       # 0-based carve number
    current: Coord
    chosen: Coord
    depth: int       # stack size after pushing `chosen`


def unvisited_neighbors(grid: Grid, x: int, z: int) -> List[Coord]:
    return [(nx, nz) for nx, nz in grid.neighbors(x, z) if not grid.get(nx, nz).is_visited]


def remove_wall_between(grid: Grid, current: Coord, neighbor: Coord) -> None:
    (cx, cz), (nx, nz) = current, neighbor
    a, b = grid.get(cx, cz), grid.get(nx, nz)
    if nx == cx + 1 and nz == cz:
        a.clear_right_wall()
        b.clear_left_wall()
    elif nx == cx - 1 and nz == cz:
        a.clear_left_wall()
        b.clear_right_wall()
    elif nz == cz + 1 and nx == cx:
        a.clear_front_wall()
        b.clear_back_wall()
    elif nz == cz - 1 and nx == cx:
        a.clear_back_wall()
        b.clear_front_wall()
    else:
        raise ValueError(f"{current} and {neighbor} are not orthogonal neighbours")


def carve_steps(grid: Grid, rng, start: Coord = (0, 0)) -> Iterator[CarveStep]:
    """
    Carve `grid` in place into a perfect maze, yielding after every completed
    carve. The grid is consistent at each yield; the sequence of choices does
    not depend on how fast the caller pulls.
    `rng` needs only randrange(n).
    """
    sx, sz = start
    if not grid.in_bounds(sx, sz):
        raise ValueError(f"start {start} outside {grid.width}x{grid.depth} grid")

    grid.get(sx, sz).visit()
    stack: List[Coord] = [start]
    index = 0

    while stack:
        current = stack[-1]
        options = unvisited_neighbors(grid, *current)
        if not options:
            stack.pop()
            continue
        chosen = options[rng.randrange(len(options))]
        remove_wall_between(grid, current, chosen)
        grid.get(*chosen).visit()
        stack.append(chosen)
        yield CarveStep(index=index, current=current, chosen=chosen, depth=len(stack))
        index += 1


def carve_maze(grid: Grid, rng, start: Coord = (0, 0)) -> int:
    """Immediate mode: carve to completion, return the number of carve steps."""
    count = 0
    for _ in carve_steps(grid, rng, start):
        count += 1
    return count
