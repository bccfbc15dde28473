# src/gridmaze/render/ascii.py
# Plain-text maze: z = 0 on the top row, a cell's front wall is its bottom edge.

from typing import Iterable, List, Optional

from ..grid import Coord, Grid


def render_ascii(grid: Grid, rooms: Iterable[Coord] = (), start: Optional[Coord] = None) -> List[str]:
    """
    Return 2*depth+1 lines of +--+ / | art. Rooms are marked R, the start S;
    cells whose occupant is a room kind are marked R even if not listed.
    """
    marks = {pos: "R" for pos in rooms}
    if start is not None:
        marks[start] = "S"

    top = "+"
    for x in range(grid.width):
        top += ("--" if grid.get(x, 0).has_back_wall() else "  ") + "+"
    lines = [top]

    for z in range(grid.depth):
        row = "|" if grid.get(0, z).has_left_wall() else " "
        sep = "+"
        for x in range(grid.width):
            cell = grid.get(x, z)
            mark = marks.get((x, z), "R" if cell.is_room else " ")
            row += " " + mark
            row += "|" if cell.has_right_wall() else " "
            sep += ("--" if cell.has_front_wall() else "  ") + "+"
        lines.append(row)
        lines.append(sep)
    return lines
