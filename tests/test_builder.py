import logging
import random
from collections import deque

import pytest

from gridmaze.cell import ROOM
from gridmaze.config import MazeConfig
from gridmaze.mapgen.builder import Maze, MazeBuilder, generate_maze
from gridmaze.mapgen.rooms import ROOM_SPACING, euclidean, manhattan
from gridmaze.rng import PMRandom
from gridmaze.timing import make_recording_sleep

def reachable(grid, start):
    seen = {start}
    q = deque([start])
    while q:
        cur = q.popleft()
        for nb in grid.neighbors(*cur):
            if nb not in seen and grid.has_passage(cur, nb):
                seen.add(nb)
                q.append(nb)
    return seen

def fingerprint(maze):
    return [(c.kind, c.walls(), c.is_visited) for c in maze.grid.cells], maze.room_positions

@pytest.mark.parametrize("seed", [1, 7, 42, 1000, 65535])
def test_ten_by_ten_scenario(seed):
    maze = MazeBuilder(MazeConfig(width=10, depth=10, room_count=5, seed=seed)).build()
    assert isinstance(maze, Maze)
    assert len(maze.grid.cells) == 100
    assert len(maze.passages()) == 99
    assert len(reachable(maze.grid, (0, 0))) == 100
    rooms = maze.room_positions
    assert 0 <= len(rooms) <= 5
    for i, a in enumerate(rooms):
        assert manhattan(a, (0, 0)) >= 3
        assert 0 < a[0] < 9 and 0 < a[1] < 9
        assert maze.get_cell(*a).kind == ROOM
        for b in rooms[i + 1:]:
            assert euclidean(a, b) >= ROOM_SPACING

def test_two_by_two_scenario():
    maze = MazeBuilder(MazeConfig(width=2, depth=2, room_count=5, seed=3)).build()
    assert len(maze.passages()) == 3
    assert all(c.is_visited for c in maze.grid.cells)
    assert maze.rooms.placed == 0

def test_zero_rooms_scenario(caplog):
    caplog.set_level(logging.WARNING)
    maze = MazeBuilder(MazeConfig(width=10, depth=10, room_count=0, seed=5)).build()
    assert len(maze.passages()) == 99
    assert maze.rooms.placed == 0
    assert not any(c.is_room for c in maze.grid.cells)
    assert not any("Could only place" in r.getMessage() for r in caplog.records)

def test_get_cell_out_of_bounds_is_none():
    maze = generate_maze(MazeConfig(width=4, depth=3, seed=1))
    assert maze.get_cell(3, 2) is maze.grid.get(3, 2)
    for x, z in [(-1, 0), (4, 0), (0, 3), (0, -1), (100, 100)]:
        assert maze.get_cell(x, z) is None

def test_world_position_uses_cell_size():
    maze = generate_maze(MazeConfig(width=5, depth=5, cell_size=2.5, seed=1))
    assert maze.world_position(3, 4) == (7.5, 0.0, 10.0)
    assert maze.world_position(0, 0) == (0.0, 0.0, 0.0)

def test_paced_and_immediate_agree():
    base = MazeConfig(width=9, depth=7, room_count=3, seed=2718)
    immediate = MazeBuilder(base).build()
    paced_cfg = MazeConfig(width=9, depth=7, room_count=3, seed=2718,
                           animate=True, step_delay=0.01, initial_delay=0.5)
    sleep, calls = make_recording_sleep()
    paced = MazeBuilder(paced_cfg).run(sleep=sleep)
    assert fingerprint(paced) == fingerprint(immediate)
    assert calls == [0.5] + [0.01] * (9 * 7 - 1)

def test_run_without_animation_never_sleeps():
    sleep, calls = make_recording_sleep()
    MazeBuilder(MazeConfig(width=5, depth=5, seed=1)).run(sleep=sleep)
    assert calls == []

def test_maze_is_published_only_when_finished():
    b = MazeBuilder(MazeConfig(width=5, depth=4, room_count=1, seed=9))
    assert b.maze is None
    steps = b.steps()
    first = next(steps)
    assert first.index == 0
    assert b.maze is None
    assert len(b.grid.passages()) == 1
    rest = list(steps)
    assert len(rest) == 5 * 4 - 2
    assert b.maze is not None
    assert b.maze.grid is b.grid

def test_builder_is_single_use():
    b = MazeBuilder(MazeConfig(width=3, depth=3, seed=1))
    b.build()
    with pytest.raises(RuntimeError):
        b.build()

def test_abandoned_steps_block_reuse():
    b = MazeBuilder(MazeConfig(width=6, depth=6, room_count=2, seed=2))
    steps = b.steps()
    for _ in range(3):
        next(steps)
    steps.close()
    with pytest.raises(RuntimeError):
        b.build()
    with pytest.raises(RuntimeError):
        next(b.steps())
    assert b.maze is None
    assert len(b.grid.passages()) == 3

def test_injected_random_module_rng_is_deterministic():
    cfg = MazeConfig(width=11, depth=8, room_count=4)
    a = MazeBuilder(cfg, rng=random.Random(55)).build()
    b = MazeBuilder(cfg, rng=random.Random(55)).build()
    assert fingerprint(a) == fingerprint(b)

def test_config_seed_matches_explicit_pm_random():
    cfg = MazeConfig(width=8, depth=8, seed=314159)
    assert fingerprint(generate_maze(cfg)) == fingerprint(MazeBuilder(cfg, rng=PMRandom(314159)).build())

def test_custom_start_is_respected():
    maze = generate_maze(MazeConfig(width=12, depth=12, room_count=6, start=(6, 6), seed=8))
    assert maze.start == (6, 6)
    assert len(reachable(maze.grid, (6, 6))) == 144
    for pos in maze.room_positions:
        assert manhattan(pos, (6, 6)) >= 3

def test_builder_without_room_factory():
    maze = MazeBuilder(MazeConfig(width=10, depth=10, room_count=2, seed=4), room_factory=None).build()
    assert maze.rooms.placed >= 1
    assert maze.rooms.converted == []
    assert not any(c.is_room for c in maze.grid.cells)
