#!/usr/bin/env python3
# Interactive viewer: watch the backtracker carve, then the rooms appear.
# - R: regenerate with a fresh seed
# - Space: toggle pacing (off = finish the current maze immediately)
# - Esc: quit

import argparse, logging
from dataclasses import replace
import pygame
from gridmaze.config import MazeConfig
from gridmaze.rng import new_seed
from gridmaze.mapgen.builder import MazeBuilder
from gridmaze.render.surface import COLORS, draw_grid

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--width", type=int, default=20)
    ap.add_argument("--depth", type=int, default=15)
    ap.add_argument("--rooms", type=int, default=5)
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--tile", type=int, default=24, help="Cell size in pixels")
    ap.add_argument("--step-ms", type=int, default=50, help="Delay per carve step")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")

    cfg = MazeConfig(width=args.width, depth=args.depth, room_count=args.rooms,
                     seed=args.seed, animate=True, step_delay=args.step_ms / 1000.0)

    pygame.init()
    clock = pygame.time.Clock()
    screen = pygame.display.set_mode((cfg.width * args.tile, cfg.depth * args.tile))

    def start(seed):
        seed = new_seed() if seed is None else seed
        b = MazeBuilder(replace(cfg, seed=seed))
        b.prepare()
        return b, b.steps()

    builder, steps = start(cfg.seed)
    pacing = True
    highlight = None
    # Time until the next step is pulled; begins with the pre-carve pause.
    wait_ms = cfg.initial_delay * 1000.0
    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key == pygame.K_r:
                    builder, steps = start(None)
                    highlight, wait_ms = None, cfg.initial_delay * 1000.0
                elif ev.key == pygame.K_SPACE:
                    pacing = not pacing

        dt = clock.tick(60)
        if steps is not None:
            if not pacing:
                for _ in steps:
                    pass
                steps, highlight = None, None
            else:
                wait_ms -= dt
                while steps is not None and wait_ms <= 0:
                    step = next(steps, None)
                    if step is None:
                        steps, highlight = None, None
                    else:
                        highlight = step.chosen
                        wait_ms += max(1.0, cfg.step_delay * 1000.0)

        maze = builder.maze
        rooms = maze.room_positions if maze is not None else ()
        screen.fill(COLORS["background"])
        draw_grid(screen, builder.grid, args.tile, rooms=rooms, highlight=highlight)
        status = f"rooms {maze.rooms.placed}/{maze.rooms.requested}" if maze is not None else "carving"
        pygame.display.set_caption(
            f"gridmaze — {cfg.width}x{cfg.depth}  seed {builder.config.seed}  [{status}]"
        )
        pygame.display.flip()

    pygame.quit()

if __name__ == "__main__":
    main()
