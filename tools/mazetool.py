#!/usr/bin/env python3
import argparse, logging
from dataclasses import replace
from gridmaze.config import MazeConfig, MazeConfigError
from gridmaze.mapgen.builder import generate_maze
from gridmaze.render.ascii import render_ascii
from gridmaze.rng import new_seed

def build_config(args):
    # GRIDMAZE_* env values first, then CLI flags. Always immediate mode:
    # the CLI writes a finished maze, so GRIDMAZE_ANIMATE is overridden.
    base = MazeConfig.from_env()
    overrides = {"animate": False}
    for field, value in (("width", args.width), ("depth", args.depth),
                         ("room_count", args.rooms), ("seed", args.seed)):
        if value is not None:
            overrides[field] = value
    if overrides.get("seed", base.seed) is None:
        overrides["seed"] = new_seed()
    return replace(base, **overrides)

def cmd_emit(args, cfg):
    maze = generate_maze(cfg)
    lines = render_ascii(maze.grid, maze.room_positions, maze.start)
    if args.out:
        with open(args.out, 'w', encoding='utf-8') as f:
            f.write("\n".join(lines) + "\n")
        print(f"Wrote {args.out}")
    else:
        print("\n".join(lines))

def cmd_png(args, cfg):
    from gridmaze.render.image import save_png
    maze = generate_maze(cfg)
    size = save_png(maze, args.out, tile=args.tile)
    print(f"Wrote {args.out} ({size[0]}x{size[1]})")

def cmd_stats(args, cfg):
    maze = generate_maze(cfg)
    print(f"size={maze.width}x{maze.depth} seed={cfg.seed}")
    print(f"passages={len(maze.passages())}")
    print(f"rooms={maze.rooms.placed}/{maze.rooms.requested} {list(maze.room_positions)}")

def main():
    p = argparse.ArgumentParser(description="Generate grid mazes")
    p.add_argument('--width', type=int)
    p.add_argument('--depth', type=int)
    p.add_argument('--rooms', type=int)
    p.add_argument('--seed', type=int)
    p.add_argument('-v', '--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--out', type=str)
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('png')
    p2.add_argument('--out', type=str, required=True)
    p2.add_argument('--tile', type=int, default=16)
    p2.set_defaults(func=cmd_png)
    p3 = sub.add_parser('stats')
    p3.set_defaults(func=cmd_stats)
    args = p.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    try:
        cfg = build_config(args)
    except MazeConfigError as e:
        p.error(str(e))
    args.func(args, cfg)

if __name__ == '__main__':
    main()
