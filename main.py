# main.py
import argparse

from config import AppConfig
from runners.run_snake import main as play
from runners.run_headless import main as headless

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Grid snake")
    p.add_argument("mode", choices=["play", "headless"], nargs="?", default="play")
    p.add_argument("--grid", type=int, nargs=2, metavar=("W", "H"))
    p.add_argument("--window", type=int, nargs=2, metavar=("W", "H"),
                   help="viewport in pixels; grid is derived from it")
    p.add_argument("--cell", type=int, help="cell size in pixels")
    p.add_argument("--tick-ms", type=int, help="period between steps")
    p.add_argument("--seed", type=int)
    p.add_argument("--log", help="CSV file, one row per finished game")
    p.add_argument("--ticks", type=int, default=1000, help="headless: number of steps")
    p.add_argument("--threaded-input", action="store_true",
                   help="headless: feed input from a second thread")
    return p.parse_args(argv)

def build_config(args) -> AppConfig:
    cfg = AppConfig()
    overrides = {}
    if args.grid:
        overrides.update(grid_w=args.grid[0], grid_h=args.grid[1])
    if args.window:
        overrides.update(window_w=args.window[0], window_h=args.window[1])
    if args.cell is not None:
        overrides["cell_px"] = args.cell
    if args.tick_ms is not None:
        overrides["tick_ms"] = args.tick_ms
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.log:
        overrides["log_path"] = args.log
    return cfg.with_(**overrides)

def main(argv=None):
    args = parse_args(argv)
    cfg = build_config(args)
    if args.mode == "play":
        play(cfg)
    elif args.mode == "headless":
        headless(cfg, ticks=args.ticks, threaded_input=args.threaded_input)

if __name__ == "__main__":
    main()
