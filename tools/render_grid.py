#!/usr/bin/env python3
# Render generated mazes to PNGs using Pillow, one file per seed.

import argparse, os
from gridmaze.config import DEFAULTS
from gridmaze.mapgen.generator import generate_grid
from gridmaze.render.image import render_png

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, default=0, help="First seed to render")
    ap.add_argument("--count", type=int, default=1, help="Number of consecutive seeds")
    ap.add_argument("--width", type=int, default=DEFAULTS.width)
    ap.add_argument("--height", type=int, default=DEFAULTS.height)
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    ap.add_argument("--tile", type=int, default=16, help="Tile size in pixels")
    ap.add_argument("--show-start", action="store_true", help="Mark the start cell (1,1)")
    args = ap.parse_args()

    for seed in range(args.seed, args.seed + args.count):
        grid = generate_grid(args.width, args.height, seed=seed)
        png = os.path.join(args.outdir, f"maze_{grid.width}x{grid.height}_{seed:04d}.png")
        render_png(grid, png, tile_size=args.tile, player=(1, 1) if args.show_start else None)
    print(f"Wrote {args.count} PNG(s) to {args.outdir}")

if __name__ == "__main__":
    main()
