#!/usr/bin/env python3
import argparse, os
from gridmaze.mapgen.generator import generate_grid

def write_text(grid, path):
    with open(path, 'w', encoding='utf-8', newline='\n') as f:
        f.write(grid.as_text() + "\n")

def cmd_emit(args):
    grid = generate_grid(args.width, args.height, seed=args.seed)
    if args.out == '-':
        print(grid.as_text())
        return
    write_text(grid, args.out)
    print(f"Wrote {args.out}")

def cmd_batch(args):
    os.makedirs(args.outdir, exist_ok=True)
    for seed in range(args.seed, args.seed + args.count):
        grid = generate_grid(args.width, args.height, seed=seed)
        write_text(grid, os.path.join(args.outdir, f"{seed:04d}.txt"))
    print(f"Wrote {args.count} mazes to {args.outdir}")

def main():
    p = argparse.ArgumentParser()
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--seed', type=int, default=None)
    p1.add_argument('--width', type=int, default=21)
    p1.add_argument('--height', type=int, default=21)
    p1.add_argument('--out', type=str, default='-')
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('batch')
    p2.add_argument('--seed', type=int, default=0)
    p2.add_argument('--count', type=int, default=10)
    p2.add_argument('--width', type=int, default=21)
    p2.add_argument('--height', type=int, default=21)
    p2.add_argument('--outdir', type=str, required=True)
    p2.set_defaults(func=cmd_batch)
    args = p.parse_args()
    args.func(args)

if __name__ == '__main__':
    main()
