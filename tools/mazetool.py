#!/usr/bin/env python3
# Emit mazes as TSV wall masks (top=1, right=2, bottom=4, left=8) or PNGs.
import argparse, csv, os
from mazewidget.config import DEFAULTS
from mazewidget.mapgen.generator import generate_grid
from mazewidget.render.geometry import render
from mazewidget.render.pillow_surface import PillowSurface

def options_from_args(args):
    over = {"cols": args.cols, "rows": args.rows, "seed": args.seed}
    if getattr(args, "wall", None):
        over["wall_color"] = args.wall
    if getattr(args, "bg", None):
        over["bg_color"] = args.bg
    if getattr(args, "ratio", None) is not None:
        over["line_width_ratio"] = args.ratio
    return DEFAULTS.merged(over)

def write_tsv(mat, path, include_header=False):
    with open(path, 'w', newline='') as f:
        w = csv.writer(f, delimiter='\t')
        if include_header:
            w.writerow(list(range(len(mat[0]))))
        for r in mat:
            w.writerow(r)

def cmd_emit(args):
    opts = options_from_args(args)
    write_tsv(generate_grid(opts).as_mask_matrix(), args.out, include_header=args.header)
    print(f"Wrote {args.out}")

def cmd_png(args):
    opts = options_from_args(args)
    grid = generate_grid(opts)
    surface = PillowSurface(args.size, args.scale)
    render(surface, grid, opts.cols, opts.rows, args.size, opts)
    surface.save(args.out)
    print(f"Wrote {args.out}")

def cmd_golden(args):
    os.makedirs(args.outdir, exist_ok=True)
    for seed in args.seeds:
        opts = DEFAULTS.merged(cols=args.cols, rows=args.rows, seed=seed)
        path = os.path.join(args.outdir, f"{args.cols}x{args.rows}_{seed}.tsv")
        write_tsv(generate_grid(opts).as_mask_matrix(), path)
    print(f"Wrote golden pack to {args.outdir}")

def _maze_args(p):
    p.add_argument('--cols', type=int, default=DEFAULTS.cols)
    p.add_argument('--rows', type=int, default=DEFAULTS.rows)
    p.add_argument('--seed', type=int, default=DEFAULTS.seed)

def main():
    p = argparse.ArgumentParser()
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    _maze_args(p1)
    p1.add_argument('--out', type=str, required=True)
    p1.add_argument('--header', action='store_true')
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('png')
    _maze_args(p2)
    p2.add_argument('--out', type=str, required=True)
    p2.add_argument('--size', type=int, default=500, help="Logical square size in pixels")
    p2.add_argument('--scale', type=int, default=1, help="Backing pixels per logical pixel")
    p2.add_argument('--wall', type=str, help="Wall color, e.g. #ffffff")
    p2.add_argument('--bg', type=str, help="Background color, e.g. #000000")
    p2.add_argument('--ratio', type=float, help="Wall thickness / cell size")
    p2.set_defaults(func=cmd_png)
    p3 = sub.add_parser('golden')
    p3.add_argument('--cols', type=int, default=DEFAULTS.cols)
    p3.add_argument('--rows', type=int, default=DEFAULTS.rows)
    p3.add_argument('--seeds', type=int, nargs='+', default=[DEFAULTS.seed, 0])
    p3.add_argument('--outdir', type=str, required=True)
    p3.set_defaults(func=cmd_golden)
    args = p.parse_args()
    args.func(args)

if __name__ == '__main__':
    main()
