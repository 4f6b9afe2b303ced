#!/usr/bin/env python3
# Interactive viewer for a maze widget in a resizable pygame window.
# - R: regenerate with a fresh random seed
# - Up/Down: rows +/-1, Right/Left: cols +/-1 (both regenerate)
# - M: toggle square_by width/min (visual only)
# - [ / ]: thinner/thicker walls (visual only)
# - S: save the current maze to out/maze.png via Pillow
# - Window resizes redraw the existing maze

import argparse, logging, random
import pygame
from mazewidget.mount import PygameWindowMount
from mazewidget.render.geometry import render
from mazewidget.render.pillow_surface import PillowSurface
from mazewidget.widget import create_maze_widget

def save_png(widget, path):
    st = widget.get_state()
    o = st.options
    surface = PillowSurface(st.surface.logical_size)
    render(surface, st.grid, o.cols, o.rows, st.surface.logical_size, o)
    surface.save(path)
    print(f"[viewer] Wrote {path}")

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--cols", type=int, default=5)
    ap.add_argument("--rows", type=int, default=5)
    ap.add_argument("--seed", type=int, default=983811)
    ap.add_argument("--size", type=int, default=480, help="Initial window size in pixels")
    ap.add_argument("--padding", type=int, default=0)
    ap.add_argument("--dpr", type=float, default=1.0, help="Device pixel ratio for the backing surface")
    ap.add_argument("--square-by", choices=["width", "min"], default="min")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    mount = PygameWindowMount(args.size, args.size, caption="Maze Viewer", dpr=args.dpr)
    widget = create_maze_widget(mount, {
        "cols": args.cols, "rows": args.rows, "seed": args.seed,
        "padding": args.padding, "square_by": args.square_by,
    })
    clock = pygame.time.Clock()

    running = True
    while running:
        for ev in mount.pump():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                o = widget.options
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key == pygame.K_r:
                    widget.regenerate({"seed": random.randrange(2 ** 32)})
                elif ev.key == pygame.K_UP:
                    widget.regenerate({"rows": o.rows + 1})
                elif ev.key == pygame.K_DOWN:
                    widget.regenerate({"rows": max(1, o.rows - 1)})
                elif ev.key == pygame.K_RIGHT:
                    widget.regenerate({"cols": o.cols + 1})
                elif ev.key == pygame.K_LEFT:
                    widget.regenerate({"cols": max(1, o.cols - 1)})
                elif ev.key == pygame.K_m:
                    widget.set_options({"square_by": "width" if o.square_by == "min" else "min"})
                elif ev.key == pygame.K_LEFTBRACKET:
                    widget.set_options({"line_width_ratio": max(0.0, o.line_width_ratio - 0.05)})
                elif ev.key == pygame.K_RIGHTBRACKET:
                    widget.set_options({"line_width_ratio": min(1.0, o.line_width_ratio + 0.05)})
                elif ev.key == pygame.K_s:
                    save_png(widget, "out/maze.png")

        o = widget.options
        pygame.display.set_caption(
            f"Maze Viewer — {o.cols}x{o.rows}  seed {o.seed}  [{o.square_by}]"
        )
        mount.present()
        clock.tick(60)

    widget.destroy()
    mount.close()

if __name__ == "__main__":
    main()
