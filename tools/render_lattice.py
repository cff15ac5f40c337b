#!/usr/bin/env python3
# Plot consecutive output pairs (x_k, x_k+1) of a generator to a PNG using Pillow.
# Every LCG puts these pairs on a small number of parallel lines; with a small
# modulus (try --a 137 --c 187 --m 256) the lines are plain to see.

import argparse, logging, os
from PIL import Image, ImageDraw
from revrandom.generator import ReversibleRandom
from revrandom.config import PRESETS
from revrandom.params import ParameterSet, params_for

BACKGROUND = (16, 16, 16, 255)
POINT = (0, 220, 0, 255)

def consecutive_pairs(rng, count):
    prev = rng.current()
    pairs = []
    for _ in range(count):
        cur = rng.next()
        pairs.append((prev, cur))
        prev = cur
    return pairs

def render_pairs(pairs, m, size=512, margin=0):
    img = Image.new("RGBA", (size + 2*margin, size + 2*margin), BACKGROUND)
    draw = ImageDraw.Draw(img)
    scale = (size - 1) / max(1, m - 1)
    for x, y in pairs:
        px = margin + round(x * scale)
        py = margin + (size - 1) - round(y * scale)  # y grows upwards
        draw.point((px, py), fill=POINT)
    return img

def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--preset", choices=sorted(PRESETS), default="minstd")
    ap.add_argument("--a", type=int, help="custom multiplier (with --c and --m)")
    ap.add_argument("--c", type=int)
    ap.add_argument("--m", type=int)
    ap.add_argument("--count", type=int, default=20000, help="Number of pairs to plot")
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--size", type=int, default=512, help="Image edge in pixels")
    ap.add_argument("--out", type=str, default="out/lattice.png")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s [%(levelname)s] %(name)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    if args.a is not None:
        if args.c is None or args.m is None:
            raise SystemExit("--a needs --c and --m")
        params = ParameterSet(args.a, args.c, args.m)
    else:
        params = params_for(args.preset)

    rng = ReversibleRandom(params=params)
    rng.set_initial(args.seed % params.m)
    img = render_pairs(consecutive_pairs(rng, args.count), params.m, size=args.size)
    d = os.path.dirname(args.out)
    if d:
        os.makedirs(d, exist_ok=True)
    img.save(args.out)
    print(f"Wrote {args.out}")

if __name__ == "__main__":
    main()
