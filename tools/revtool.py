#!/usr/bin/env python3
import argparse, csv, logging, os, sys
from revrandom.errors import ReversibleRandomError
from revrandom.generator import ReversibleRandom
from revrandom.modinv import inverse
from revrandom.config import PRESETS
from revrandom.params import params_for

def emit_values(rng, count, bounds=(), backward=False):
    step = rng.previous if backward else rng.next
    return [step(*bounds) for _ in range(count)]

def write_tsv(values, path, include_header=False):
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)
    with open(path, 'w', newline='') as f:
        w = csv.writer(f, delimiter='\t')
        if include_header:
            w.writerow(['step', 'value'])
        for k, v in enumerate(values, start=1):
            w.writerow([k, v])

def cmd_emit(args):
    rng = ReversibleRandom(params=params_for(args.preset))
    if args.seed is not None:
        rng.set_initial(args.seed)
    if args.hi is None:
        if args.lo is not None:
            raise SystemExit("--lo needs --hi")
        bounds = ()
    else:
        bounds = (0 if args.lo is None else args.lo, args.hi)
    values = emit_values(rng, args.count, bounds, backward=args.backward)
    write_tsv(values, args.out, include_header=args.header)
    print(f"Wrote {len(values)} values to {args.out}")

def cmd_inverse(args):
    print(inverse(args.a, args.m))

def cmd_presets(args):
    for name, p in sorted(PRESETS.items()):
        print(f"{name:20s} a={p.a} c={p.c} m={p.m}")

def main(argv=None):
    p = argparse.ArgumentParser(description="Reversible LCG helper")
    p.add_argument('-v', '--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--count', type=int, required=True)
    p1.add_argument('--seed', type=int, help="exact initial state (default: random)")
    p1.add_argument('--preset', choices=sorted(PRESETS), default='minstd')
    p1.add_argument('--lo', type=int)
    p1.add_argument('--hi', type=int)
    p1.add_argument('--backward', action='store_true', help="walk with previous() instead of next()")
    p1.add_argument('--out', type=str, required=True)
    p1.add_argument('--header', action='store_true')
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('inverse')
    p2.add_argument('a', type=int)
    p2.add_argument('m', type=int)
    p2.set_defaults(func=cmd_inverse)
    p3 = sub.add_parser('presets')
    p3.set_defaults(func=cmd_presets)
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s [%(levelname)s] %(name)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    try:
        args.func(args)
    except ReversibleRandomError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0

if __name__ == '__main__':
    sys.exit(main())
