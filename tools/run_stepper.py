#!/usr/bin/env python3
# Interactive stepper for a reversible generator (pygame).
# - Right / Space: next()      Left / Backspace: previous()
# - R: reset to a fresh random state    S: back to the --seed state
# - Up / Down: widen / narrow the displayed range
# - 60 Hz fixed loop

import argparse, logging
from dataclasses import dataclass, field
from typing import List, Tuple

from revrandom.generator import ReversibleRandom
from revrandom.config import PRESETS
from revrandom.params import params_for

RANGE_CHOICES = (2, 6, 10, 100, 1000, None)  # None = full range [0, m)

@dataclass
class StepLog:
    """Visible window of (step index, value) pairs; the step index goes negative when rewinding."""
    width: int = 16
    step: int = 0
    rows: List[Tuple[int, int]] = field(default_factory=list)

    def record(self, value: int) -> None:
        self.rows.append((self.step, value))
        if len(self.rows) > self.width:
            del self.rows[0]

    def forward(self, rng: ReversibleRandom, bound=None) -> int:
        self.step += 1
        v = rng.next(bound)
        self.record(v)
        return v

    def backward(self, rng: ReversibleRandom, bound=None) -> int:
        self.step -= 1
        v = rng.previous(bound)
        self.record(v)
        return v

    def clear(self) -> None:
        self.step = 0
        self.rows.clear()

def draw_log(screen, font, log: StepLog, bound, x0=16, y0=48, line_h=22):
    import pygame  # local import so StepLog stays usable without a display
    label = "[0, m)" if bound is None else f"[0, {bound})"
    screen.blit(font.render(f"step {log.step}  range {label}", True, (220, 220, 220)), (x0, 12))
    for k, (step, value) in enumerate(reversed(log.rows)):
        color = (0, 220, 0) if k == 0 else (140, 140, 140)
        screen.blit(font.render(f"{step:>8d}  {value}", True, color), (x0, y0 + k * line_h))
    pygame.draw.line(screen, (60, 60, 60), (0, y0 - 6), (screen.get_width(), y0 - 6))

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--preset", choices=sorted(PRESETS), default="minstd")
    ap.add_argument("--seed", type=int, help="Exact starting state (default: random)")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s [%(levelname)s] %(name)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    import pygame
    pygame.init()
    pygame.display.set_caption("Reversible Random Stepper")
    clock = pygame.time.Clock()
    screen = pygame.display.set_mode((360, 420))
    font = pygame.font.SysFont("monospace", 16)

    rng = ReversibleRandom(params=params_for(args.preset))
    if args.seed is not None:
        rng.set_initial(args.seed)
    log = StepLog()
    range_idx = len(RANGE_CHOICES) - 1
    log.record(rng.current())

    running = True
    while running:
        bound = RANGE_CHOICES[range_idx]
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key in (pygame.K_RIGHT, pygame.K_SPACE):
                    log.forward(rng, bound)
                elif ev.key in (pygame.K_LEFT, pygame.K_BACKSPACE):
                    log.backward(rng, bound)
                elif ev.key == pygame.K_r:
                    rng.reset()
                    log.clear()
                    log.record(rng.current(bound))
                elif ev.key == pygame.K_s and args.seed is not None:
                    rng.set_initial(args.seed)
                    log.clear()
                    log.record(rng.current(bound))
                elif ev.key == pygame.K_UP:
                    range_idx = min(len(RANGE_CHOICES) - 1, range_idx + 1)
                elif ev.key == pygame.K_DOWN:
                    range_idx = max(0, range_idx - 1)

        screen.fill((0, 0, 0))
        draw_log(screen, font, log, RANGE_CHOICES[range_idx])
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()

if __name__ == "__main__":
    main()
