"""Bots in a Dish.

Run with `python -m botdish` (or the `botdish` script). Bots drift with a slowly
rotating wind, mutate into copies of themselves and die when they leave the
screen.

Controls:
    ESCAPE  Quit
    SPACE   Toggle velocity lines
    RETURN  Hold to run the simulation at double speed
"""
from __future__ import annotations

import logging
import sys
from typing import Sequence, Set, Tuple

import pygame

from .config import (
    EXIT_KEY,
    FAST_FORWARD_KEY,
    FPS,
    FULLSCREEN,
    LOG_LEVEL,
    TOGGLE_KEY,
    WINDOW_TITLE,
    WINDOWED_SIZE,
)
from .dish import Dish
from .frame import run

logger = logging.getLogger(__name__)

def to_pygame_color(color: Sequence[float]) -> Tuple[int, int, int, int]:
    r, g, b, a = (int(round(max(0.0, min(1.0, c)) * 255)) for c in color)
    return r, g, b, a


class PygameHost:
    def __init__(self, fullscreen: bool = FULLSCREEN) -> None:
        pygame.init()
        if fullscreen:
            self.screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            self.screen = pygame.display.set_mode(WINDOWED_SIZE, pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()
        self.exit_key = pygame.key.key_code(EXIT_KEY)
        self.toggle_key = pygame.key.key_code(TOGGLE_KEY)
        self.fast_forward_key = pygame.key.key_code(FAST_FORWARD_KEY)
        self.pressed: Set[int] = set()
        self.quit_requested = False
        logger.info("Opened %dx%d window", *self.screen.get_size())
        self.poll()

    def poll(self) -> None:
        # Key presses stay visible for a whole frame, across both fast-forward steps.
        self.pressed = set()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.quit_requested = True
            elif event.type == pygame.KEYDOWN:
                self.pressed.add(event.key)

    def time(self) -> float:
        return pygame.time.get_ticks() / 1000.0

    def screen_size(self) -> Tuple[float, float]:
        width, height = pygame.display.get_surface().get_size()
        return float(width), float(height)

    def exit_pressed(self) -> bool:
        return self.quit_requested or self.exit_key in self.pressed

    def toggle_pressed(self) -> bool:
        return self.toggle_key in self.pressed

    def fast_forward_held(self) -> bool:
        return bool(pygame.key.get_pressed()[self.fast_forward_key])

    def draw_circle(self, center, radius: float, color) -> None:
        pygame.draw.circle(
            pygame.display.get_surface(),
            to_pygame_color(color),
            (float(center[0]), float(center[1])),
            float(radius),
        )

    def draw_line(self, start, end, width: float, color) -> None:
        pygame.draw.line(
            pygame.display.get_surface(),
            to_pygame_color(color),
            (float(start[0]), float(start[1])),
            (float(end[0]), float(end[1])),
            int(width),
        )

    def clear(self, color) -> None:
        pygame.display.get_surface().fill(to_pygame_color(color))

    def present(self) -> None:
        pygame.display.flip()
        self.clock.tick(FPS)
        self.poll()

    def exit(self) -> None:
        logger.info("Exit requested, shutting down")
        pygame.quit()
        sys.exit(0)


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.info("--- %s starting ---", WINDOW_TITLE)

    host = PygameHost()
    dish = Dish(*host.screen_size())
    try:
        run(dish, host)
    except KeyboardInterrupt:
        pygame.quit()
        sys.exit(0)


if __name__ == "__main__":
    main()
