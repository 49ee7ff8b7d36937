"""The dish: owns the bots, the wind and the wind traces."""
from __future__ import annotations

import logging
import random
from typing import List, Optional

import numpy as np

from .bot import Bot, vec2
from .config import BOT_LINE_COLOR, BOT_LINE_WIDTH, MAX_BOTS, MAX_TRACES, WIND_PUSH
from .host import Host
from .traces import TraceBuffer

logger = logging.getLogger(__name__)


def mutation_chance(population: int) -> float:
    # Integer log2; log2(1) is zero, so a lone bot always reproduces.
    if population <= 1:
        return 1.0
    return 1.0 / (population.bit_length() - 1)


class Dish:
    def __init__(
        self,
        width: float,
        height: float,
        rng: Optional[random.Random] = None,
        max_bots: int = MAX_BOTS,
        max_traces: int = MAX_TRACES,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.max_bots = max_bots
        self.dish_radius = min(width, height) / 2.0
        self.center = vec2(self.dish_radius, self.dish_radius)
        self.wind = vec2(0.0, 0.0)
        self.bots: List[Bot] = []
        self.traces = TraceBuffer(max_traces)
        self.bot_lines = False

    def update_wind(self, wind) -> None:
        self.wind = np.array(wind, dtype=np.float32)

    def check_keys(self, host: Host) -> None:
        if host.exit_pressed():
            host.exit()
        if host.toggle_pressed():
            self.bot_lines = not self.bot_lines
            logger.info("Velocity lines %s", "on" if self.bot_lines else "off")

    def step(self, host: Host) -> None:
        self.check_keys(host)

        width, height = host.screen_size()
        self.center = vec2(width / 2.0, height / 2.0)
        self.dish_radius = min(width, height) / 2.0

        self.update_bots(width, height)
        self.update_traces(width, height)

    def update_bots(self, width: float, height: float) -> None:
        if not self.bots:
            self.bots.append(Bot.seed(self.center))
            logger.debug("Dish empty, seeded a bot at (%.1f, %.1f)", *self.center)
            return

        chance = mutation_chance(len(self.bots))
        bots = self.bots
        culled = 0
        i = 0
        while i < len(bots):
            if not bots[i].inside(width, height):
                # Swap-remove: the last bot takes slot i and gets examined next.
                bots[i] = bots[-1]
                bots.pop()
                culled += 1
                continue

            if len(bots) < self.max_bots and self.rng.uniform(0.0, 1.0) < chance:
                bots.append(bots[i].mutate(self.rng))

            i += 1

        if culled:
            logger.debug("Culled %d bots outside the dish", culled)

        self.move_bots()

    def move_bots(self) -> None:
        # Both axes take the wind's x component.
        push = WIND_PUSH * (0.5 - float(self.wind[0]))
        drift = vec2(push, push)
        for bot in self.bots:
            bot.pos += bot.vel
            bot.pos += drift

    def random_point(self, width: float, height: float) -> np.ndarray:
        return vec2(self.rng.uniform(0.0, width), self.rng.uniform(0.0, height))

    def update_traces(self, width: float, height: float) -> None:
        self.traces.record(lambda: self.random_point(width, height), self.wind)
        self.traces.age_all()

    def draw(self, host: Host) -> None:
        offset = WIND_PUSH * (0.5 - self.wind)
        for bot in self.bots:
            host.draw_circle(bot.pos, bot.radius, bot.color)
            if self.bot_lines:
                host.draw_line(bot.pos, bot.pos + bot.vel + offset, BOT_LINE_WIDTH, BOT_LINE_COLOR)
        self.traces.render_all(host.draw_line)
