"""Per-frame driver tying a Dish to a host."""
from __future__ import annotations

import logging
import math
from typing import Tuple

from .config import BACKGROUND, STATS_INTERVAL, WIND_RATE
from .dish import Dish
from .host import Host

logger = logging.getLogger(__name__)


def wind_at(t: float) -> Tuple[float, float]:
    angle = t * WIND_RATE
    return math.cos(angle), math.sin(angle)


def run_frame(dish: Dish, host: Host) -> None:
    dish.update_wind(wind_at(host.time()))

    dish.step(host)
    # Fast-forward: simulate twice, draw once.
    if host.fast_forward_held():
        dish.step(host)

    host.clear(BACKGROUND)
    dish.draw(host)
    host.present()


def run(dish: Dish, host: Host) -> None:
    """Run frames until the host terminates the process."""
    frame = 0
    while True:
        run_frame(dish, host)
        frame += 1
        if frame % STATS_INTERVAL == 0:
            logger.debug("Frame %d: %d bots, %d traces", frame, len(dish.bots), len(dish.traces))
