from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .config import (
    COLOR_NOISE,
    MAX_RADIUS,
    MIN_RADIUS,
    RADIUS_NOISE,
    SEED_COLOR,
    SEED_RADIUS,
    VELOCITY_NOISE,
)


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def vec2(x: float, y: float) -> np.ndarray:
    return np.array([x, y], dtype=np.float32)


@dataclass(eq=False)
class Bot:
    radius: float
    color: Tuple[float, float, float, float]
    pos: np.ndarray
    vel: np.ndarray

    @classmethod
    def seed(cls, center: np.ndarray) -> "Bot":
        """The gray ancestor placed in an empty dish."""
        return cls(
            radius=SEED_RADIUS,
            color=SEED_COLOR,
            pos=np.array(center, dtype=np.float32),
            vel=vec2(0.0, 0.0),
        )

    def mutate(self, rng) -> "Bot":
        r, g, b, a = self.color
        color = (
            clamp(r + rng.uniform(-COLOR_NOISE, COLOR_NOISE), 0.0, 1.0),
            clamp(g + rng.uniform(-COLOR_NOISE, COLOR_NOISE), 0.0, 1.0),
            clamp(b + rng.uniform(-COLOR_NOISE, COLOR_NOISE), 0.0, 1.0),
            a,
        )

        vel = self.vel.copy()
        vel[0] += rng.uniform(-VELOCITY_NOISE, VELOCITY_NOISE)
        vel[1] += rng.uniform(-VELOCITY_NOISE, VELOCITY_NOISE)

        radius = clamp(self.radius + rng.uniform(-RADIUS_NOISE, RADIUS_NOISE), MIN_RADIUS, MAX_RADIUS)

        return Bot(radius=radius, color=color, pos=self.pos.copy(), vel=vel)

    def inside(self, width: float, height: float) -> bool:
        """True while the bot lies within [0, width) x [0, height)."""
        cell = np.floor(self.pos / np.array([width, height], dtype=np.float32))
        return bool(cell[0] == 0.0 and cell[1] == 0.0)
