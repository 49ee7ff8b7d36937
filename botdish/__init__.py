"""Bots drifting, mutating and dying in a windy dish."""
from .bot import Bot
from .host import Host
from .dish import Dish, mutation_chance
from .frame import run, run_frame, wind_at
from .traces import Trace, TraceBuffer

__all__ = [
    "Bot",
    "Dish",
    "Host",
    "Trace",
    "TraceBuffer",
    "mutation_chance",
    "run",
    "run_frame",
    "wind_at",
]
__version__ = "0.1.0"
