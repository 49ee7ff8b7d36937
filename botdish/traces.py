"""Drifting wind marks that visualise recent wind direction."""
from __future__ import annotations

from typing import Callable, Iterator, List

import numpy as np

from .config import MAX_TRACES, TRACE_COLOR, TRACE_DRIFT, TRACE_HALF_LENGTH, TRACE_WIDTH


class Trace:
    def __init__(self, origin: np.ndarray, direction: np.ndarray) -> None:
        self.origin = np.array(origin, dtype=np.float32)
        self.direction = np.array(direction, dtype=np.float32)

    def update(self) -> None:
        self.origin -= self.direction * TRACE_DRIFT

    def segment(self):
        start = self.origin - self.direction * TRACE_HALF_LENGTH
        end = self.origin + self.direction * TRACE_HALF_LENGTH
        return start, end


class TraceBuffer:
    """Oldest-first list of traces holding at most `capacity` entries."""

    def __init__(self, capacity: int = MAX_TRACES) -> None:
        self.capacity = capacity
        self._traces: List[Trace] = []

    def __len__(self) -> int:
        return len(self._traces)

    def __iter__(self) -> Iterator[Trace]:
        return iter(self._traces)

    def __getitem__(self, index: int) -> Trace:
        return self._traces[index]

    def record(self, origin_sampler: Callable[[], np.ndarray], wind: np.ndarray) -> None:
        self._traces.append(Trace(origin_sampler(), wind))
        if len(self._traces) > self.capacity:
            self._traces.pop(0)

    def age_all(self) -> None:
        for trace in self._traces:
            trace.update()

    def render_all(self, draw_line: Callable) -> None:
        for trace in self._traces:
            start, end = trace.segment()
            draw_line(start, end, TRACE_WIDTH, TRACE_COLOR)
