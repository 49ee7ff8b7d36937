"""The platform services a Dish and the frame driver rely on."""
from __future__ import annotations

from typing import Protocol, Sequence, Tuple

Color = Tuple[float, float, float, float]


class Host(Protocol):
    def time(self) -> float: ...

    def screen_size(self) -> Tuple[float, float]: ...

    def exit_pressed(self) -> bool: ...

    def toggle_pressed(self) -> bool: ...

    def fast_forward_held(self) -> bool: ...

    def draw_circle(self, center: Sequence[float], radius: float, color: Color) -> None: ...

    def draw_line(self, start: Sequence[float], end: Sequence[float], width: float, color: Color) -> None: ...

    def clear(self, color: Color) -> None: ...

    def present(self) -> None: ...

    def exit(self) -> None: ...
