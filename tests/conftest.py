import pytest


class FixedRandom:
    """Uniform source whose underlying [0, 1) draw is always `value`."""

    def __init__(self, value):
        self.value = value

    def uniform(self, a, b):
        return a + (b - a) * self.value


class FakeHost:
    def __init__(self, width=800.0, height=600.0):
        self.width = width
        self.height = height
        self.now = 0.0
        self.exit_key = False
        self.toggle_key = False
        self.fast_forward = False
        self.circles = []
        self.lines = []
        self.clears = 0
        self.presents = 0

    def time(self):
        return self.now

    def screen_size(self):
        return self.width, self.height

    def exit_pressed(self):
        return self.exit_key

    def toggle_pressed(self):
        return self.toggle_key

    def fast_forward_held(self):
        return self.fast_forward

    def draw_circle(self, center, radius, color):
        self.circles.append((tuple(center), radius, color))

    def draw_line(self, start, end, width, color):
        self.lines.append((tuple(start), tuple(end), width, color))

    def clear(self, color):
        self.clears += 1

    def present(self):
        self.presents += 1

    def exit(self):
        raise SystemExit(0)


@pytest.fixture
def host():
    return FakeHost()


@pytest.fixture
def fixed_random():
    return FixedRandom
