"""Tunable constants for the dish simulation."""

# Window configuration
WINDOW_TITLE = "Bots in a Dish"
FULLSCREEN = True
WINDOWED_SIZE = (1280, 720)
BACKGROUND = (0.1, 0.1, 0.1, 1.0)
FPS = 60

# Population parameters
MAX_BOTS = 500
SEED_RADIUS = 5.0
SEED_COLOR = (0.5, 0.5, 0.5, 1.0)
MIN_RADIUS = 2.5
MAX_RADIUS = 15.0
COLOR_NOISE = 0.02
VELOCITY_NOISE = 1.0
RADIUS_NOISE = 1.0
WIND_PUSH = 10.0

# Wind traces
MAX_TRACES = 100
TRACE_DRIFT = 3.0
TRACE_HALF_LENGTH = 2.5
TRACE_WIDTH = 2.0
TRACE_COLOR = (1.0, 1.0, 1.0, 1.0)

# Velocity indicator lines
BOT_LINE_WIDTH = 2.0
BOT_LINE_COLOR = (155 / 255, 0.0, 1.0, 1.0)

# Key bindings, as pygame key names
EXIT_KEY = "escape"
TOGGLE_KEY = "space"
FAST_FORWARD_KEY = "return"

# Wind rotates around the unit circle at this angular rate (rad/s)
WIND_RATE = 0.125

# Logging
LOG_LEVEL = "INFO"
STATS_INTERVAL = 600
