"""Global constants for the application."""

# Engine timing
CYCLE_SPEED = 280  # Base tick rate that cycle rates are divided by
DAY_SECONDS = 86400  # Seconds in a day, time-of-day markers live in [0, DAY_SECONDS)

# Animation settings
DEFAULT_FPS = 30  # Default frames per second for animation
DEFAULT_DURATION = 10  # Seconds of animation rendered when no frame limit is given
DEFAULT_SCALE = 2  # Pixel scale factor for rendered frames

# Pillow "P" images hold at most this many palette entries
MAX_INDEXED_COLORS = 256
