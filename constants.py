# constants.py
"""
Application-level constants.

These values are static and do not change between runs. They cover the
particle field's density and seeding ranges, the drawing surface's opacity,
window defaults and the built-in theme palettes. Anything meant to be tuned
per run lives in config.json instead.
"""

# --- Particle Population ---
# Viewport area (in pixels) that yields one particle.
DENSITY_AREA = 10000
# vx and vy are each drawn from [-MAX_SPEED, MAX_SPEED) units per frame.
MAX_SPEED = 0.25
# Radius is drawn from [RADIUS_MIN, RADIUS_MAX).
RADIUS_MIN = 1.0
RADIUS_MAX = 3.0

# --- Surface ---
# The particle layer reads as an ambient texture, not foreground content.
SURFACE_OPACITY = 0.1

# --- Window ---
WINDOW_TITLE = "Particle Backdrop"
FULLSCREEN = False
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
FPS = 60

# --- Run Control ---
LOG_THROTTLE_FRAMES = 600

# --- Themes ---
DEFAULT_THEME = "dark"
THEME_PALETTES = {
    "dark": {
        "background": (13, 13, 13),
        "accent_primary": (96, 165, 250),   # Sky Blue
    },
    "light": {
        "background": (250, 250, 250),
        "accent_primary": (37, 99, 235),    # Royal Blue
    },
}
