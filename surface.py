# surface.py
"""
Owns the full-window drawing surface the particles are painted on.

The surface is an off-screen, per-pixel-alpha pygame Surface kept at the
viewport's size. The host composites it over the background at low opacity
and never routes input to it. This module knows nothing about particles.
"""
import logging
import pygame
from typing import Callable, Optional, Tuple
from constants import SURFACE_OPACITY
from theme import ThemeManager

# --- Data Contracts ---
#
# class SurfaceManager:
#   - __init__(self, viewport: Callable[[], Tuple[int, int]], theme: ThemeManager,
#              opacity: float = SURFACE_OPACITY):
#     - Inputs:
#       - viewport: returns the host's current inner (width, height).
#       - theme: source of the accent color.
#       - opacity: 0.0-1.0 alpha the layer is composited with.
#     - Side Effects: Allocates the layer at the current viewport size.
#
#   - resize_surface(self) -> bool:
#     - Side Effects: Re-reads the viewport. If the size changed, the layer
#       is reallocated (which discards painted content).
#     - Outputs: True if the size changed.
#     - Invariants: (width, height) equals the last viewport read, both >= 0.


class SurfaceManager:
    """
    The drawing surface and its 2D drawing operations.
    """
    def __init__(
        self,
        viewport: Callable[[], Tuple[int, int]],
        theme: ThemeManager,
        opacity: float = SURFACE_OPACITY,
    ):
        if not 0.0 <= opacity <= 1.0:
            msg = f"Configuration error: surface opacity must be in [0, 1], got {opacity}."
            logging.critical(msg)
            raise ValueError(msg)

        self.viewport = viewport
        self.theme = theme
        self.opacity = opacity
        self.width = 0
        self.height = 0
        self.layer: Optional[pygame.Surface] = None

        self.resize_surface()
        logging.info(
            f"Drawing surface created ({self.width}x{self.height}, "
            f"opacity {self.opacity:.2f})."
        )

    def resize_surface(self) -> bool:
        """Matches the layer to the current viewport size."""
        width, height = self.viewport()
        width, height = max(int(width), 0), max(int(height), 0)

        if self.layer is not None and (width, height) == (self.width, self.height):
            logging.debug(f"Resize to {width}x{height} ignored; size unchanged.")
            return False

        self.layer = pygame.Surface((width, height), pygame.SRCALPHA)
        self.layer.set_alpha(round(self.opacity * 255))
        self.width, self.height = width, height
        logging.debug(f"Drawing surface resized to {width}x{height}.")
        return True

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def clear(self):
        self.layer.fill((0, 0, 0, 0))

    def draw_circle(self, x: float, y: float, radius: float, color: pygame.Color):
        pygame.draw.circle(self.layer, color, (x, y), radius)

    def accent_color(self) -> pygame.Color:
        """Current theme accent, resolved on every call."""
        return self.theme.accent_color()
