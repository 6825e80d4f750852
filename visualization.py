# visualization.py
"""
Hosts the particle backdrop in a Pygame window.
"""
import logging
import pygame
from typing import Dict, Any, Optional, Tuple
from constants import FPS, FULLSCREEN, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from surface import SurfaceManager
from theme import ThemeManager

# Forward reference for type hinting to avoid circular import
from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from engine import ParticleBackground


# --- Data Contracts ---
#
# class Visualizer:
#   - __init__(self, theme: ThemeManager, params: Optional[dict] = None):
#     - Inputs:
#       - theme: supplies the background color and reacts to the toggle key.
#       - params: the "visualization" section of config.json
#         ("fullscreen", "window_width", "window_height", "fps").
#     - Side Effects: Initializes Pygame and creates the display window.
#
#   - handle_events(self, engine: "ParticleBackground") -> bool:
#     - Outputs: False once the window is closed or ESC is pressed.
#     - Side Effects: forwards window resizes to engine.on_resize() and
#       toggles the theme on the T key.
#
#   - present(self, surface: SurfaceManager) -> None:
#     - Side Effects: composites the particle layer over the background,
#       flips the display and waits for the next frame slot.

class Visualizer:
    """
    The window the backdrop lives in, and its frame clock.
    """
    def __init__(self, theme: ThemeManager, params: Optional[Dict[str, Any]] = None):
        params = params if params is not None else {}
        self.theme = theme
        self.fps = int(params.get('fps', FPS))

        pygame.init()

        if params.get('fullscreen', FULLSCREEN):
            display_info = pygame.display.Info()
            width, height = display_info.current_w, display_info.current_h
            self.screen = pygame.display.set_mode((width, height), pygame.FULLSCREEN)
        else:
            width = int(params.get('window_width', WINDOW_WIDTH))
            height = int(params.get('window_height', WINDOW_HEIGHT))
            self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)

        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()

        logging.info(f"Visualizer initialized with Pygame display ({width}x{height}).")

    def viewport(self) -> Tuple[int, int]:
        """Current inner size of the window."""
        return pygame.display.get_surface().get_size()

    def handle_events(self, engine: "ParticleBackground") -> bool:
        """
        Drains the event queue.

        Returns:
            bool: False if the window should close, True otherwise.
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logging.info("Quit event received. Shutting down visualizer.")
                return False

            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    logging.info("ESC key pressed. Shutting down visualizer.")
                    return False
                if event.key == pygame.K_t:
                    self.theme.toggle_theme()

            if event.type == pygame.VIDEORESIZE:
                engine.on_resize()
        return True

    def present(self, surface: SurfaceManager):
        """Composites the particle layer and waits for the next frame."""
        self.screen = pygame.display.get_surface()
        self.screen.fill(self.theme.background_color())
        self.screen.blit(surface.layer, (0, 0))
        pygame.display.flip()
        self.clock.tick(self.fps)

    def close(self):
        """Shuts down Pygame."""
        pygame.quit()
