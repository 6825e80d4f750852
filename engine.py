# engine.py
"""
The particle backdrop's render loop.

ParticleBackground is the single animation engine value. It owns the drawing
surface and the particle population, and renders one frame per call to
render_frame(). run() drives it against a host that delivers events, presents
frames and paces the loop to the display refresh.
"""
import logging
from typing import Dict, Any, Optional
from constants import LOG_THROTTLE_FRAMES
from particle import ParticleSystem
from simulation import Simulation
from surface import SurfaceManager

# Forward reference for type hinting to avoid a pygame display import here
from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from visualization import Visualizer

# --- Data Contracts ---
#
# class ParticleBackground:
#   - __init__(self, surface: SurfaceManager, params: Optional[Dict[str, Any]] = None):
#     - Inputs:
#       - surface: a created SurfaceManager. Its extents at this moment fix
#         the particle count for the engine's lifetime.
#       - params: the "particles" section of config.json.
#
#   - on_resize(self) -> None:
#     - Side Effects: resizes the surface. Never adds or removes particles.
#
#   - render_frame(self) -> None:
#     - Side Effects: moves every particle one step, clears the surface and
#       paints each particle in the accent color read for this frame.
#
#   - run(self, host: "Visualizer", max_frames: Optional[int] = None,
#         log_throttle: int = LOG_THROTTLE_FRAMES) -> int:
#     - Inputs:
#       - host: object with handle_events(engine) -> bool and present(surface).
#       - max_frames: stop after this many frames; None or 0 runs until the
#         host reports teardown.
#     - Outputs: the number of frames rendered by this call.


class ParticleBackground:
    """
    Animates a field of drifting particles behind the window content.
    """
    def __init__(self, surface: SurfaceManager, params: Optional[Dict[str, Any]] = None):
        self.surface = surface
        self.particles = ParticleSystem(params, surface.width, surface.height)
        self.simulation = Simulation(self.particles)
        self.frame_count = 0

    def on_resize(self):
        if self.surface.resize_surface():
            logging.info(
                f"Surface resized to {self.surface.size}; "
                f"keeping {self.particles.particle_count} particles."
            )

    def render_frame(self):
        """
        Updates and paints one frame.
        """
        surface = self.surface
        particles = self.particles

        self.simulation.step(surface.width, surface.height)

        surface.clear()
        color = surface.accent_color()
        positions = particles.positions
        radii = particles.radii
        for i in range(particles.particle_count):
            surface.draw_circle(positions[i, 0], positions[i, 1], radii[i], color)

        self.frame_count += 1

    def run(
        self,
        host: "Visualizer",
        max_frames: Optional[int] = None,
        log_throttle: int = LOG_THROTTLE_FRAMES,
    ) -> int:
        """
        Renders frames until the host is torn down or max_frames is reached.
        """
        frames = 0
        logging.info("Render loop started.")
        while host.handle_events(self):
            self.render_frame()
            host.present(self.surface)
            frames += 1

            if log_throttle and frames % log_throttle == 0:
                logging.info(f"Rendered frame {self.frame_count}")
                logging.debug(
                    f"Frame {self.frame_count} | Mean speed: {self.simulation.mean_speed():.4f} | "
                    f"Surface: {self.surface.size}"
                )

            if max_frames and frames >= max_frames:
                logging.info(f"Reached max_frames ({max_frames}). Stopping render loop.")
                break
        logging.info(f"Render loop finished after {frames} frames.")
        return frames
