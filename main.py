# main.py
"""
Main entry point for the particle backdrop.

This script orchestrates the whole lifecycle:
1. Loads configuration from `config.json`.
2. Initializes the logging system.
3. Opens the window, creates the drawing surface and seeds the particles.
4. Runs the render loop until the window is closed.
5. Handles clean shutdown.
"""
import logging
import sys
from utils import setup_logging, load_config, config_section
import cProfile
import pstats
import io

def main(config_path: str = 'config.json'):
    """
    Runs the backdrop until the window closes.
    """
    # Logging is not set up yet, so we use a print for this one error.
    try:
        config = load_config(config_path)
        particle_params = config_section(config, 'particles')
        vis_params = config_section(config, 'visualization')
        theme_params = config_section(config, 'theme')
        run_params = config_section(config, 'run_control')
    except (OSError, ValueError) as e:
        print(f"FATAL: Could not load {config_path}. Error: {e}")
        return

    setup_logging(config)

    logging.info("--- Particle Backdrop Starting ---")

    from constants import DEFAULT_THEME, LOG_THROTTLE_FRAMES, SURFACE_OPACITY
    from theme import ThemeManager
    from visualization import Visualizer
    from surface import SurfaceManager
    from engine import ParticleBackground

    # --- Component Initialization ---
    # 1. The theme comes first; the window and the surface both read it.
    theme = ThemeManager(
        palettes=theme_params.get('palettes'),
        state_file=theme_params.get('state_file'),
        default_theme=theme_params.get('default', DEFAULT_THEME)
    )

    # 2. The window defines the viewport.
    visualizer = Visualizer(theme, vis_params)
    profiler = cProfile.Profile()

    try:
        # 3. The surface is sized from the viewport, and the particles from the surface.
        surface = SurfaceManager(
            visualizer.viewport,
            theme,
            opacity=vis_params.get('surface_opacity', SURFACE_OPACITY)
        )
        engine = ParticleBackground(surface, particle_params)

        max_frames = run_params.get('max_frames', 0)
        log_throttle = run_params.get('log_throttle_frames', LOG_THROTTLE_FRAMES)

        profiler.enable()
        try:
            engine.run(visualizer, max_frames=max_frames, log_throttle=log_throttle)
        finally:
            profiler.disable()
    finally:
        visualizer.close()

    # --- Performance Profile Output ---
    logging.info("--- Performance Profile ---")
    s = io.StringIO()
    # Sort by cumulative time spent in the function
    stats = pstats.Stats(profiler, stream=s).sort_stats('cumtime')
    stats.print_stats(20)
    logging.info(f"\n{s.getvalue()}")

    logging.info("--- Particle Backdrop Shutting Down ---")


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else 'config.json')
