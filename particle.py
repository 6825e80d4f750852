# particle.py
"""
Manages the state of all particles in the backdrop.

This module defines the ParticleSystem class, which seeds the particle
population once from the initial surface extents and stores it in flat
NumPy arrays. The population has no behaviour of its own; the Simulation
mutates positions in place every frame.
"""
import logging
import numpy as np
from typing import Dict, Any, Optional
from constants import DENSITY_AREA, MAX_SPEED, RADIUS_MIN, RADIUS_MAX

# --- Data Contracts ---
#
# population_size(width: int, height: int) -> int:
#   - Outputs: floor(width * height / DENSITY_AREA), never negative.
#
# class ParticleSystem:
#   - __init__(self, params: Optional[Dict[str, Any]], width: int, height: int):
#     - Inputs:
#       - params: Dictionary of particle parameters from config.json.
#         - "seed": Optional[int] (None draws a fresh OS seed)
#         - "max_speed": float
#         - "radius_min": float
#         - "radius_max": float
#       - width: int, initial width of the drawing surface.
#       - height: int, initial height of the drawing surface.
#     - Outputs: None
#     - Side Effects: Initializes internal NumPy arrays for particle state.
#     - Invariants:
#       - self.positions is a NumPy array of shape (N, 2) of dtype float64.
#       - self.velocities is a NumPy array of shape (N, 2) of dtype float64.
#       - self.radii is a NumPy array of shape (N,) of dtype float64.
#       - N is fixed for the lifetime of the object.


def population_size(width: int, height: int) -> int:
    """Number of particles for a surface of the given extents."""
    if width <= 0 or height <= 0:
        return 0
    return int(width * height // DENSITY_AREA)


class ParticleSystem:
    """
    A container for all particles, managing their state via NumPy arrays.
    """
    def __init__(self, params: Optional[Dict[str, Any]], width: int, height: int):
        """
        Seeds the particle population.

        Args:
            params (Optional[Dict[str, Any]]): Particle parameters from config.
            width (int): The initial width of the drawing surface.
            height (int): The initial height of the drawing surface.
        """
        params = params if params is not None else {}
        self.seed = params.get('seed')
        self.max_speed = float(params.get('max_speed', MAX_SPEED))
        self.radius_min = float(params.get('radius_min', RADIUS_MIN))
        self.radius_max = float(params.get('radius_max', RADIUS_MAX))

        if self.max_speed < 0:
            msg = f"Configuration error: max_speed must be >= 0, got {self.max_speed}."
            logging.critical(msg)
            raise ValueError(msg)
        if not 0 < self.radius_min <= self.radius_max:
            msg = (
                f"Configuration error: radius range [{self.radius_min}, "
                f"{self.radius_max}) must be positive and ordered."
            )
            logging.critical(msg)
            raise ValueError(msg)

        # Every random draw goes through this generator so a fixed seed
        # reproduces the whole population.
        self.rng = np.random.default_rng(self.seed)

        self.particle_count = population_size(width, height)
        n = self.particle_count

        self.positions = self.rng.uniform(
            low=[0.0, 0.0],
            high=[max(width, 0), max(height, 0)],
            size=(n, 2)
        )
        self.velocities = self.rng.uniform(
            low=-self.max_speed,
            high=self.max_speed,
            size=(n, 2)
        )
        self.radii = self.rng.uniform(
            low=self.radius_min,
            high=self.radius_max,
            size=n
        )

        logging.info(
            f"ParticleSystem seeded with {n} particles "
            f"for a {width}x{height} surface."
        )
        logging.debug(
            f"Particle data arrays created. "
            f"Positions shape: {self.positions.shape}, "
            f"Velocities shape: {self.velocities.shape}, "
            f"Radii shape: {self.radii.shape}"
        )

    def __len__(self) -> int:
        return self.particle_count
