# simulation.py
"""
Handles the per-frame motion of the particle backdrop.

This module defines the Simulation class, which advances every particle
by one constant-velocity step and wraps it around the surface edges.
There are no forces and no interactions between particles.
"""
import logging
import numpy as np
from numba import jit
from particle import ParticleSystem

# --- Data Contracts ---
#
# class Simulation:
#   - __init__(self, particles: ParticleSystem):
#     - Inputs:
#       - particles: A seeded ParticleSystem object.
#     - Outputs: None
#     - Side Effects: Stores a reference to the particle arrays.
#
#   - step(self, width: int, height: int) -> None:
#     - Inputs: the surface extents as of this frame.
#     - Outputs: None
#     - Side Effects: Modifies particles.positions in place.
#     - Invariants: Particle count remains constant. After the call every
#       x lies in [0, width] and every y lies in [0, height].


@jit(nopython=True)
def _advance_particles_numba(positions, velocities, width, height):
    """
    Numba-jitted Euler step with edge wrap-around.

    Each axis uses two one-sided tests instead of a modulo, so a particle
    that overshoots an edge re-enters at the opposite one. A coordinate
    exactly on a bound is left where it is.
    """
    particle_count = positions.shape[0]
    for i in range(particle_count):
        positions[i, 0] += velocities[i, 0]
        positions[i, 1] += velocities[i, 1]

        if positions[i, 0] < 0.0:
            positions[i, 0] = width
        if positions[i, 0] > width:
            positions[i, 0] = 0.0
        if positions[i, 1] < 0.0:
            positions[i, 1] = height
        if positions[i, 1] > height:
            positions[i, 1] = 0.0


class Simulation:
    """
    Advances the particle population one frame at a time.
    """
    def __init__(self, particles: ParticleSystem):
        self.particles = particles
        logging.info(
            f"Simulation initialized for {particles.particle_count} particles."
        )

    def step(self, width: int, height: int):
        """
        Executes one frame of motion against the current surface extents.
        """
        if self.particles.particle_count == 0:
            return
        _advance_particles_numba(
            self.particles.positions, self.particles.velocities,
            np.float64(width), np.float64(height)
        )

    def mean_speed(self) -> float:
        """Average particle speed in units per frame."""
        if self.particles.particle_count == 0:
            return 0.0
        return float(np.mean(np.linalg.norm(self.particles.velocities, axis=1)))
