"""Physics engine for the dust simulation."""

from dust_sim.physics.bodies import Particle, Star, BlackHole
from dust_sim.physics.universe import Universe

__all__ = ["Particle", "Star", "BlackHole", "Universe"]
