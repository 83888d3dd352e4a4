"""Central black hole ringed by stars."""

import numpy as np
from dust_sim.physics.universe import Universe
from dust_sim.scenes.base import Scene


class Maelstrom(Scene):
    """A black hole at the centre with stars evenly spaced on a ring.
    
    The ring radius is given as a fraction of the smaller world dimension.
    """
    
    def __init__(
        self,
        black_hole_mass: float = 5000.0,
        n_stars: int = 6,
        star_mass: float = 500.0,
        ring_radius: float = 0.35
    ):
        self.black_hole_mass = black_hole_mass
        self.n_stars = max(0, int(n_stars))
        self.star_mass = star_mass
        self.ring_radius = ring_radius
    
    @property
    def name(self) -> str:
        return "maelstrom"
    
    def apply(self, universe: Universe):
        cx = universe.width / 2
        cy = universe.height / 2
        universe.add_black_hole(cx, cy, self.black_hole_mass)
        
        radius = self.ring_radius * min(universe.width, universe.height)
        angles = 2 * np.pi * np.arange(self.n_stars) / max(self.n_stars, 1)
        for theta in angles:
            universe.add_star(
                float(cx + radius * np.cos(theta)),
                float(cy + radius * np.sin(theta)),
                self.star_mass
            )
