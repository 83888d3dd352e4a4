"""Randomly scattered star cluster."""

import numpy as np
from typing import Optional
from dust_sim.physics.universe import Universe
from dust_sim.scenes.base import Scene


class StarCluster(Scene):
    """Stars placed uniformly at random with uniformly random masses."""
    
    def __init__(
        self,
        n_stars: int = 8,
        mass_min: float = 200.0,
        mass_max: float = 2000.0,
        seed: Optional[int] = None,
        rng=None
    ):
        """Initialize cluster scene.
        
        Args:
            n_stars: Number of stars
            mass_min: Lower bound of the star mass range
            mass_max: Upper bound (exclusive) of the star mass range
            seed: Random seed, used when no rng is given
            rng: numpy Generator to draw from
        """
        self.n_stars = max(0, int(n_stars))
        self.mass_min = mass_min
        self.mass_max = mass_max
        self.seed = seed
        self.rng = rng if rng is not None else np.random.default_rng(seed)
    
    @property
    def name(self) -> str:
        return "cluster"
    
    def apply(self, universe: Universe):
        xs = self.rng.uniform(0.0, universe.width, self.n_stars)
        ys = self.rng.uniform(0.0, universe.height, self.n_stars)
        masses = self.rng.uniform(self.mass_min, self.mass_max, self.n_stars)
        for x, y, mass in zip(xs, ys, masses):
            universe.add_star(float(x), float(y), float(mass))
