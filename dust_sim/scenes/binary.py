"""Two stars side by side."""

from dust_sim.physics.universe import Universe
from dust_sim.scenes.base import Scene


class BinaryStars(Scene):
    """Two equal stars on the horizontal midline, a quarter in from each side."""
    
    def __init__(self, mass: float = 1000.0):
        """Initialize binary scene.
        
        Args:
            mass: Mass of each star
        """
        self.mass = mass
    
    @property
    def name(self) -> str:
        return "binary"
    
    def apply(self, universe: Universe):
        y = universe.height / 2
        universe.add_star(universe.width / 4, y, self.mass)
        universe.add_star(3 * universe.width / 4, y, self.mass)
