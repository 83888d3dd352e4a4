"""Bare dust cloud."""

from dust_sim.physics.universe import Universe
from dust_sim.scenes.base import Scene


class DustCloud(Scene):
    """Dust only; bodies are expected to be added later by the host."""
    
    @property
    def name(self) -> str:
        return "dust"
    
    def apply(self, universe: Universe):
        pass
