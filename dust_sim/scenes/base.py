"""Base class for scene layouts."""

from abc import ABC, abstractmethod
from dust_sim.physics.universe import Universe


class Scene(ABC):
    """Abstract base class for scenes.
    
    A scene places stars and black holes into an already constructed
    universe. It never touches the dust.
    """
    
    @abstractmethod
    def apply(self, universe: Universe):
        """Add this scene's bodies to the universe.
        
        Args:
            universe: Universe to populate
        """
        pass
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this scene."""
        pass
