"""Abstract base class for frame integrators."""

from abc import ABC, abstractmethod
from typing import Tuple


class Integrator(ABC):
    """Abstract interface for fixed-step integrators."""
    
    @abstractmethod
    def step(self, positions, velocities, forces) -> Tuple:
        """Advance the particle state by one frame.
        
        Args:
            positions: Array of shape (n, 3) holding x, y, z
            velocities: Array of shape (n, 3) holding vx, vy, vz
            forces: Tuple of per-particle force components (fx, fy)
            
        Returns:
            Tuple of (new_positions, new_velocities)
        """
        pass
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this integrator."""
        pass
    
    @property
    @abstractmethod
    def order(self) -> int:
        """Return the order of accuracy."""
        pass
