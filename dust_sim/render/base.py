"""Base renderer interface."""

from abc import ABC, abstractmethod
from typing import Sequence
import numpy as np


def snapshot_to_points(snapshot) -> np.ndarray:
    """Reshape a flat x, y, z snapshot buffer into an (n, 3) array.
    
    Args:
        snapshot: Flat sequence of length 3 * n
        
    Returns:
        Array of shape (n, 3)
    """
    data = np.asarray(snapshot, dtype=float)
    if data.size % 3 != 0:
        raise ValueError(f"Snapshot length {data.size} is not a multiple of 3")
    return data.reshape(-1, 3)


class Renderer(ABC):
    """Abstract base class for renderers."""
    
    @abstractmethod
    def render(self, snapshot, stars: Sequence = (), black_holes: Sequence = ()):
        """Render current frame.
        
        Args:
            snapshot: Flat particle buffer from Universe.snapshot()
            stars: Star records to draw
            black_holes: BlackHole records to draw
        """
        pass
    
    @abstractmethod
    def capture_frame(self) -> np.ndarray:
        """Capture current frame as image array.
        
        Returns:
            Image array (H, W, 3) uint8
        """
        pass
    
    @abstractmethod
    def clear(self):
        """Clear the renderer."""
        pass
    
    @abstractmethod
    def close(self):
        """Close the renderer."""
        pass
