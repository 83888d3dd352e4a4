"""Reproducibility utilities for deterministic simulations."""

import numpy as np
from typing import Optional


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create the random source handed to a Universe or scene.
    
    Args:
        seed: Random seed (None for fresh OS entropy)
        
    Returns:
        numpy Generator
    """
    return np.random.default_rng(seed)
