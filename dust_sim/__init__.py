"""
Dust Simulator - massless dust drifting under stars and black holes.

Features:
- Per-frame update driven by an external host (render loop, CLI)
- Stars and black holes added at any time
- Flat float32 snapshots for rendering
- Scene layouts, matplotlib view and a CLI host
"""

__version__ = "0.1.0"

from dust_sim.physics.universe import Universe
from dust_sim.physics.bodies import Particle, Star, BlackHole

__all__ = [
    "Universe",
    "Particle",
    "Star",
    "BlackHole",
]
