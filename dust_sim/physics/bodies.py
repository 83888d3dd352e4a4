"""Passive data records for the bodies in a universe."""

from dataclasses import dataclass


@dataclass
class Particle:
    """A massless dust particle.
    
    ``z`` is a depth value in [0, 1) used only for parallax when rendering;
    physics never reads it and ``vz`` is never updated.
    """
    x: float
    y: float
    z: float
    vx: float
    vy: float
    vz: float = 0.0


@dataclass
class Star:
    """A star exerting gravitational pull on dust.
    
    ``age`` and ``ignited`` are carried along but not used by the force law.
    """
    x: float
    y: float
    mass: float
    age: int = 0
    ignited: bool = True


@dataclass
class BlackHole:
    """A black hole: attracts at range, swallows dust up close."""
    x: float
    y: float
    mass: float
