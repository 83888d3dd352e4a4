"""Force accumulation from stars and black holes on massless dust.

Both kinds of body pull with the same inverse-square law ``G * mass / d^2``
directed along the separation vector. Each has its own softening distance
below which the pull is dropped, and black holes additionally swallow
particles that come within the capture radius.
"""

from typing import Tuple
import numpy as np

G = 0.1  # Gravitational constant (frame units)
STAR_SOFTENING_SQ = 10.0
BLACK_HOLE_SOFTENING_SQ = 25.0
CAPTURE_RADIUS_SQ = 1.0
REMOVAL_MARK = -100.0  # x written into captured particles


def _as_bodies(bodies) -> np.ndarray:
    """Coerce body records or an (m, 3) array into an (m, 3) float array."""
    if isinstance(bodies, np.ndarray):
        return bodies.reshape(-1, 3).astype(float)
    return np.array([[b.x, b.y, b.mass] for b in bodies], dtype=float).reshape(-1, 3)


def star_forces(positions: np.ndarray, stars, softening_sq: float = STAR_SOFTENING_SQ) -> Tuple[np.ndarray, np.ndarray]:
    """Compute the pull of every star on every particle.
    
    Stars closer than the softening distance (d^2 <= softening_sq)
    contribute nothing.
    
    Args:
        positions: Particle positions (n, 2) or (n, 3); only x and y are read
        stars: Sequence of Star records or an (m, 3) array of x, y, mass
        softening_sq: Squared-distance threshold for the force to apply
        
    Returns:
        Tuple of (fx, fy), each of shape (n,)
    """
    n = positions.shape[0]
    fx = np.zeros(n)
    fy = np.zeros(n)
    
    bodies = _as_bodies(stars)
    if n == 0 or bodies.shape[0] == 0:
        return fx, fy
    
    # Separation r_ij = star_j - particle_i, shape (n, m)
    dx = bodies[np.newaxis, :, 0] - positions[:, 0, np.newaxis]
    dy = bodies[np.newaxis, :, 1] - positions[:, 1, np.newaxis]
    dist_sq = dx * dx + dy * dy
    
    active = dist_sq > softening_sq
    safe_sq = np.where(active, dist_sq, 1.0)
    dist = np.sqrt(safe_sq)
    force = np.where(active, G * bodies[np.newaxis, :, 2] / safe_sq, 0.0)
    
    fx += np.sum(force * dx / dist, axis=1)
    fy += np.sum(force * dy / dist, axis=1)
    return fx, fy


def black_hole_forces(
    positions: np.ndarray,
    black_holes,
    softening_sq: float = BLACK_HOLE_SOFTENING_SQ,
    capture_sq: float = CAPTURE_RADIUS_SQ,
    removal_mark: float = REMOVAL_MARK
) -> Tuple[np.ndarray, np.ndarray]:
    """Compute black hole pull and mark captured particles.
    
    Black holes are visited in insertion order. Beyond the softening
    distance they attract like stars; inside the capture radius the
    particle's x is overwritten with ``removal_mark`` *in place*. The band
    between the two radii does nothing at all. Because the mark is written
    immediately, later black holes see the marked x when measuring distance.
    
    Args:
        positions: Particle positions (n, 2) or (n, 3), modified in place
        black_holes: Sequence of BlackHole records or an (m, 3) array
        softening_sq: Squared distance beyond which the pull applies
        capture_sq: Squared distance below which particles are captured
        removal_mark: Value written into x of captured particles
        
    Returns:
        Tuple of (fx, fy), each of shape (n,)
    """
    n = positions.shape[0]
    fx = np.zeros(n)
    fy = np.zeros(n)
    
    bodies = _as_bodies(black_holes)
    if n == 0:
        return fx, fy
    
    for bx, by, mass in bodies:
        dx = bx - positions[:, 0]
        dy = by - positions[:, 1]
        dist_sq = dx * dx + dy * dy
        
        pull = dist_sq > softening_sq
        if np.any(pull):
            d_sq = dist_sq[pull]
            dist = np.sqrt(d_sq)
            force = G * mass / d_sq
            fx[pull] += force * dx[pull] / dist
            fy[pull] += force * dy[pull] / dist
        
        captured = dist_sq < capture_sq
        positions[captured, 0] = removal_mark
    
    return fx, fy
