"""The universe: dust particles pulled around by stars and black holes."""

import logging
from typing import List, Optional, Sequence, Tuple
import numpy as np
from dust_sim.physics.bodies import Particle, Star, BlackHole
from dust_sim.physics.forces import (
    G,
    STAR_SOFTENING_SQ,
    BLACK_HOLE_SOFTENING_SQ,
    CAPTURE_RADIUS_SQ,
    REMOVAL_MARK,
    star_forces,
    black_hole_forces,
)
from dust_sim.physics.integrators.base import Integrator
from dust_sim.physics.integrators.euler import SemiImplicitEulerIntegrator

logger = logging.getLogger(__name__)

REMOVAL_CUTOFF = -50.0  # particles with x <= this are dropped after a frame
DEBUG_LOG_PROBABILITY = 0.01
INITIAL_SPEED = 0.1  # initial vx, vy drawn from [-INITIAL_SPEED, INITIAL_SPEED)

__all__ = [
    "Universe",
    "G",
    "STAR_SOFTENING_SQ",
    "BLACK_HOLE_SOFTENING_SQ",
    "CAPTURE_RADIUS_SQ",
    "REMOVAL_MARK",
    "REMOVAL_CUTOFF",
    "DEBUG_LOG_PROBABILITY",
    "INITIAL_SPEED",
]


class Universe:
    """Simulation state container, advanced once per rendered frame.

    Holds the dust particles (as (n, 3) position and velocity arrays) plus
    the stars and black holes that attract them. The host calls
    :meth:`update` once per frame, may add bodies at any time, and pulls a
    flat :meth:`snapshot` for drawing.

    Particles are only ever removed (when a black hole captures them);
    stars and black holes are only ever added.
    """

    def __init__(
        self,
        width: float,
        height: float,
        particle_count: int,
        debug: bool = False,
        rng=None,
        logger: Optional[logging.Logger] = None
    ):
        """Create a universe filled with randomly placed dust.

        Args:
            width: World extent along x
            height: World extent along y
            particle_count: Number of particles (negative values give none)
            debug: Emit diagnostic log lines (never affects physics)
            rng: Random source with a ``random(size=None)`` method, e.g. a
                numpy Generator (default: fresh ``np.random.default_rng()``)
            logger: Logger for diagnostics (default: module logger)
        """
        self._setup(width, height, debug, rng, logger)

        n = max(0, int(particle_count))
        # Five draws per particle, in order: x, y, z, vx, vy
        draws = np.asarray(self.rng.random((n, 5)), dtype=float).reshape(n, 5)

        self._positions = np.empty((n, 3))
        self._positions[:, 0] = draws[:, 0] * self.width
        self._positions[:, 1] = draws[:, 1] * self.height
        self._positions[:, 2] = draws[:, 2]

        self._velocities = np.zeros((n, 3))
        self._velocities[:, 0] = (draws[:, 3] - 0.5) * 2.0 * INITIAL_SPEED
        self._velocities[:, 1] = (draws[:, 4] - 0.5) * 2.0 * INITIAL_SPEED

        self._announce()

    @classmethod
    def from_particles(
        cls,
        width: float,
        height: float,
        particles: Sequence[Particle],
        debug: bool = False,
        rng=None,
        logger: Optional[logging.Logger] = None
    ) -> "Universe":
        """Create a universe from explicitly placed particles.

        No random draws are made during construction.

        Args:
            width: World extent along x
            height: World extent along y
            particles: Particle records to copy in
            debug: Emit diagnostic log lines
            rng: Random source used for the debug log roll
            logger: Logger for diagnostics

        Returns:
            New Universe instance
        """
        universe = cls.__new__(cls)
        universe._setup(width, height, debug, rng, logger)

        n = len(particles)
        universe._positions = np.array([[p.x, p.y, p.z] for p in particles], dtype=float).reshape(n, 3)
        universe._velocities = np.array([[p.vx, p.vy, p.vz] for p in particles], dtype=float).reshape(n, 3)

        universe._announce()
        return universe

    def _setup(self, width, height, debug, rng, logger_):
        self._width = float(width)
        self._height = float(height)
        self.debug = bool(debug)
        self.rng = rng if rng is not None else np.random.default_rng()
        self.logger = logger_ if logger_ is not None else logger
        self.integrator: Integrator = SemiImplicitEulerIntegrator()
        self._stars: List[Star] = []
        self._black_holes: List[BlackHole] = []

    def _announce(self):
        if self.debug:
            self.logger.info(
                "Physics engine initialized in debug mode with %d particles (%gx%g).",
                self.n_particles, self._width, self._height
            )

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def n_particles(self) -> int:
        return int(self._positions.shape[0])

    @property
    def stars(self) -> Tuple[Star, ...]:
        return tuple(self._stars)

    @property
    def black_holes(self) -> Tuple[BlackHole, ...]:
        return tuple(self._black_holes)

    @property
    def particles(self) -> List[Particle]:
        """Copies of the current particles as records, in storage order."""
        return [
            Particle(float(p[0]), float(p[1]), float(p[2]), float(v[0]), float(v[1]), float(v[2]))
            for p, v in zip(self._positions, self._velocities)
        ]

    def update(self):
        """Advance the simulation by one frame.

        For every particle: accumulate star and black hole forces (possibly
        marking it captured), integrate, and reflect off the bounds. Then
        drop every particle whose x ended at or below the removal cutoff.

        A captured particle still gets its velocity applied after being
        marked, so it survives the frame if that carries x back above the
        cutoff.
        """
        positions = self._positions

        fx, fy = star_forces(positions, self._stars)
        # May overwrite x of captured particles in place
        bx, by = black_hole_forces(positions, self._black_holes)
        fx += bx
        fy += by

        positions, velocities = self.integrator.step(positions, self._velocities, (fx, fy))

        # Reflect off the walls; positions are left where they are
        out_x = (positions[:, 0] < 0.0) | (positions[:, 0] > self._width)
        out_y = (positions[:, 1] < 0.0) | (positions[:, 1] > self._height)
        velocities[out_x, 0] *= -1.0
        velocities[out_y, 1] *= -1.0

        keep = positions[:, 0] > REMOVAL_CUTOFF
        self._positions = positions[keep]
        self._velocities = velocities[keep]

        if self.debug and self.rng.random() < DEBUG_LOG_PROBABILITY:
            self.logger.info("Simulating %d particles.", self.n_particles)

    def snapshot(self) -> np.ndarray:
        """Return particle positions as a flat float32 buffer.

        Returns:
            Array of length 3 * n ordered x0, y0, z0, x1, y1, z1, ...
            The array is a fresh copy; mutating it does not touch the universe.
        """
        return np.ascontiguousarray(self._positions, dtype=np.float32).ravel().copy()

    def get_state(self):
        """Get copies of the current particle state.

        Returns:
            Tuple of (positions, velocities) as (n, 3) numpy arrays
        """
        return self._positions.copy(), self._velocities.copy()

    def add_star(self, x: float, y: float, mass: float):
        """Add a star. Mass is not validated."""
        self._stars.append(Star(x, y, mass, age=0, ignited=True))

    def add_black_hole(self, x: float, y: float, mass: float):
        """Add a black hole. Mass is not validated."""
        self._black_holes.append(BlackHole(x, y, mass))

    def __repr__(self) -> str:
        return (
            f"Universe(width={self._width}, height={self._height}, particles={self.n_particles}, "
            f"stars={len(self._stars)}, black_holes={len(self._black_holes)}, debug={self.debug})"
        )
