"""Frame integrators for the dust simulation."""

from dust_sim.physics.integrators.base import Integrator
from dust_sim.physics.integrators.euler import SemiImplicitEulerIntegrator

__all__ = ["Integrator", "SemiImplicitEulerIntegrator"]
