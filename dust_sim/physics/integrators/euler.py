"""Semi-implicit (symplectic) Euler integrator with a fixed one-frame step."""

from typing import Tuple
import numpy as np
from dust_sim.physics.integrators.base import Integrator


class SemiImplicitEulerIntegrator(Integrator):
    """Semi-implicit Euler: v_new = v + f, r_new = r + v_new.
    
    Forces act directly as per-frame velocity increments (dust is massless,
    the step is one frame). Only the x and y columns move; depth stays put.
    """
    
    @property
    def name(self) -> str:
        return "semi_implicit_euler"
    
    @property
    def order(self) -> int:
        return 1
    
    def step(self, positions, velocities, forces) -> Tuple:
        """Apply one frame of integration.
        
        Args:
            positions: Current positions (n, 3)
            velocities: Current velocities (n, 3)
            forces: Tuple of force components (fx, fy)
            
        Returns:
            Tuple of (new_positions, new_velocities)
        """
        fx, fy = forces
        
        new_velocities = np.array(velocities, dtype=float, copy=True)
        new_velocities[:, 0] += fx
        new_velocities[:, 1] += fy
        
        # Position uses the updated velocity
        new_positions = np.array(positions, dtype=float, copy=True)
        new_positions[:, 0] += new_velocities[:, 0]
        new_positions[:, 1] += new_velocities[:, 1]
        
        return new_positions, new_velocities
