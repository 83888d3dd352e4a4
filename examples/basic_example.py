"""Basic example of driving the dust simulator from a host loop."""

from dust_sim import Universe
from dust_sim.scenes import Maelstrom
from dust_sim.utils import make_rng, setup_logging

def main():
    """Run a maelstrom scene for a few hundred frames."""
    setup_logging("INFO")
    
    # Seeded random source so runs are repeatable
    rng = make_rng(42)
    universe = Universe(800, 600, 3000, debug=True, rng=rng)
    
    # Black hole in the middle, ring of stars around it
    Maelstrom(n_stars=5).apply(universe)
    
    print("Running simulation...")
    print(f"Initial particles: {universe.n_particles}")
    
    for frame in range(300):
        universe.update()
        if frame % 60 == 0:
            buffer = universe.snapshot()
            print(f"Frame {frame}: particles={universe.n_particles}, buffer={buffer.size} floats")
    
    # Drop a second black hole mid-run
    universe.add_black_hole(200, 300, 3000)
    for frame in range(300):
        universe.update()
    
    print(f"Final particles: {universe.n_particles}")
    print("Simulation complete!")

if __name__ == "__main__":
    main()
