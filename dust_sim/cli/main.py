"""CLI main entry point."""

import argparse
import logging
from typing import List, Optional
from dust_sim.physics.universe import Universe
from dust_sim.scenes import get_scene, list_scenes
from dust_sim.utils.config import Config, load_config
from dust_sim.utils.logging_config import setup_logging
from dust_sim.utils.reproducibility import make_rng

logger = logging.getLogger(__name__)


def body_triple(value: str) -> List[float]:
    """Parse an 'X,Y,MASS' command-line value."""
    parts = value.split(',')
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(f"expected X,Y,MASS, got {value!r}")
    try:
        return [float(p) for p in parts]
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected three numbers, got {value!r}")


def build_config(args) -> Config:
    """Merge the optional config file with command-line overrides."""
    config = load_config(args.config) if args.config else Config()

    overrides = {
        'width': args.width,
        'height': args.height,
        'particle_count': args.particles,
        'frames': args.frames,
        'seed': args.seed,
        'scene': args.scene,
        'report_every': args.report_every,
        'render_every': args.render_every,
        'log_level': args.log_level,
        'log_file': args.log_file,
    }
    for key, value in overrides.items():
        if value is not None:
            setattr(config, key, value)

    if args.debug:
        config.debug = True
    if args.render:
        config.render = True
    config.stars = config.stars + (args.star or [])
    config.black_holes = config.black_holes + (args.black_hole or [])
    return config


def build_universe(config: Config) -> Universe:
    """Construct the universe and add the configured bodies."""
    rng = make_rng(config.seed)
    universe = Universe(
        config.width,
        config.height,
        config.particle_count,
        debug=config.debug,
        rng=rng,
    )

    scene_params = dict(config.scene_params)
    if config.scene == 'cluster' and 'rng' not in scene_params and 'seed' not in scene_params:
        scene_params['rng'] = rng
    scene = get_scene(config.scene, **scene_params)
    scene.apply(universe)

    for x, y, mass in config.stars:
        universe.add_star(x, y, mass)
    for x, y, mass in config.black_holes:
        universe.add_black_hole(x, y, mass)

    logger.info("Built %r using scene '%s'", universe, scene.name)
    return universe


def run_simulation(config: Config, universe: Optional[Universe] = None) -> Universe:
    """Run the host frame loop.

    Args:
        config: Run configuration
        universe: Prepared universe (built from config if None)
    """
    if universe is None:
        universe = build_universe(config)

    renderer = None
    if config.render:
        from dust_sim.render.renderer_2d import Renderer2D
        renderer = Renderer2D(config.width, config.height)

    print(f"Running simulation: {config.scene} with {universe.n_particles} particles")
    print(f"Bounds: {config.width:g}x{config.height:g}, stars: {len(universe.stars)}, "
          f"black holes: {len(universe.black_holes)}")
    print(f"{'Frame':<8} {'Particles':<10} {'Removed':<8}")
    print("-" * 28)

    initial_count = universe.n_particles
    print(f"{0:<8} {initial_count:<10} {0:<8}")

    report_every = max(1, config.report_every)
    render_every = max(1, config.render_every)
    try:
        for frame in range(1, config.frames + 1):
            universe.update()

            if renderer is not None and frame % render_every == 0:
                renderer.render(universe.snapshot(), universe.stars, universe.black_holes)

            if frame % report_every == 0 or frame == config.frames:
                removed = initial_count - universe.n_particles
                print(f"{frame:<8} {universe.n_particles:<10} {removed:<8}")
    finally:
        if renderer is not None:
            renderer.close()

    print("Simulation complete!")
    return universe


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Dust Simulator - dust drifting under stars and black holes")

    # Universe
    parser.add_argument('--config', type=str, default=None,
                       help='Config file (.json, .yaml or .yml); flags override it')
    parser.add_argument('--width', type=float, default=None,
                       help='World width (default: 800)')
    parser.add_argument('--height', type=float, default=None,
                       help='World height (default: 600)')
    parser.add_argument('--particles', type=int, default=None,
                       help='Number of dust particles (default: 5000)')
    parser.add_argument('--frames', type=int, default=None,
                       help='Number of frames to simulate (default: 600)')
    parser.add_argument('--seed', type=int, default=None,
                       help='Random seed for reproducibility')
    parser.add_argument('--debug', action='store_true',
                       help='Enable diagnostic log lines from the universe')

    # Bodies
    parser.add_argument('--scene', type=str, default=None, choices=list_scenes(),
                       help='Scene layout of stars and black holes (default: dust)')
    parser.add_argument('--star', type=body_triple, action='append', metavar='X,Y,MASS',
                       help='Add a star (repeatable)')
    parser.add_argument('--black-hole', type=body_triple, action='append', metavar='X,Y,MASS',
                       help='Add a black hole (repeatable)')

    # Output
    parser.add_argument('--report-every', type=int, default=None,
                       help='Print particle count every N frames (default: 60)')
    parser.add_argument('--render', action='store_true',
                       help='Enable real-time rendering')
    parser.add_argument('--render-every', type=int, default=None,
                       help='Render every N frames')
    parser.add_argument('--log-level', type=str, default=None,
                       choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                       help='Logging level (default: INFO)')
    parser.add_argument('--log-file', type=str, default=None,
                       help='Also write logs to this file')

    # Info
    parser.add_argument('--list-scenes', action='store_true',
                       help='List available scenes and exit')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    parser = make_parser()
    args = parser.parse_args(argv)

    if args.list_scenes:
        print("Available scenes:")
        for name in list_scenes():
            print(f"  - {name}")
        return 0

    try:
        config = build_config(args)
        setup_logging(config.log_level, config.log_file)
        universe = build_universe(config)
    except (OSError, ValueError, TypeError) as e:
        parser.error(str(e))

    run_simulation(config, universe)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
