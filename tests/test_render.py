"""Tests for snapshot rendering."""

import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest
from dust_sim import Universe
from dust_sim.render import Renderer2D, snapshot_to_points


def test_snapshot_to_points():
    """Test reshaping a flat snapshot into (n, 3) points."""
    points = snapshot_to_points(np.array([1, 2, 0.5, 3, 4, 0.25], dtype=np.float32))
    
    assert points.shape == (2, 3)
    assert np.allclose(points[1], [3.0, 4.0, 0.25])


def test_snapshot_to_points_bad_length():
    """Test that a buffer not made of triples is rejected."""
    with pytest.raises(ValueError):
        snapshot_to_points([1.0, 2.0])


def test_render_offscreen():
    """Test off-screen rendering and frame capture."""
    universe = Universe(100.0, 80.0, 200, rng=np.random.default_rng(1))
    universe.add_star(30.0, 40.0, 500.0)
    universe.add_black_hole(70.0, 40.0, 800.0)
    universe.update()
    
    renderer = Renderer2D(100.0, 80.0, figsize=(4, 3), dpi=50, interactive=False)
    renderer.render(universe.snapshot(), universe.stars, universe.black_holes)
    frame = renderer.capture_frame()
    
    assert frame.shape == (150, 200, 3)
    assert frame.dtype == np.uint8
    
    renderer.close()
    with pytest.raises(RuntimeError):
        renderer.capture_frame()


def test_render_empty_snapshot():
    """Test rendering a universe with no particles left."""
    renderer = Renderer2D(10.0, 10.0, figsize=(2, 2), dpi=20, interactive=False)
    renderer.render(np.zeros(0, dtype=np.float32))
    
    assert renderer.capture_frame().shape == (40, 40, 3)
    renderer.close()
