"""Tests for star and black hole force accumulation."""

import numpy as np
import pytest
from dust_sim.physics.bodies import Star, BlackHole
from dust_sim.physics.forces import star_forces, black_hole_forces, REMOVAL_MARK


def test_star_forces_records_and_arrays_agree():
    """Test that Star records and a raw (m, 3) array give the same forces."""
    positions = np.array([[0.0, 0.0, 0.5], [10.0, 5.0, 0.5], [30.0, -20.0, 0.5]])
    stars = [Star(20.0, 0.0, 400.0), Star(-15.0, 10.0, 250.0)]
    
    fx1, fy1 = star_forces(positions, stars)
    fx2, fy2 = star_forces(positions, np.array([[20.0, 0.0, 400.0], [-15.0, 10.0, 250.0]]))
    
    assert np.allclose(fx1, fx2)
    assert np.allclose(fy1, fy2)


def test_star_forces_match_loop():
    """Test the vectorized sum against a direct per-pair loop."""
    rng = np.random.default_rng(4)
    positions = rng.uniform(0, 100, (20, 3))
    stars = [Star(*rng.uniform(0, 100, 2), rng.uniform(100, 1000)) for _ in range(5)]
    
    fx, fy = star_forces(positions, stars)
    
    for i, (x, y, _) in enumerate(positions):
        ex = ey = 0.0
        for s in stars:
            dx, dy = s.x - x, s.y - y
            d2 = dx * dx + dy * dy
            if d2 > 10.0:
                f = 0.1 * s.mass / d2
                ex += f * dx / np.sqrt(d2)
                ey += f * dy / np.sqrt(d2)
        assert fx[i] == pytest.approx(ex)
        assert fy[i] == pytest.approx(ey)


def test_star_forces_empty():
    """Test empty particle and star sets."""
    fx, fy = star_forces(np.zeros((0, 3)), [Star(1.0, 1.0, 1.0)])
    assert fx.shape == (0,)
    
    fx, fy = star_forces(np.ones((4, 3)), [])
    assert np.all(fx == 0.0)
    assert np.all(fy == 0.0)


def test_black_hole_marks_in_place():
    """Test that captured particles get the sentinel x written in place."""
    positions = np.array([[10.0, 10.0, 0.1], [50.0, 50.0, 0.2]])
    
    fx, fy = black_hole_forces(positions, [BlackHole(10.2, 10.0, 100.0)])
    
    assert positions[0, 0] == REMOVAL_MARK
    assert positions[0, 1] == 10.0
    assert positions[1, 0] == 50.0
    assert fx[0] == 0.0
    assert fx[1] < 0.0
    assert fy[1] < 0.0


def test_black_hole_forces_no_bodies():
    """Test that no black holes leaves positions and forces untouched."""
    positions = np.array([[1.0, 2.0, 0.0]])
    
    fx, fy = black_hole_forces(positions, [])
    
    assert np.all(fx == 0.0)
    assert positions[0, 0] == 1.0
