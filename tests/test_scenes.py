"""Tests for scene layouts."""

import numpy as np
import pytest
from dust_sim import Universe
from dust_sim.scenes import (
    DustCloud, BinaryStars, StarCluster, Maelstrom, get_scene, list_scenes
)


def make_universe():
    return Universe(400.0, 200.0, 10, rng=np.random.default_rng(0))


def test_dust_cloud():
    """Test that the dust scene adds no bodies."""
    universe = make_universe()
    scene = DustCloud()
    scene.apply(universe)
    
    assert universe.stars == ()
    assert universe.black_holes == ()
    assert scene.name == "dust"


def test_binary_stars():
    """Test binary star placement."""
    universe = make_universe()
    scene = BinaryStars(mass=750.0)
    scene.apply(universe)
    
    assert [(s.x, s.y, s.mass) for s in universe.stars] == [(100.0, 100.0, 750.0), (300.0, 100.0, 750.0)]
    assert scene.name == "binary"


def test_star_cluster():
    """Test cluster star count, bounds and mass range."""
    universe = make_universe()
    scene = StarCluster(n_stars=12, mass_min=10.0, mass_max=20.0, seed=3)
    scene.apply(universe)
    
    assert len(universe.stars) == 12
    for s in universe.stars:
        assert 0.0 <= s.x < 400.0
        assert 0.0 <= s.y < 200.0
        assert 10.0 <= s.mass < 20.0
    assert scene.name == "cluster"


def test_star_cluster_reproducibility():
    """Test that clusters are reproducible with the same seed."""
    u1, u2 = make_universe(), make_universe()
    StarCluster(n_stars=5, seed=42).apply(u1)
    StarCluster(n_stars=5, seed=42).apply(u2)
    
    assert u1.stars == u2.stars


def test_maelstrom():
    """Test maelstrom ring geometry."""
    universe = make_universe()
    scene = Maelstrom(black_hole_mass=1234.0, n_stars=4, star_mass=10.0, ring_radius=0.25)
    scene.apply(universe)
    
    assert len(universe.black_holes) == 1
    bh = universe.black_holes[0]
    assert (bh.x, bh.y, bh.mass) == (200.0, 100.0, 1234.0)
    assert len(universe.stars) == 4
    for s in universe.stars:
        assert np.hypot(s.x - 200.0, s.y - 100.0) == pytest.approx(50.0)
    assert scene.name == "maelstrom"


def test_get_scene():
    """Test scene lookup by name."""
    assert isinstance(get_scene("binary", mass=5.0), BinaryStars)
    assert isinstance(get_scene("MAELSTROM"), Maelstrom)
    assert set(list_scenes()) == {"dust", "binary", "cluster", "maelstrom"}


def test_get_scene_unknown():
    """Test that an unknown scene name raises ValueError."""
    with pytest.raises(ValueError, match="Unknown scene"):
        get_scene("nebula")
