"""Rendering of universe snapshots."""

from dust_sim.render.base import Renderer, snapshot_to_points
from dust_sim.render.renderer_2d import Renderer2D

__all__ = ["Renderer", "Renderer2D", "snapshot_to_points"]
