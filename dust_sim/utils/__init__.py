"""Utility functions for reproducibility, configuration and logging."""

from dust_sim.utils.reproducibility import make_rng
from dust_sim.utils.config import load_config, save_config, Config
from dust_sim.utils.logging_config import setup_logging

__all__ = ["make_rng", "load_config", "save_config", "Config", "setup_logging"]
