"""Scene layouts of stars and black holes."""

from typing import List
from dust_sim.scenes.base import Scene
from dust_sim.scenes.dust import DustCloud
from dust_sim.scenes.binary import BinaryStars
from dust_sim.scenes.cluster import StarCluster
from dust_sim.scenes.maelstrom import Maelstrom

SCENES = {
    'dust': DustCloud,
    'binary': BinaryStars,
    'cluster': StarCluster,
    'maelstrom': Maelstrom,
}


def list_scenes() -> List[str]:
    """Return the names of the available scenes."""
    return list(SCENES.keys())


def get_scene(name: str, **params) -> Scene:
    """Get scene by name.
    
    Args:
        name: Scene name (see list_scenes())
        **params: Keyword arguments for the scene constructor
        
    Returns:
        Scene instance
    """
    scene_class = SCENES.get(name.lower())
    if scene_class is None:
        raise ValueError(f"Unknown scene: {name}. Available: {list_scenes()}")
    return scene_class(**params)


__all__ = [
    "Scene",
    "DustCloud",
    "BinaryStars",
    "StarCluster",
    "Maelstrom",
    "get_scene",
    "list_scenes",
]
