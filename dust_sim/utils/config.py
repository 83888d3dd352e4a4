"""Configuration management."""

import json
import yaml
from typing import Dict, Any, List, Optional
from pathlib import Path
from dataclasses import dataclass, asdict, field, fields


@dataclass
class Config:
    """Host configuration for a dust simulation run."""
    # Universe parameters
    width: float = 800.0
    height: float = 600.0
    particle_count: int = 5000
    debug: bool = False
    seed: Optional[int] = None
    
    # Host loop
    frames: int = 600
    report_every: int = 60
    
    # Bodies: a named scene plus any extra [x, y, mass] triples
    scene: str = "dust"
    scene_params: Dict[str, Any] = field(default_factory=dict)
    stars: List[List[float]] = field(default_factory=list)
    black_holes: List[List[float]] = field(default_factory=list)
    
    # Rendering
    render: bool = False
    render_every: int = 1
    
    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None
    
    def __post_init__(self):
        if self.scene_params is None:
            self.scene_params = {}
        self.stars = [_body_triple(b, "star") for b in (self.stars or [])]
        self.black_holes = [_body_triple(b, "black hole") for b in (self.black_holes or [])]


def _body_triple(value, kind: str) -> List[float]:
    """Validate an [x, y, mass] entry."""
    # A 3-character string would otherwise unpack as three digits
    if isinstance(value, (str, bytes)):
        raise ValueError(f"Invalid {kind} entry {value!r}: expected [x, y, mass]")
    try:
        x, y, mass = value
        return [float(x), float(y), float(mass)]
    except (TypeError, ValueError):
        raise ValueError(f"Invalid {kind} entry {value!r}: expected [x, y, mass]")


def _is_yaml(path: Path) -> bool:
    return path.suffix in ('.yaml', '.yml')


def load_config(config_path: str) -> Config:
    """Load configuration from file.
    
    Args:
        config_path: Path to config file (.json, .yaml or .yml)
        
    Returns:
        Config object
    """
    config_path = Path(config_path)
    
    if not _is_yaml(config_path) and config_path.suffix != '.json':
        raise ValueError(f"Unsupported config format: {config_path.suffix}. Use .json, .yaml or .yml")
    
    with open(config_path, 'r') as f:
        if _is_yaml(config_path):
            data = yaml.safe_load(f)
        else:
            data = json.load(f)
    
    data = data or {}
    known = {f.name for f in fields(Config)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {unknown}")
    
    return Config(**data)


def save_config(config: Config, output_path: str):
    """Save configuration to file.
    
    Args:
        config: Config object
        output_path: Output file path (.json, .yaml or .yml)
    """
    output_path = Path(output_path)
    
    if not _is_yaml(output_path) and output_path.suffix != '.json':
        raise ValueError(f"Unsupported config format: {output_path.suffix}. Use .json, .yaml or .yml")
    
    data = asdict(config)
    
    with open(output_path, 'w') as f:
        if _is_yaml(output_path):
            yaml.safe_dump(data, f, default_flow_style=False)
        else:
            json.dump(data, f, indent=2)
