"""
Scene configuration: every tunable of the plane, the box, the merge, the
noise and the two timers in one dataclass.
"""
import os
from dataclasses import dataclass, asdict, fields
from typing import Any, Dict, Optional

import yaml


@dataclass
class SceneConfig:
    """
    Configuration for SceneGenerator and SceneStream.
    """

    # Plane
    plane_extent: float = 5.0  # Plane covers [-extent, extent]^2
    plane_step: float = 0.1  # Plane grid spacing

    # Box
    box_size: float = 1.0  # Edge length of the cube
    box_step: float = 0.1  # Grid spacing on the cube faces
    xy_range: float = 2.0  # Box x, y drawn from U(-xy_range, xy_range)
    yaw_max: float = 3.1415 / 2  # Box yaw drawn from U(0, yaw_max)

    # Merge
    footprint_radius: float = 0.09  # Plane points this close to the box bottom are removed

    # Noise
    noise_amplitude: float = 0.0002  # Per-axis jitter drawn from U(-a, a)

    # Timers
    box_period: float = 1.0  # Seconds between box regenerations
    publish_period: float = 0.2  # Seconds between published frames

    # Output
    frame_id: str = "world"
    topic: str = "/cloud"

    # Misc
    seed: Optional[int] = None  # Seed for pose and noise draws; None for entropy
    log_level: str = "INFO"

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """
        Raise ValueError when a value would produce a malformed scene.
        """
        positive = (
            "plane_extent",
            "plane_step",
            "box_size",
            "box_step",
            "footprint_radius",
            "box_period",
            "publish_period",
        )
        for name in positive:
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.noise_amplitude < 0:
            raise ValueError(f"noise_amplitude must be >= 0, got {self.noise_amplitude}")
        if self.xy_range < 0:
            raise ValueError(f"xy_range must be >= 0, got {self.xy_range}")
        if self.footprint_radius >= self.plane_step:
            raise ValueError(
                f"footprint_radius ({self.footprint_radius}) must be smaller than "
                f"plane_step ({self.plane_step})"
            )

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "SceneConfig":
        """
        Create a SceneConfig from a dictionary.
        Only uses keys that match dataclass field names.
        """
        field_names = {field.name for field in fields(cls)}
        valid_keys = {k: v for k, v in config_dict.items() if k in field_names}
        return cls(**valid_keys)

    @classmethod
    def from_yaml(cls, filepath: str) -> "SceneConfig":
        """
        Load configuration from a YAML file.
        """
        if not os.path.exists(filepath):
            raise FileNotFoundError(f"Config file not found: {filepath}")
        with open(filepath, "r") as f:
            config_dict = yaml.safe_load(f) or {}
        return cls.from_dict(config_dict)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_yaml(self, filepath: str) -> None:
        """
        Save configuration to a YAML file.
        """
        with open(filepath, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False)
