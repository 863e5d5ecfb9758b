"""
Configuration management for PGA4D.

Provides the camera configuration dataclass and JSON load/save helpers.
"""

import json
import logging
from dataclasses import dataclass, field, asdict
from typing import Optional, Dict, Any, Tuple
from pathlib import Path

from ..core.constants import (
    DEFAULT_FIXED_TIMESTEP,
    DEFAULT_INITIAL_TRANSLATION,
    DEFAULT_LOOK_SENSITIVITY,
    DEFAULT_MOVE_SPEED,
    DEFAULT_RENORMALIZE_EVERY,
    DEFAULT_SCROLL_SENSITIVITY,
    DEFAULT_VERTICAL_FOV_DEGREES,
    VECTOR_COMPONENTS,
)

logger = logging.getLogger(__name__)


@dataclass
class CameraConfig:
    """
    Configuration for the camera controller.

    Attributes:
        look_sensitivity: Radians of rotation per pixel of cursor motion
        scroll_sensitivity: Radians of xw-rotation per scroll notch
        move_speed: Units per second while a movement key is held
        initial_translation: Starting camera offset [x, y, z, w]
        vertical_fov_degrees: Vertical field of view handed to the renderer
        fixed_timestep: Seconds per fixed update
        renormalize_every: Updates between drift corrections of the
                           accumulated motors
    """

    look_sensitivity: float = DEFAULT_LOOK_SENSITIVITY
    scroll_sensitivity: float = DEFAULT_SCROLL_SENSITIVITY
    move_speed: float = DEFAULT_MOVE_SPEED
    initial_translation: Tuple[float, float, float, float] = DEFAULT_INITIAL_TRANSLATION
    vertical_fov_degrees: float = DEFAULT_VERTICAL_FOV_DEGREES
    fixed_timestep: float = DEFAULT_FIXED_TIMESTEP
    renormalize_every: int = DEFAULT_RENORMALIZE_EVERY

    # Additional fields
    extra: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self.initial_translation = tuple(float(v) for v in self.initial_translation)
        if len(self.initial_translation) != VECTOR_COMPONENTS:
            raise ValueError(
                f"initial_translation needs {VECTOR_COMPONENTS} components, "
                f"got {len(self.initial_translation)}"
            )
        if self.move_speed <= 0:
            raise ValueError(f"move_speed must be positive, got {self.move_speed}")
        if not 0 < self.vertical_fov_degrees < 180:
            raise ValueError(f"vertical_fov_degrees must be in (0, 180), got {self.vertical_fov_degrees}")
        if self.fixed_timestep <= 0:
            raise ValueError(f"fixed_timestep must be positive, got {self.fixed_timestep}")
        if self.renormalize_every < 1:
            raise ValueError(f"renormalize_every must be at least 1, got {self.renormalize_every}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        config_dict = asdict(self)
        config_dict['initial_translation'] = list(self.initial_translation)
        return config_dict

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'CameraConfig':
        """Create config from dictionary."""
        # Extract known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        known_kwargs = {k: v for k, v in config_dict.items() if k in known_fields}
        extra_kwargs = {k: v for k, v in config_dict.items() if k not in known_fields}

        if extra_kwargs:
            logger.warning(f"Unrecognized camera config keys kept in 'extra': {sorted(extra_kwargs)}")

        config = cls(**known_kwargs)
        config.extra.update(extra_kwargs)
        return config

    def update(self, **kwargs) -> 'CameraConfig':
        """Return a new config with updated values."""
        config_dict = self.to_dict()
        config_dict.update(kwargs)
        return CameraConfig.from_dict(config_dict)


def load_config(filepath: str, defaults: Optional[CameraConfig] = None) -> CameraConfig:
    """
    Load configuration from JSON file.

    Args:
        filepath: Path to JSON config file
        defaults: Config whose values are used for keys the file omits

    Returns:
        CameraConfig object
    """
    filepath = Path(filepath)
    with open(filepath, 'r') as f:
        config_dict = json.load(f)

    if defaults is not None:
        merged = defaults.to_dict()
        merged.update(config_dict)
        config_dict = merged

    logger.info(f"Loaded camera config from {filepath}")
    return CameraConfig.from_dict(config_dict)


def save_config(config: CameraConfig, filepath: str) -> None:
    """
    Save configuration to JSON file.

    Args:
        config: Config object to save
        filepath: Output file path
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, 'w') as f:
        json.dump(config.to_dict(), f, indent=2)

    logger.info(f"Saved camera config to {filepath}")
