"""
Centralized configuration manager.
Loads the YAML config and provides typed access with defaults.

Calibration constants for the metrics engine live in the ``metrics``
section and are exposed as a MetricsConfig via ``Config().metrics_config``.
"""

import os
import logging
from dataclasses import dataclass, fields

import yaml

logger = logging.getLogger(__name__)

_BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))
_CONFIG_DIR = os.path.join(_BASE_DIR, "config")

# Schema: required sections and their expected types
_CONFIG_SCHEMA = {
    "metrics": {
        "min_flex_rel_distance": float,
        "pinch_max_rel_distance": float,
        "pinch_min_rel_distance": float,
        "palm_line_max_rel_distance": float,
        "palm_line_min_rel_distance": float,
        "max_local_rot_z": float,
        "min_local_rot_z": float,
        "base_rotation_bone": int,
    },
    "logging": {
        "level": str,
    },
}


@dataclass(frozen=True)
class MetricsConfig:
    """Calibration constants for the metrics engine.

    Relative distances are multiplied by the caller's scale; rotation
    bounds are local Z angles in degrees.
    """
    min_flex_rel_distance: float = 0.5
    pinch_max_rel_distance: float = 0.6
    pinch_min_rel_distance: float = 0.1
    palm_line_max_rel_distance: float = 0.8
    palm_line_min_rel_distance: float = 0.2
    max_local_rot_z: float = 90.0
    min_local_rot_z: float = 0.0
    # index into each finger's bone chain
    base_rotation_bone: int = 1

    @classmethod
    def from_dict(cls, d: dict) -> "MetricsConfig":
        """Create config from dictionary, ignoring unknown keys."""
        defaults = cls()
        kwargs = {}
        for f in fields(cls):
            value = d.get(f.name, getattr(defaults, f.name))
            kwargs[f.name] = int(value) if f.type in (int, "int") else float(value)
        return cls(**kwargs)


# (lower, upper) pairs in the metrics section that must be ordered
_METRIC_BANDS = (
    ("pinch_min_rel_distance", "pinch_max_rel_distance"),
    ("palm_line_min_rel_distance", "palm_line_max_rel_distance"),
    ("min_local_rot_z", "max_local_rot_z"),
)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_metric_bands(section: dict) -> list:
    """Warn about inverted distance or rotation bands."""
    warnings = []
    for lower, upper in _METRIC_BANDS:
        lo, hi = section.get(lower), section.get(upper)
        if _is_number(lo) and _is_number(hi) and lo >= hi:
            warnings.append(f"metrics.{lower} ({lo}) should be below metrics.{upper} ({hi})")
    for key in ("min_local_rot_z", "max_local_rot_z"):
        value = section.get(key)
        if _is_number(value) and not 0.0 <= value < 360.0:
            warnings.append(f"metrics.{key} ({value}) is outside [0, 360)")
    bone = section.get("base_rotation_bone")
    if _is_number(bone) and bone < 0:
        warnings.append(f"metrics.base_rotation_bone ({bone}) must not be negative")
    return warnings


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge override into base dict."""
    merged = base.copy()
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class Config:
    """Singleton configuration manager."""

    _instance = None
    _data = {}

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def load(self, config_path=None, overrides=None):
        """Load configuration from a YAML file, then apply ``overrides``."""
        config_path = config_path or os.path.join(_CONFIG_DIR, "config.yaml")

        try:
            with open(config_path, "r") as f:
                self._data = yaml.safe_load(f) or {}
            logger.info("Loaded config from %s", config_path)
        except FileNotFoundError:
            logger.warning("Config file not found: %s, using defaults", config_path)
            self._data = {}

        if overrides:
            self._data = _deep_merge(self._data, overrides)

        self._validate()

        return self

    def _validate(self):
        """Validate config fields against schema."""
        warnings = []
        for section_name, section_fields in _CONFIG_SCHEMA.items():
            section = self._data.get(section_name)
            if section is None:
                warnings.append(f"Missing config section: '{section_name}'")
                continue
            if not isinstance(section, dict):
                warnings.append(f"Section '{section_name}' should be a dict, got {type(section).__name__}")
                continue
            for field_name, expected_type in section_fields.items():
                if field_name in section:
                    value = section[field_name]
                    # Allow int where float is expected
                    if expected_type is float and _is_number(value):
                        continue
                    if not isinstance(value, expected_type):
                        warnings.append(
                            f"{section_name}.{field_name}: expected {expected_type.__name__}, "
                            f"got {type(value).__name__} ({value!r})"
                        )
            if section_name == "metrics":
                warnings.extend(_check_metric_bands(section))

        if warnings:
            for w in warnings:
                logger.warning("Config validation: %s", w)
        else:
            logger.debug("Config validation passed")
        return warnings

    def get(self, key_path: str, default=None):
        """Get nested config value using dot notation: 'metrics.max_local_rot_z'."""
        keys = key_path.split(".")
        value = self._data
        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default
        return value

    def get_section(self, section: str) -> dict:
        """Get an entire config section."""
        return self._data.get(section, {})

    @property
    def metrics(self) -> dict:
        return self._data.get("metrics", {})

    @property
    def logging(self) -> dict:
        return self._data.get("logging", {})

    @property
    def metrics_config(self) -> MetricsConfig:
        return MetricsConfig.from_dict(self.metrics)

    @property
    def base_dir(self) -> str:
        return _BASE_DIR

    @classmethod
    def reset(cls):
        """Reset singleton instance (for testing)."""
        cls._instance = None
        cls._data = {}
