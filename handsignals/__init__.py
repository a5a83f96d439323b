"""
Hand Signal Engine
==================

Derives continuous, normalized pose signals (flexion, pinch, palm-line
proximity, grasp, fist) from a hierarchical hand skeleton snapshot.

Modules:
    - core: skeleton data model, metrics side table, evaluation engine
    - geometry: segment projection and clamped interpolation
    - skeleton: canonical bone traversal and rig validation
    - metrics: per-finger signals and per-hand aggregates
    - rig: structural rebind between hand models
    - utils: configuration and logging
"""

__version__ = "1.0.0"

from handsignals.core.types import (
    BoneKind,
    BoneModel,
    FingerMetrics,
    FingerModel,
    FingerName,
    HandConfigurationError,
    HandMetrics,
    HandModel,
    ProxyBodyModel,
    Transform,
)
from handsignals.core.pipeline import EvaluationResult, HandMetricsEngine
from handsignals.modules.utils.config import Config, MetricsConfig

__all__ = [
    "BoneKind",
    "BoneModel",
    "FingerMetrics",
    "FingerModel",
    "FingerName",
    "HandConfigurationError",
    "HandMetrics",
    "HandModel",
    "ProxyBodyModel",
    "Transform",
    "EvaluationResult",
    "HandMetricsEngine",
    "Config",
    "MetricsConfig",
]
