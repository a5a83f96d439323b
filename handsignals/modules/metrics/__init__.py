"""Per-finger signals and per-hand aggregates."""
from .finger_metrics import (
    bone_rotation_lerp,
    finger_flexion,
    finger_length,
    finger_pinch,
    palm_line_lerp,
    rotation_band_lerp,
    update_finger_lengths,
)
from .hand_metrics import hand_fist, hand_grasp, hand_ray_direction

__all__ = [
    "bone_rotation_lerp",
    "finger_flexion",
    "finger_length",
    "finger_pinch",
    "palm_line_lerp",
    "rotation_band_lerp",
    "update_finger_lengths",
    "hand_fist",
    "hand_grasp",
    "hand_ray_direction",
]
