"""Canonical bone traversal and rig validation."""
from .traversal import (
    count_bones,
    enumerate_bones,
    enumerate_driven_bones,
    enumerate_finger_transforms,
    enumerate_transforms,
)
from .validation import collect_hand_problems, is_valid_hand, validate_hand

__all__ = [
    "count_bones",
    "enumerate_bones",
    "enumerate_driven_bones",
    "enumerate_finger_transforms",
    "enumerate_transforms",
    "collect_hand_problems",
    "is_valid_hand",
    "validate_hand",
]
