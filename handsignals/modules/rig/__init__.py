"""Structural rebind between hand models."""
from .wiring import WIRING_FIELDS, copy_hand_wiring

__all__ = ["WIRING_FIELDS", "copy_hand_wiring"]
