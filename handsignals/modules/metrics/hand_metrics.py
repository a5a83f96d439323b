"""
Hand-level aggregates over the non-thumb fingers, plus ray direction.
"""

from typing import Mapping

import numpy as np

from handsignals.core.types import HandConfigurationError, HandMetrics, HandModel, ProxyBodyModel
from handsignals.modules.geometry.segment import normalized
from handsignals.modules.skeleton.validation import validate_hand


def _non_thumb_mean(hand: HandModel, metrics: HandMetrics, attr: str, validate: bool) -> float:
    if validate:
        validate_hand(hand)
    fingers = hand.non_thumb_fingers
    return sum(getattr(metrics[f.name], attr) for f in fingers) / len(fingers)


def hand_fist(hand: HandModel, metrics: HandMetrics, validate: bool = True) -> float:
    """Mean palm-line proximity of index, middle, ring and pinky.

    Pass ``validate=False`` only when the hand was validated earlier in
    the same pass.
    """
    return _non_thumb_mean(hand, metrics, "palm_line_lerp", validate)


def hand_grasp(hand: HandModel, metrics: HandMetrics, validate: bool = True) -> float:
    """Mean base-bone rotation signal of index, middle, ring and pinky."""
    return _non_thumb_mean(hand, metrics, "base_rotation_lerp", validate)


def hand_ray_direction(hand: HandModel, proxies: Mapping[str, ProxyBodyModel]) -> np.ndarray:
    """Unit vector from the proxy body's shoulder tip to the hand's ray origin."""
    if hand.ray is None:
        raise HandConfigurationError("Hand '%s' has no ray reference" % hand.hand_id)
    proxy = proxies.get(hand.proxy_id) if hand.proxy_id is not None else None
    if proxy is None:
        raise HandConfigurationError(
            "Hand '%s' references unknown proxy body %r" % (hand.hand_id, hand.proxy_id)
        )
    return normalized(hand.ray.position - proxy.shoulder_tip.position)
