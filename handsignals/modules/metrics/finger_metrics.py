"""
Per-finger pose signals computed from current joint positions.

Absolute distances are converted to relative ones by the caller-supplied
``scale`` so the same thresholds work across hand sizes. All ``*_lerp``
signals are in [0, 1]:

    flexion     0 = finger straight at its calibrated length, 1 = fully curled
    pinch       1 = fingertip touching the thumb tip
    palm line   1 = fingertip on the palm line (exterior -> interior)
    rotation    local Z rotation of one bone mapped through a band
"""

import logging

from handsignals.core.types import (
    BoneModel,
    FingerModel,
    HandConfigurationError,
    HandMetrics,
    HandModel,
)
from handsignals.modules.geometry.segment import distance, inverse_lerp, nearest_point_on_segment
from handsignals.modules.skeleton.validation import validate_hand

logger = logging.getLogger(__name__)

# Angles at or past this are read as a near-full turn rather than no turn
_ROTATED_HALF_TURN = 180.0


def _check_scale(scale: float) -> None:
    if not scale > 0.0:
        raise ValueError("scale must be positive, got %r" % scale)


# =========================================================================
# Length Calibration
# =========================================================================

def finger_length(finger: FingerModel, scale: float) -> float:
    """Chain length from ``finger_base`` to ``finger_tip``, in scale units.

    Bones before the one whose transform is ``finger_base`` (palm-attached
    knuckle stubs) are skipped. If ``finger_base`` never appears the
    result is 0; run validation first to catch that.
    """
    _check_scale(scale)
    bones = finger.bones
    length = 0.0
    measuring = False
    for i, bone in enumerate(bones):
        if bone.transform is finger.finger_base:
            measuring = True
        if not measuring:
            continue
        if i != len(bones) - 1:
            length += distance(bone.transform.position, bones[i + 1].transform.position)
        else:
            length += distance(bone.transform.position, finger.finger_tip.position)
    return length / scale


def update_finger_lengths(hand: HandModel, scale: float, metrics: HandMetrics) -> HandMetrics:
    """Calibrate every finger's length into ``metrics``.

    Raises HandConfigurationError on a malformed hand instead of storing
    degenerate zero lengths.
    """
    _check_scale(scale)
    validate_hand(hand)
    for finger in hand.fingers:
        metrics[finger.name].length = finger_length(finger, scale)
        logger.debug("Calibrated %s length: %.4f", finger.name.value, metrics[finger.name].length)
    logger.info(
        "Calibrated finger lengths for hand '%s' (scale=%.4f): %s",
        hand.hand_id,
        scale,
        ", ".join("%s=%.3f" % (f.name.value, metrics[f.name].length) for f in hand.fingers),
    )
    return metrics


# =========================================================================
# Per-Frame Signals
# =========================================================================

def finger_flexion(finger: FingerModel, length: float, min_flex_rel_distance: float, scale: float) -> float:
    """Curl of the finger from the base-to-tip distance.

    0 when the distance equals the calibrated ``length * scale``, rising
    to 1 as it shrinks to ``min_flex_rel_distance * scale``.
    """
    d = distance(finger.finger_base.position, finger.finger_tip.position)
    return 1.0 - inverse_lerp(min_flex_rel_distance * scale, length * scale, d)


def finger_pinch(
    hand: HandModel,
    finger: FingerModel,
    max_rel_distance: float,
    min_rel_distance: float,
    scale: float,
    metrics: HandMetrics,
) -> float:
    """Proximity of the fingertip to the thumb tip.

    The thumb is not measured on its own: its pinch is the strongest
    pinch stored for the other four fingers, so those must be updated
    first within a frame.
    """
    if finger is hand.thumb:
        return max(metrics[f.name].pinch_lerp for f in hand.non_thumb_fingers)

    min_abs_distance = min_rel_distance * scale
    max_abs_distance = max_rel_distance * scale
    d = distance(finger.finger_tip.position, hand.thumb.finger_tip.position)
    return 1.0 - inverse_lerp(min_abs_distance, max_abs_distance, d)


def palm_line_lerp(
    hand: HandModel,
    finger: FingerModel,
    max_rel_distance: float,
    min_rel_distance: float,
    scale: float,
) -> float:
    """Proximity of the fingertip to the palm exterior -> interior segment."""
    if hand.palm_exterior is None or hand.palm_interior is None:
        raise HandConfigurationError(
            "Hand '%s' has no palm exterior/interior references" % hand.hand_id
        )
    max_abs_distance = max_rel_distance * scale
    min_abs_distance = min_rel_distance * scale

    tip = finger.finger_tip.position
    nearest = nearest_point_on_segment(hand.palm_exterior.position, hand.palm_interior.position, tip)
    d = distance(nearest, tip)
    return 1.0 - inverse_lerp(min_abs_distance, max_abs_distance, d)


def bone_rotation_lerp(bone: BoneModel, max_local_rot_z: float, min_local_rot_z: float) -> float:
    """Map a bone's local Z rotation (degrees) to [0, 1].

    Inside [min, max] the angle is inverse-lerped from max down to min.
    Outside the band, angles short of a half turn (including negative
    ones) read as unrotated (0) and angles in [180, 360) as fully
    rotated (1).
    """
    return rotation_band_lerp(bone.transform.local_euler_z, max_local_rot_z, min_local_rot_z)


def rotation_band_lerp(local_rot_z: float, max_local_rot_z: float, min_local_rot_z: float) -> float:
    if min_local_rot_z <= local_rot_z <= max_local_rot_z:
        return inverse_lerp(max_local_rot_z, min_local_rot_z, local_rot_z)
    if local_rot_z < _ROTATED_HALF_TURN:
        return 0.0
    return 1.0
