"""
Rig validation run before calibration.

A malformed hand silently produces zero lengths or divides by zero in the
aggregates, so every structural problem is collected, logged, and raised
as a single HandConfigurationError.
"""

import logging
from typing import List

from handsignals.core.types import FINGER_ORDER, FingerModel, HandConfigurationError, HandModel

logger = logging.getLogger(__name__)


def _check_finger(finger: FingerModel, slot: str) -> List[str]:
    problems = []
    if finger.name.value != slot:
        problems.append(f"Finger in slot '{slot}' is named '{finger.name.value}'")
    if not finger.bones:
        problems.append(f"{slot}: finger has no bones")
    if finger.finger_tip is None:
        problems.append(f"{slot}: fingerTip is not set")
    if finger.finger_base is None:
        problems.append(f"{slot}: fingerBase is not set")
    elif not any(bone.transform is finger.finger_base for bone in finger.bones):
        problems.append(f"{slot}: fingerBase is not a transform of the finger's bone chain")
    # hand_id is not compared: a rebound finger keeps the id it was built with
    return problems


def collect_hand_problems(hand: HandModel) -> List[str]:
    """List every structural problem of the hand; empty means valid."""
    problems = []
    fingers = hand.fingers

    present = [f for f in fingers if f is not None]
    if len(present) != len(FINGER_ORDER):
        problems.append(f"Expected {len(FINGER_ORDER)} fingers, got {len(present)}")
    if len({id(f) for f in present}) != len(present):
        problems.append("The same finger model is bound to more than one slot")
    if hand.thumb is None:
        problems.append("Hand has no thumb")
    elif sum(1 for f in present if f is hand.thumb) != 1:
        problems.append("Thumb is not distinguishable from the other fingers")

    for name, finger in zip(FINGER_ORDER, fingers):
        if finger is not None:
            problems.extend(_check_finger(finger, name.value))

    if hand.wrist is None:
        problems.append("Hand has no wrist bone")
    if hand.forearm is None:
        problems.append("Hand has no forearm bone")
    return problems


def validate_hand(hand: HandModel) -> None:
    """Raise HandConfigurationError if the hand cannot be evaluated."""
    problems = collect_hand_problems(hand)
    if not problems:
        logger.debug("Hand '%s' passed validation", hand.hand_id)
        return
    for problem in problems:
        logger.warning("Hand '%s' validation: %s", hand.hand_id, problem)
    raise HandConfigurationError(
        "Hand '%s' is misconfigured: %s" % (hand.hand_id, "; ".join(problems))
    )


def is_valid_hand(hand: HandModel) -> bool:
    return not collect_hand_problems(hand)
