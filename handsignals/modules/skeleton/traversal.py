"""
Deterministic enumeration of a hand's bones and transforms.

The ordering is a public contract: wrist, forearm, then every finger's
bones thumb -> index -> middle -> ring -> pinky, each finger wrist-proximal
to tip. Callers correlate these lists positionally with a tracking
device's own bone arrays, so the order must never change.
"""

from typing import List

from handsignals.core.types import BoneModel, FingerModel, HandModel, Transform

# wrist + forearm
_ROOT_BONE_COUNT = 2


def enumerate_bones(hand: HandModel) -> List[BoneModel]:
    """All bones of the hand in canonical order."""
    bones = [hand.wrist, hand.forearm]
    for finger in hand.fingers:
        bones.extend(finger.bones)
    return bones


def enumerate_driven_bones(hand: HandModel) -> List[BoneModel]:
    """Only the procedurally driven bones, in canonical order."""
    return [bone for bone in enumerate_bones(hand) if bone.is_driven]


def enumerate_transforms(hand: HandModel) -> List[Transform]:
    """Every bone transform, followed by each finger's tip transform."""
    transforms = [bone.transform for bone in enumerate_bones(hand)]
    for finger in hand.fingers:
        transforms.append(finger.finger_tip)
    return transforms


def enumerate_finger_transforms(finger: FingerModel) -> List[Transform]:
    """One transform per bone of the finger, wrist-proximal first."""
    return [bone.transform for bone in finger.bones]


def count_bones(hand: HandModel) -> int:
    """Bone count matching ``len(enumerate_bones(hand))``.

    Used to pre-size buffers handed to an external tracking API.
    """
    return _ROOT_BONE_COUNT + sum(len(finger.bones) for finger in hand.fingers)
