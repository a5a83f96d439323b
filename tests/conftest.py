"""
Shared fixtures: synthetic hand rigs for metric tests.
"""

import pytest

from handsignals.core.types import (
    BoneKind,
    BoneModel,
    FingerModel,
    FingerName,
    HandMetrics,
    HandModel,
    ProxyBodyModel,
    Transform,
)

# Finger x offsets across the palm (metres)
FINGER_X = {
    "thumb": -0.05,
    "index": -0.02,
    "middle": 0.0,
    "ring": 0.02,
    "pinky": 0.04,
}

# Bone y positions along a straight finger: metacarpal stub, proximal,
# intermediate, distal. The tip sits beyond the last bone.
BONE_Y = (0.02, 0.08, 0.12, 0.15)
TIP_Y = 0.17

# Straight finger length from the proximal bone to the tip
STRAIGHT_LENGTH = TIP_Y - BONE_Y[1]


def create_mock_finger(name, hand_id="right", bone_count=4, driven_stub=False):
    """Create a straight finger pointing along +y."""
    x = FINGER_X[name]
    bones = []
    for i, y in enumerate(BONE_Y[:bone_count]):
        kind = BoneKind.DRIVEN if (driven_stub and i == 0) else BoneKind.TRACKED
        bones.append(BoneModel(
            name=f"{name}_{i}",
            transform=Transform(f"{name}_{i}", (x, y, 0.0)),
            kind=kind,
        ))
    return FingerModel(
        name=FingerName(name),
        bones=bones,
        finger_base=bones[1].transform,
        finger_tip=Transform(f"{name}_tip", (x, TIP_Y, 0.0)),
        hand_id=hand_id,
    )


def create_mock_hand(hand_id="right", thumb_bones=4, driven_stubs=False, proxy_id=None):
    """Create an open hand with all fingers straight.

    The palm line runs across the palm at y=0.05, from the pinky side
    (exterior) to the thumb side (interior).
    """
    fingers = {
        name: create_mock_finger(
            name,
            hand_id=hand_id,
            bone_count=thumb_bones if name == "thumb" else 4,
            driven_stub=driven_stubs and name != "thumb",
        )
        for name in FINGER_X
    }
    return HandModel(
        hand_id=hand_id,
        wrist=BoneModel("wrist", Transform("wrist", (0.0, 0.0, 0.0))),
        forearm=BoneModel("forearm", Transform("forearm", (0.0, -0.2, 0.0)), BoneKind.DRIVEN),
        palm_center=Transform("palm_center", (0.0, 0.05, 0.0)),
        palm_exterior=Transform("palm_exterior", (0.05, 0.05, 0.0)),
        palm_interior=Transform("palm_interior", (-0.05, 0.05, 0.0)),
        pinch_center=Transform("pinch_center", (-0.03, 0.15, 0.02)),
        throat_center=Transform("throat_center", (-0.04, 0.06, 0.0)),
        ray=Transform("ray", (0.0, 0.05, 0.05)),
        skin=object(),
        proxy_id=proxy_id,
        **fingers,
    )


@pytest.fixture
def make_hand():
    """Factory for synthetic hands."""
    return create_mock_hand


@pytest.fixture
def hand():
    """An open right hand."""
    return create_mock_hand()


@pytest.fixture
def metrics():
    return HandMetrics()


@pytest.fixture
def proxy():
    return ProxyBodyModel("body", Transform("shoulder", (0.0, 0.05, -0.3)))
