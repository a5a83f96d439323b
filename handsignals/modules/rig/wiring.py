"""
Structural rebind of one hand model's references onto another.

Used when a hand's rig is rebound: the target takes over the source's
fingers, bones and reference transforms. Derived metrics live in a
separate HandMetrics table and are never touched here; ``hand_id`` and
``proxy_id`` identify the target and are kept.
"""

import logging

from handsignals.core.types import HandModel

logger = logging.getLogger(__name__)

WIRING_FIELDS = (
    "thumb",
    "index",
    "middle",
    "ring",
    "pinky",
    "wrist",
    "forearm",
    "pinch_center",
    "throat_center",
    "palm_center",
    "palm_exterior",
    "palm_interior",
    "ray",
    "skin",
)


def copy_hand_wiring(source: HandModel, target: HandModel) -> HandModel:
    """Overwrite every reference field of ``target`` with ``source``'s."""
    for name in WIRING_FIELDS:
        setattr(target, name, getattr(source, name))
    logger.debug(
        "Copied %d wiring fields from hand '%s' to hand '%s'",
        len(WIRING_FIELDS),
        source.hand_id,
        target.hand_id,
    )
    return target
