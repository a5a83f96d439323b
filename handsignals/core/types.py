"""
Shared domain types for the hand signal engine.

Centralizes the skeleton model (bones, fingers, hands), the metrics side
table the engine writes into, and the error raised for malformed rigs.
Skeleton objects are owned by the tracking source; the engine only reads
them and writes derived scalars into HandMetrics.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

import numpy as np
from scipy.spatial.transform import Rotation


class HandConfigurationError(ValueError):
    """Raised when a hand rig cannot produce meaningful metrics."""


# =============================================================================
# Skeleton Enums
# =============================================================================

class BoneKind(Enum):
    """Provenance of a bone: directly tracked or procedurally driven."""
    TRACKED = "tracked"
    DRIVEN = "driven"


class FingerName(Enum):
    """Finger identities, declared in canonical traversal order."""
    THUMB = "thumb"
    INDEX = "index"
    MIDDLE = "middle"
    RING = "ring"
    PINKY = "pinky"

    @classmethod
    def from_string(cls, name: str) -> "FingerName":
        """Convert a finger name to FingerName, raising on unknown names."""
        try:
            return cls(name.lower())
        except ValueError:
            raise ValueError("Unknown finger name: %r" % name)


FINGER_ORDER: Tuple[FingerName, ...] = tuple(FingerName)


# =============================================================================
# Skeleton Model
# =============================================================================

@dataclass(eq=False)
class Transform:
    """Spatial reference updated by the tracking source every frame.

    Compared by identity: two transforms at the same position are still
    different joints.
    """
    name: str = ""
    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    local_rotation: np.ndarray = field(
        default_factory=lambda: np.array([0.0, 0.0, 0.0, 1.0])
    )  # quaternion (x, y, z, w)

    def __post_init__(self):
        self.position = np.asarray(self.position, dtype=np.float64)
        self.local_rotation = np.asarray(self.local_rotation, dtype=np.float64)
        if self.position.shape != (3,):
            raise ValueError("Expected (3,) position, got %s" % str(self.position.shape))
        if self.local_rotation.shape != (4,):
            raise ValueError("Expected (4,) quaternion, got %s" % str(self.local_rotation.shape))

    @property
    def local_euler_z(self) -> float:
        """Local Z rotation in degrees, in [0, 360).

        Decomposed Z, X, Y (extrinsic), matching how engine rigs report
        euler angles.
        """
        z = Rotation.from_quat(self.local_rotation).as_euler("zxy", degrees=True)[0]
        return float(z % 360.0)

    def set_local_euler_z(self, degrees: float) -> None:
        """Replace the local rotation with a pure Z rotation."""
        self.local_rotation = Rotation.from_euler("z", degrees, degrees=True).as_quat()


@dataclass(eq=False)
class BoneModel:
    """A skeletal joint and its transform."""
    name: str
    transform: Transform
    kind: BoneKind = BoneKind.TRACKED

    @property
    def is_driven(self) -> bool:
        return self.kind is BoneKind.DRIVEN


@dataclass(eq=False)
class FingerModel:
    """Ordered bone chain (wrist-proximal to tip) for one finger.

    ``hand_id`` is a lookup key, not an owning reference to the hand.
    """
    name: FingerName
    bones: Tuple[BoneModel, ...]
    finger_base: Optional[Transform]
    finger_tip: Optional[Transform]
    hand_id: str = ""

    def __post_init__(self):
        self.bones = tuple(self.bones)

    @property
    def is_thumb(self) -> bool:
        return self.name is FingerName.THUMB


@dataclass(eq=False)
class HandModel:
    """Five fingers plus wrist, forearm, and palm/ray reference transforms."""
    hand_id: str
    thumb: FingerModel
    index: FingerModel
    middle: FingerModel
    ring: FingerModel
    pinky: FingerModel
    wrist: BoneModel
    forearm: BoneModel
    palm_center: Optional[Transform] = None
    palm_exterior: Optional[Transform] = None
    palm_interior: Optional[Transform] = None
    pinch_center: Optional[Transform] = None
    throat_center: Optional[Transform] = None
    ray: Optional[Transform] = None
    skin: Any = None  # opaque render reference
    proxy_id: Optional[str] = None

    @property
    def fingers(self) -> Tuple[FingerModel, ...]:
        """All five fingers in canonical order, thumb first."""
        return (self.thumb, self.index, self.middle, self.ring, self.pinky)

    def finger(self, name: FingerName) -> FingerModel:
        return getattr(self, name.value)

    @property
    def non_thumb_fingers(self) -> Tuple[FingerModel, ...]:
        return tuple(f for f in self.fingers if f is not self.thumb)


@dataclass(eq=False)
class ProxyBodyModel:
    """Body-level references a hand looks up by ``proxy_id``."""
    proxy_id: str
    shoulder_tip: Transform


# =============================================================================
# Metrics Side Table
# =============================================================================

@dataclass
class FingerMetrics:
    """Derived scalars for one finger. ``length`` is in scale units."""
    length: float = 0.0
    flexion_lerp: float = 0.0
    pinch_lerp: float = 0.0
    palm_line_lerp: float = 0.0
    base_rotation_lerp: float = 0.0


@dataclass
class HandMetrics:
    """Everything the engine writes for one hand, keyed by finger identity."""
    fingers: Dict[FingerName, FingerMetrics] = field(
        default_factory=lambda: {name: FingerMetrics() for name in FINGER_ORDER}
    )
    fist: float = 0.0
    grasp: float = 0.0
    ray_direction: np.ndarray = field(default_factory=lambda: np.zeros(3))

    def __getitem__(self, name: FingerName) -> FingerMetrics:
        return self.fingers[name]

    def to_dict(self) -> dict:
        """Serialize to a JSON-friendly dict."""
        return {
            "fingers": {
                name.value: {
                    "length": m.length,
                    "flexion": m.flexion_lerp,
                    "pinch": m.pinch_lerp,
                    "palm_line": m.palm_line_lerp,
                    "base_rotation": m.base_rotation_lerp,
                }
                for name, m in self.fingers.items()
            },
            "fist": self.fist,
            "grasp": self.grasp,
            "ray_direction": [float(v) for v in self.ray_direction],
        }
