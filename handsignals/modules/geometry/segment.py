"""
Vector helpers used by the metric modules.

Points are numpy arrays of shape (3,). Every helper guards its own
degenerate case (zero-length segment, equal lerp bounds, zero vector)
instead of letting a division by zero reach the caller.
"""

import numpy as np

_EPSILON = 1e-9


def distance(p1: np.ndarray, p2: np.ndarray) -> float:
    """Euclidean distance between two 3D points."""
    return float(np.linalg.norm(np.asarray(p1, dtype=np.float64) - np.asarray(p2, dtype=np.float64)))


def normalized(v: np.ndarray) -> np.ndarray:
    """Unit vector along ``v``, or the zero vector if ``v`` has no length."""
    v = np.asarray(v, dtype=np.float64)
    length = np.linalg.norm(v)
    if length <= _EPSILON:
        return np.zeros_like(v)
    return v / length


def clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def inverse_lerp(a: float, b: float, value: float) -> float:
    """Fraction of ``value`` between ``a`` and ``b``, clamped to [0, 1].

    Works for either ordering of the bounds: with ``a > b`` values below
    ``b`` map to 1 and values above ``a`` map to 0. Equal bounds give 0.
    """
    if a == b:
        return 0.0
    return clamp01((value - a) / (b - a))


def nearest_point_on_segment(start: np.ndarray, end: np.ndarray, point: np.ndarray) -> np.ndarray:
    """Closest point to ``point`` on the finite segment ``start``-``end``.

    The projection is clamped to the segment, so points beyond either end
    snap to that endpoint. A zero-length segment returns ``start``.
    """
    start = np.asarray(start, dtype=np.float64)
    end = np.asarray(end, dtype=np.float64)
    point = np.asarray(point, dtype=np.float64)

    line = end - start
    length = float(np.linalg.norm(line))
    if length <= _EPSILON:
        return start.copy()

    direction = line / length
    d = float(np.dot(point - start, direction))
    d = min(max(d, 0.0), length)
    return start + direction * d
