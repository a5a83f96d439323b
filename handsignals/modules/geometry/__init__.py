"""Vector and segment helpers."""
from .segment import clamp01, distance, inverse_lerp, nearest_point_on_segment, normalized

__all__ = ["clamp01", "distance", "inverse_lerp", "nearest_point_on_segment", "normalized"]
