"""
Tests for Geometry Helpers
==========================
"""

import numpy as np
import pytest

from handsignals.modules.geometry.segment import (
    distance,
    inverse_lerp,
    nearest_point_on_segment,
    normalized,
)


class TestNearestPointOnSegment:
    """Test suite for clamped segment projection."""

    @pytest.fixture
    def segment(self):
        return np.array([0.0, 0.0, 0.0]), np.array([10.0, 0.0, 0.0])

    def test_orthogonal_projection(self, segment):
        start, end = segment
        result = nearest_point_on_segment(start, end, np.array([5.0, 5.0, 0.0]))
        assert np.allclose(result, [5.0, 0.0, 0.0])

    def test_before_start_clamps_to_start(self, segment):
        start, end = segment
        result = nearest_point_on_segment(start, end, np.array([-3.0, 5.0, 0.0]))
        assert np.allclose(result, [0.0, 0.0, 0.0])

    def test_beyond_end_clamps_to_end(self, segment):
        start, end = segment
        result = nearest_point_on_segment(start, end, np.array([15.0, -2.0, 4.0]))
        assert np.allclose(result, [10.0, 0.0, 0.0])

    def test_point_on_segment(self, segment):
        start, end = segment
        result = nearest_point_on_segment(start, end, np.array([7.5, 0.0, 0.0]))
        assert np.allclose(result, [7.5, 0.0, 0.0])

    def test_zero_length_segment_returns_start(self):
        start = np.array([1.0, 2.0, 3.0])
        result = nearest_point_on_segment(start, start.copy(), np.array([4.0, 4.0, 4.0]))
        assert np.allclose(result, [1.0, 2.0, 3.0])
        assert np.all(np.isfinite(result))

    def test_accepts_sequences(self):
        result = nearest_point_on_segment((0, 0, 0), (0, 0, 2), (1, 1, 1))
        assert np.allclose(result, [0.0, 0.0, 1.0])


class TestInverseLerp:
    """Test suite for clamped inverse interpolation."""

    def test_midpoint(self):
        assert inverse_lerp(0.0, 10.0, 5.0) == pytest.approx(0.5)

    def test_clamps_below_and_above(self):
        assert inverse_lerp(0.0, 10.0, -5.0) == 0.0
        assert inverse_lerp(0.0, 10.0, 15.0) == 1.0

    def test_reversed_bounds(self):
        # a > b: below b reads 1, above a reads 0
        assert inverse_lerp(10.0, 0.0, -1.0) == 1.0
        assert inverse_lerp(10.0, 0.0, 11.0) == 0.0
        assert inverse_lerp(10.0, 0.0, 2.5) == pytest.approx(0.75)

    def test_equal_bounds(self):
        assert inverse_lerp(3.0, 3.0, 3.0) == 0.0
        assert inverse_lerp(3.0, 3.0, 100.0) == 0.0


class TestVectorHelpers:

    def test_distance(self):
        assert distance((0, 0, 0), (3, 4, 0)) == pytest.approx(5.0)

    def test_normalized(self):
        assert np.allclose(normalized(np.array([0.0, 3.0, 4.0])), [0.0, 0.6, 0.8])

    def test_normalized_zero_vector(self):
        assert np.allclose(normalized(np.zeros(3)), [0.0, 0.0, 0.0])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
