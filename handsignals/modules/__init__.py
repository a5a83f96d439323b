"""Geometry, traversal, metric, rig and utility modules."""
