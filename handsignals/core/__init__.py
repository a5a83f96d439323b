"""Skeleton data model and the per-frame evaluation engine."""
