"""Overlap classification and trimming for newly drawn polygons."""

from .classify import OverlapResult, classify_overlaps, polygonal_features
from .trim import TrimResult, trim_overlaps

__all__ = [
    "OverlapResult",
    "classify_overlaps",
    "polygonal_features",
    "TrimResult",
    "trim_overlaps",
]
