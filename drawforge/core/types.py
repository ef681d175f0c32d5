"""Type definitions for drawforge operations.

This module defines the enums shared by the synthesizer, the overlap engine
and the acceptance policy.
"""

from enum import Enum


class ShapeCategory(Enum):
    """Category of a drawn feature.

    Attributes:
        CIRCLE: Circle approximated as a regular polygon
        RECTANGLE: Axis-aligned rectangle from two corners
        POLYGON: Free-drawn polygon from clicked points
        LINESTRING: Free-drawn line (never takes part in overlap logic)

    Examples:
        >>> from drawforge import ShapeCategory
        >>> ShapeCategory('rectangle').is_polygonal
        True
        >>> ShapeCategory.LINESTRING.label
        'LineString'
    """
    CIRCLE = 'circle'
    RECTANGLE = 'rectangle'
    POLYGON = 'polygon'
    LINESTRING = 'linestring'

    @property
    def is_polygonal(self) -> bool:
        return self is not ShapeCategory.LINESTRING

    @property
    def label(self) -> str:
        """Display label used in feature names."""
        return _LABELS[self]

    @property
    def plural(self) -> str:
        """Plural used in quota messages."""
        return _PLURALS[self]

    @property
    def min_points(self) -> int:
        """Minimum number of user points needed to build the shape."""
        return _MIN_POINTS[self]


_LABELS = {
    ShapeCategory.CIRCLE: 'Circle',
    ShapeCategory.RECTANGLE: 'Rectangle',
    ShapeCategory.POLYGON: 'Polygon',
    ShapeCategory.LINESTRING: 'LineString',
}

_PLURALS = {
    ShapeCategory.CIRCLE: 'circles',
    ShapeCategory.RECTANGLE: 'rectangles',
    ShapeCategory.POLYGON: 'polygons',
    ShapeCategory.LINESTRING: 'line strings',
}

_MIN_POINTS = {
    ShapeCategory.CIRCLE: 2,
    ShapeCategory.RECTANGLE: 2,
    ShapeCategory.POLYGON: 3,
    ShapeCategory.LINESTRING: 2,
}


class OpStatus(Enum):
    """Outcome of a single geometry primitive.

    Attributes:
        OK: Operation produced a value
        EMPTY: Operation succeeded but the result is empty
        FAULT: The geometry library raised
    """
    OK = 'ok'
    EMPTY = 'empty'
    FAULT = 'fault'


class Decision(Enum):
    """Final decision of the acceptance policy.

    Attributes:
        ACCEPTED: Candidate accepted unchanged
        TRIMMED: Candidate accepted after subtracting overlaps
        REJECTED: Candidate discarded
    """
    ACCEPTED = 'accepted'
    TRIMMED = 'trimmed'
    REJECTED = 'rejected'


class RejectionKind(Enum):
    """Why a candidate was rejected.

    Attributes:
        QUOTA_EXCEEDED: Category already holds its maximum count
        INSUFFICIENT_POINTS: Not enough points to build the shape
        INVALID_SHAPE: Degenerate input (zero radius, flat rectangle)
        FULLY_ENCLOSED: Candidate lies inside an existing feature
        FULLY_OVERLAPPED: Trimming left nothing (or only a sliver)
        GEOMETRY_ERROR: Unexpected failure while processing the shape
    """
    QUOTA_EXCEEDED = 'quota_exceeded'
    INSUFFICIENT_POINTS = 'insufficient_points'
    INVALID_SHAPE = 'invalid_shape'
    FULLY_ENCLOSED = 'fully_enclosed'
    FULLY_OVERLAPPED = 'fully_overlapped'
    GEOMETRY_ERROR = 'geometry_error'


__all__ = [
    'ShapeCategory',
    'OpStatus',
    'Decision',
    'RejectionKind',
]
