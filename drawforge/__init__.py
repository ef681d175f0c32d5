"""Drawforge - constraint engine for shapes drawn on a map.

This library decides whether a newly drawn circle, rectangle, polygon or line
becomes part of a feature collection: it enforces per-category quotas,
rejects shapes enclosed by existing polygons and trims overlaps, using
Shapely for the geometry work.
"""

import logging

# Configuration
from .config import (
    ShapeConfig,
    ResolutionConfig,
    DEFAULT_SHAPE_CONFIG,
    DEFAULT_RESOLUTION_CONFIG,
)

# Drawing inputs
from .shapes import (
    CircleInput,
    RectangleInput,
    PolygonInput,
    LineStringInput,
    synthesize,
)

# Overlap engine
from .overlap import (
    OverlapResult,
    TrimResult,
    classify_overlaps,
    trim_overlaps,
)

# Acceptance policy
from .policy import (
    Accepted,
    Rejected,
    resolve_candidate,
    resolve_shape,
)

# Feature collection
from .features import Feature
from .store import FeatureStore
from .geojson import export_to_geojson, read_geojson, write_geojson

# Core types (enums)
from .core import (
    ShapeCategory,
    OpStatus,
    Decision,
    RejectionKind,
)

# Core exceptions
from .core import (
    DrawforgeError,
    ValidationError,
    InsufficientPointsError,
    InvalidShapeError,
    ConfigurationError,
    GeoJSONError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [

    # Configuration
    'ShapeConfig',
    'ResolutionConfig',
    'DEFAULT_SHAPE_CONFIG',
    'DEFAULT_RESOLUTION_CONFIG',

    # Drawing inputs
    'CircleInput',
    'RectangleInput',
    'PolygonInput',
    'LineStringInput',
    'synthesize',

    # Overlap engine
    'OverlapResult',
    'TrimResult',
    'classify_overlaps',
    'trim_overlaps',

    # Acceptance policy
    'Accepted',
    'Rejected',
    'resolve_candidate',
    'resolve_shape',

    # Feature collection
    'Feature',
    'FeatureStore',
    'export_to_geojson',
    'read_geojson',
    'write_geojson',

    # Core types (enums)
    'ShapeCategory',
    'OpStatus',
    'Decision',
    'RejectionKind',

    # Core exceptions
    'DrawforgeError',
    'ValidationError',
    'InsufficientPointsError',
    'InvalidShapeError',
    'ConfigurationError',
    'GeoJSONError',
]
