"""Core types and utilities for drawforge.

This module provides type definitions, enums, exceptions, and core utilities
used throughout the library.
"""

from .types import (
    ShapeCategory,
    OpStatus,
    Decision,
    RejectionKind,
)

from .errors import (
    DrawforgeError,
    ValidationError,
    InsufficientPointsError,
    InvalidShapeError,
    ConfigurationError,
    GeoJSONError,
)

__all__ = [
    # Enums
    'ShapeCategory',
    'OpStatus',
    'Decision',
    'RejectionKind',

    # Exceptions
    'DrawforgeError',
    'ValidationError',
    'InsufficientPointsError',
    'InvalidShapeError',
    'ConfigurationError',
    'GeoJSONError',
]
