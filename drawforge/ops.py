"""Geometry primitives used by the overlap engine.

Thin wrappers over shapely's boolean operations with the conventions the
engine relies on: empty results are ``None``, lines and points left over by
boundary contact are dropped, and areas are in square meters.

``attempt`` turns any primitive into an explicit :class:`OpResult` so callers
branch on ``OK`` / ``EMPTY`` / ``FAULT`` instead of catching library errors.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from shapely.geometry.base import BaseGeometry

from .core.geometry_utils import polygonal_part
from .core.types import OpStatus
from .geodesy import equal_area_projection


@dataclass(frozen=True)
class OpResult:
    """Outcome of one geometry primitive call."""

    status: OpStatus
    value: Any = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.status is OpStatus.OK

    @property
    def empty(self) -> bool:
        return self.status is OpStatus.EMPTY

    @property
    def faulted(self) -> bool:
        return self.status is OpStatus.FAULT


def attempt(operation: Callable[..., Any], *args: Any) -> OpResult:
    """Run ``operation(*args)`` and classify the outcome.

    Examples:
        >>> a = Polygon([(0, 0), (1, 0), (1, 1), (0, 1)])
        >>> b = Polygon([(5, 5), (6, 5), (6, 6), (5, 6)])
        >>> attempt(intersection, a, b).status
        <OpStatus.EMPTY: 'empty'>
    """
    try:
        value = operation(*args)
    except Exception as exc:
        return OpResult(OpStatus.FAULT, error=exc)
    if value is None:
        return OpResult(OpStatus.EMPTY)
    return OpResult(OpStatus.OK, value=value)


def intersection(a: BaseGeometry, b: BaseGeometry) -> Optional[BaseGeometry]:
    """Areal intersection of ``a`` and ``b``; ``None`` if they share no area."""
    if not a.intersects(b):
        return None
    return polygonal_part(a.intersection(b))


def difference(a: BaseGeometry, b: BaseGeometry) -> Optional[BaseGeometry]:
    """``a`` minus ``b``; ``None`` if ``b`` covers ``a`` entirely."""
    return polygonal_part(a.difference(b))


def area(geometry: BaseGeometry) -> float:
    """Area in square meters of a (lon, lat) geometry."""
    if geometry is None or geometry.is_empty:
        return 0.0
    return abs(equal_area_projection(geometry).area)


def within(a: BaseGeometry, b: BaseGeometry) -> bool:
    """True if every point of ``a`` lies inside or on the boundary of ``b``."""
    return bool(a.covered_by(b))


__all__ = [
    "OpResult",
    "attempt",
    "intersection",
    "difference",
    "area",
    "within",
]
