"""Simple feature visualization helpers for debugging."""

import matplotlib.pyplot as plt
from shapely.geometry import LineString, MultiPolygon, Polygon
from shapely.geometry.base import BaseGeometry


def plot_resolution(existing, candidate: BaseGeometry, resolution, title: str = "Shape Resolution"):
    """Plot existing features with the candidate, next to the resolved result.

    Args:
        existing: Features that were already accepted
        candidate: Geometry that was drawn
        resolution: Accepted or Rejected returned by the policy
        title: Plot title
    """
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(12, 5))

    for feature in existing:
        _plot_geometry(ax1, feature.geometry, color='gray', alpha=0.4)
        _plot_geometry(ax2, feature.geometry, color='gray', alpha=0.4)
    _plot_geometry(ax1, candidate, color='red', alpha=0.5)
    ax1.set_title("Candidate")

    feature = getattr(resolution, 'feature', None)
    if feature is not None:
        _plot_geometry(ax2, feature.geometry, color='blue', alpha=0.5)
        ax2.set_title(f"{feature.name} ({resolution.decision.value})")
    else:
        ax2.set_title(f"Rejected: {resolution.reason}")

    for ax in (ax1, ax2):
        ax.set_aspect('equal')
        ax.grid(True, alpha=0.3)
        ax.set_xlabel("longitude")
        ax.set_ylabel("latitude")

    fig.suptitle(title)
    plt.tight_layout()
    plt.show()


def _plot_geometry(ax, geom: BaseGeometry, color='blue', alpha=0.5):
    if isinstance(geom, Polygon):
        _plot_polygon(ax, geom, color=color, alpha=alpha)
    elif isinstance(geom, MultiPolygon):
        for poly in geom.geoms:
            _plot_polygon(ax, poly, color=color, alpha=alpha)
    elif isinstance(geom, LineString):
        x, y = geom.xy
        ax.plot(x, y, color=color, linewidth=2)


def _plot_polygon(ax, poly: Polygon, color='blue', alpha=0.5):
    x, y = poly.exterior.xy
    ax.fill(x, y, color=color, alpha=alpha, edgecolor='black', linewidth=1.5)

    # Holes (as white)
    for interior in poly.interiors:
        x, y = interior.xy
        ax.fill(x, y, color='white', edgecolor='black', linewidth=1)
