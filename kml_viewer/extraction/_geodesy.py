"""Geodesic distance and line length.

``haversine_distance`` treats the Earth as a sphere of radius
``EARTH_RADIUS_M`` and ignores altitude.  ``line_length`` sums the
distances between consecutive coordinates; the optional ``wgs84``
model measures on the WGS 84 ellipsoid with ``pyproj.Geod`` instead.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from kml_viewer.core.constants import (
    EARTH_RADIUS_M,
    LENGTH_MODEL_HAVERSINE,
    LENGTH_MODEL_WGS84,
)
from kml_viewer.models.geometry import Coordinate


def haversine_distance(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance between two coordinates in metres."""
    phi1 = math.radians(a.lat)
    phi2 = math.radians(b.lat)
    delta_phi = math.radians(b.lat - a.lat)
    delta_lambda = math.radians(b.lon - a.lon)

    h = (
        math.sin(delta_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2) ** 2
    )
    # rounding can leave h just outside [0, 1] for near-antipodal points
    h = min(1.0, max(0.0, h))
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_M * c


def line_length(
    coordinates: Sequence[Coordinate],
    *,
    model: str = LENGTH_MODEL_HAVERSINE,
) -> float:
    """Length of a path in metres; zero for fewer than two coordinates.

    Raises:
        ValueError: If *model* is not a supported length model.
    """
    if len(coordinates) < 2:
        return 0.0

    if model == LENGTH_MODEL_HAVERSINE:
        return sum(
            haversine_distance(coordinates[i], coordinates[i + 1])
            for i in range(len(coordinates) - 1)
        )

    if model == LENGTH_MODEL_WGS84:
        from pyproj import Geod

        geod = Geod(ellps="WGS84")
        lons = [c.lon for c in coordinates]
        lats = [c.lat for c in coordinates]
        return float(geod.line_length(lons, lats))

    msg = f"Unsupported length model: {model!r}"
    raise ValueError(msg)
