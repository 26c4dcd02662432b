"""Geometry data model for extracted KML shapes.

Coordinates are always stored as ``(lon, lat[, alt])``, matching the KML
coordinate token order.  Any reordering needed by a map renderer
happens at the rendering boundary (see ``kml_viewer.models.report``),
never here.

The geometry variants form a closed set: ``PointGeometry``,
``LineStringGeometry`` and ``MultiLineGeometry``.  ``Geometry`` is the
union of the three and is what the extractor produces per placemark.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class GeometryType(StrEnum):
    """Geometry-type labels used for counts, records and map elements."""

    POINT = "Point"
    LINE_STRING = "LineString"
    MULTI_LINE_STRING = "MultiLineString"


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A WGS 84 position in degrees.

    Attributes:
        lon: Longitude in decimal degrees.
        lat: Latitude in decimal degrees.
        alt: Optional altitude in metres.  Never used for length.
    """

    lon: float
    lat: float
    alt: float | None = None

    def as_pair(self) -> tuple[float, float]:
        """Return ``(lon, lat)``, dropping altitude."""
        return (self.lon, self.lat)


@dataclass(frozen=True, slots=True)
class PointGeometry:
    """A single-position placemark geometry."""

    coordinate: Coordinate

    @property
    def geometry_type(self) -> GeometryType:
        return GeometryType.POINT


@dataclass(frozen=True, slots=True)
class LineStringGeometry:
    """An ordered path of coordinates.

    A meaningful length needs at least two coordinates; shorter paths
    are kept and measure zero.
    """

    coordinates: tuple[Coordinate, ...] = field(default_factory=tuple)

    @property
    def geometry_type(self) -> GeometryType:
        return GeometryType.LINE_STRING


@dataclass(frozen=True, slots=True)
class MultiLineGeometry:
    """The LineString members of a ``<MultiGeometry>``, in document order."""

    lines: tuple[LineStringGeometry, ...] = field(default_factory=tuple)

    @property
    def geometry_type(self) -> GeometryType:
        return GeometryType.MULTI_LINE_STRING


Geometry = PointGeometry | LineStringGeometry | MultiLineGeometry
