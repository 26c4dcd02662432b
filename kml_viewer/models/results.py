"""Result collections produced by one extraction pass.

An ``ExtractionResult`` bundles the three outputs the map UI consumes:

- ``counts``: per-geometry-type counts plus the placemark total,
- ``records``: one ``DetailedRecord`` per LineString (top-level or nested
  in a MultiGeometry) with its geodesic length,
- ``elements``: one ``MapElement`` per Point and per LineString.

All three are immutable and preserve document order.  A new upload
produces a new result; nothing is mutated across passes.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from kml_viewer.models.geometry import Coordinate, GeometryType

PLACEMARK_LABEL = "Placemark"


@dataclass(frozen=True, slots=True)
class ElementCounts:
    """Counts keyed by geometry-type label.

    Behaves like a read-only mapping over the labels ``Point``,
    ``LineString``, ``MultiLineString`` and ``Placemark``.
    """

    point: int = 0
    line_string: int = 0
    multi_line_string: int = 0
    placemark: int = 0

    def as_dict(self) -> dict[str, int]:
        """Return the counts keyed by label, in display order."""
        return {
            GeometryType.POINT.value: self.point,
            GeometryType.LINE_STRING.value: self.line_string,
            GeometryType.MULTI_LINE_STRING.value: self.multi_line_string,
            PLACEMARK_LABEL: self.placemark,
        }

    def __getitem__(self, label: str) -> int:
        return self.as_dict()[str(label)]

    def keys(self) -> list[str]:
        return list(self.as_dict())


@dataclass(frozen=True, slots=True)
class DetailedRecord:
    """Length record for one LineString.

    Attributes:
        type: ``LineString`` for top-level lines, ``MultiLineString`` for
            lines nested in a MultiGeometry.
        length: Haversine length in metres (sphere of ``EARTH_RADIUS_M``).
        coordinates: The line's coordinates in document order.
        name: Name of the owning placemark (empty when unnamed).
        ellipsoidal_length: WGS 84 length in metres, only measured when
            the ``wgs84`` length model is selected.
    """

    type: GeometryType
    length: float
    coordinates: tuple[Coordinate, ...] = field(default_factory=tuple)
    name: str = ""
    ellipsoidal_length: float | None = None

    @property
    def display_length(self) -> float:
        """Length shown to the user: ellipsoidal when measured, else haversine."""
        if self.ellipsoidal_length is not None:
            return self.ellipsoidal_length
        return self.length

    def to_dict(self) -> dict[str, object]:
        return {
            "type": self.type.value,
            "length": self.length,
            "ellipsoidal_length": self.ellipsoidal_length,
            "coordinates": [list(c.as_pair()) for c in self.coordinates],
            "name": self.name,
        }


@dataclass(frozen=True, slots=True)
class PointElement:
    """A marker to render at ``position``."""

    position: Coordinate
    name: str = ""

    @property
    def type(self) -> GeometryType:
        return GeometryType.POINT


@dataclass(frozen=True, slots=True)
class PathElement:
    """A polyline to render along ``path``."""

    type: GeometryType
    path: tuple[Coordinate, ...] = field(default_factory=tuple)
    name: str = ""


MapElement = PointElement | PathElement


@dataclass(frozen=True, slots=True)
class ExtractionResult:
    """Complete, immutable output of one extraction pass."""

    counts: ElementCounts = field(default_factory=ElementCounts)
    records: tuple[DetailedRecord, ...] = field(default_factory=tuple)
    elements: tuple[MapElement, ...] = field(default_factory=tuple)
    source_file: str = ""

    @property
    def total_length(self) -> float:
        """Sum of all record lengths in metres."""
        return sum(record.length for record in self.records)

    def to_dict(self) -> dict[str, object]:
        """Serialise with internal ``[lon, lat]`` coordinate order."""
        elements: list[dict[str, object]] = []
        for element in self.elements:
            if isinstance(element, PointElement):
                elements.append(
                    {
                        "type": element.type.value,
                        "position": list(element.position.as_pair()),
                        "name": element.name,
                    }
                )
            else:
                elements.append(
                    {
                        "type": element.type.value,
                        "path": [list(c.as_pair()) for c in element.path],
                        "name": element.name,
                    }
                )
        return {
            "counts": self.counts.as_dict(),
            "records": [record.to_dict() for record in self.records],
            "elements": elements,
            "source_file": self.source_file,
        }
