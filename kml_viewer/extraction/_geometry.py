"""Geometry extraction for a single placemark.

Point, LineString and MultiGeometry children are handled independently:
a composite placemark carrying several kinds yields one geometry per
kind (and per repeated child).  Only LineString members of a
MultiGeometry are extracted.
"""

from __future__ import annotations

from typing import Any

from kml_viewer.extraction._coordinates import parse_coordinate, parse_coordinates_text
from kml_viewer.extraction._errors import MalformedCoordinateError
from kml_viewer.extraction._walker import child_nodes, node_text
from kml_viewer.models.geometry import (
    Geometry,
    LineStringGeometry,
    MultiLineGeometry,
    PointGeometry,
)


def extract_geometries(placemark: Any, *, label: str = "") -> list[Geometry]:
    """Extract every supported geometry of *placemark* in a fixed kind order.

    Args:
        placemark: One placemark node from the deserialized tree.
        label: Placemark name or index used in error messages.

    Returns:
        Points first, then LineStrings, then MultiGeometries.  Empty when
        the placemark carries no supported geometry.

    Raises:
        MalformedCoordinateError: If any coordinate token is malformed.
    """
    if not isinstance(placemark, dict):
        return []

    geometries: list[Geometry] = []
    try:
        for point in child_nodes(placemark, "Point"):
            geometries.append(_extract_point(point))

        for line in child_nodes(placemark, "LineString"):
            geometries.append(_extract_line(line))

        for multi in child_nodes(placemark, "MultiGeometry"):
            lines = tuple(_extract_line(line) for line in child_nodes(multi, "LineString"))
            if lines:
                geometries.append(MultiLineGeometry(lines=lines))
    except MalformedCoordinateError as exc:
        msg = f"{exc.message} in Placemark '{label}'" if label else exc.message
        raise MalformedCoordinateError(msg) from exc

    return geometries


def _coordinates_field(node: Any) -> str:
    if not isinstance(node, dict):
        return ""
    return node_text(node.get("coordinates"))


def _extract_point(node: Any) -> PointGeometry:
    tokens = _coordinates_field(node).split()
    if len(tokens) != 1:
        msg = f"Malformed coordinate: <Point> needs exactly one coordinate, got {len(tokens)}"
        raise MalformedCoordinateError(msg)
    return PointGeometry(coordinate=parse_coordinate(tokens[0]))


def _extract_line(node: Any) -> LineStringGeometry:
    return LineStringGeometry(coordinates=parse_coordinates_text(_coordinates_field(node)))
