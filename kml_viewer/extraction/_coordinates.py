"""KML coordinate token parsing.

A token is ``lon,lat`` or ``lon,lat,alt``; tokens inside a
``<coordinates>`` field are separated by any whitespace.  Every field
must be a finite number, so a bad token fails loudly instead of
leaking ``NaN`` into length sums.
"""

from __future__ import annotations

import math

from kml_viewer.extraction._errors import MalformedCoordinateError
from kml_viewer.models.geometry import Coordinate

MIN_COORDINATE_FIELDS = 2
MAX_COORDINATE_FIELDS = 3


def parse_coordinate(token: str) -> Coordinate:
    """Parse a single ``lon,lat[,alt]`` token into a ``Coordinate``.

    Raises:
        MalformedCoordinateError: If the token does not have two or three
            comma-separated fields, or any field is not a finite number.
    """
    stripped = token.strip()
    if not stripped:
        msg = "Malformed coordinate: empty token"
        raise MalformedCoordinateError(msg)

    parts = stripped.split(",")
    if not MIN_COORDINATE_FIELDS <= len(parts) <= MAX_COORDINATE_FIELDS:
        msg = (
            f"Malformed coordinate {stripped!r}: expected lon,lat[,alt], "
            f"got {len(parts)} field(s)"
        )
        raise MalformedCoordinateError(msg)

    values: list[float] = []
    for part in parts:
        try:
            value = float(part)
        except ValueError as exc:
            msg = f"Malformed coordinate {stripped!r}: {part.strip()!r} is not a number"
            raise MalformedCoordinateError(msg) from exc
        if not math.isfinite(value):
            msg = f"Malformed coordinate {stripped!r}: {part.strip()!r} is not finite"
            raise MalformedCoordinateError(msg)
        values.append(value)

    alt = values[2] if len(values) == MAX_COORDINATE_FIELDS else None
    return Coordinate(lon=values[0], lat=values[1], alt=alt)


def parse_coordinates_text(text: str | None) -> tuple[Coordinate, ...]:
    """Parse a whitespace-separated ``<coordinates>`` field.

    Blank or missing text yields an empty tuple.

    Raises:
        MalformedCoordinateError: If any token is malformed.
    """
    if not text:
        return ()
    return tuple(parse_coordinate(token) for token in text.split())
