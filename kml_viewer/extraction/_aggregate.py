"""Fold extracted geometries into counts, length records and map elements."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from kml_viewer.core.constants import LENGTH_MODEL_HAVERSINE
from kml_viewer.extraction._geodesy import line_length
from kml_viewer.models.geometry import (
    Geometry,
    GeometryType,
    LineStringGeometry,
    MultiLineGeometry,
    PointGeometry,
)
from kml_viewer.models.results import (
    DetailedRecord,
    ElementCounts,
    ExtractionResult,
    MapElement,
    PathElement,
    PointElement,
)

logger = logging.getLogger("kml_viewer.extraction.aggregate")


class Aggregator:
    """Accumulates one extraction pass, placemark by placemark.

    A fresh instance is used per pass; ``result()`` returns an immutable
    snapshot.
    """

    def __init__(self, *, length_model: str = LENGTH_MODEL_HAVERSINE) -> None:
        self.length_model = length_model
        self._points = 0
        self._lines = 0
        self._multi_lines = 0
        self._placemarks = 0
        self._records: list[DetailedRecord] = []
        self._elements: list[MapElement] = []

    def add_placemark(self, geometries: Iterable[Geometry], *, name: str = "") -> None:
        """Record one visited placemark and each of its geometries."""
        self._placemarks += 1
        for geometry in geometries:
            if isinstance(geometry, PointGeometry):
                self._points += 1
                self._elements.append(PointElement(position=geometry.coordinate, name=name))
            elif isinstance(geometry, LineStringGeometry):
                self._lines += 1
                self._add_line(geometry, GeometryType.LINE_STRING, name)
            elif isinstance(geometry, MultiLineGeometry):
                for line in geometry.lines:
                    self._multi_lines += 1
                    self._add_line(line, GeometryType.MULTI_LINE_STRING, name)
            else:
                msg = f"Unsupported geometry: {type(geometry).__name__}"
                raise TypeError(msg)

    def _add_line(self, line: LineStringGeometry, geometry_type: GeometryType, name: str) -> None:
        length = line_length(line.coordinates)
        ellipsoidal = None
        if self.length_model != LENGTH_MODEL_HAVERSINE:
            ellipsoidal = line_length(line.coordinates, model=self.length_model)
        logger.debug(
            "Measured %s | name=%s | vertices=%d | length_m=%.2f | ellipsoidal_m=%s",
            geometry_type.value,
            name,
            len(line.coordinates),
            length,
            ellipsoidal,
        )
        self._records.append(
            DetailedRecord(
                type=geometry_type,
                length=length,
                coordinates=line.coordinates,
                name=name,
                ellipsoidal_length=ellipsoidal,
            )
        )
        self._elements.append(PathElement(type=geometry_type, path=line.coordinates, name=name))

    @property
    def counts(self) -> ElementCounts:
        return ElementCounts(
            point=self._points,
            line_string=self._lines,
            multi_line_string=self._multi_lines,
            placemark=self._placemarks,
        )

    def result(self, *, source_file: str = "") -> ExtractionResult:
        """Return the immutable result of everything added so far."""
        return ExtractionResult(
            counts=self.counts,
            records=tuple(self._records),
            elements=tuple(self._elements),
            source_file=source_file,
        )
