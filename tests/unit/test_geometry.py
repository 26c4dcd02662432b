"""Tests for per-placemark geometry extraction.

Covers:
- Point, LineString and MultiGeometry(LineString) extraction
- Composite placemarks (several geometry kinds at once)
- Placemarks without geometry
- Malformed coordinates carry the placemark label
"""

from __future__ import annotations

import pytest

from kml_viewer.extraction import MalformedCoordinateError, extract_geometries
from kml_viewer.models.geometry import (
    Coordinate,
    GeometryType,
    LineStringGeometry,
    MultiLineGeometry,
    PointGeometry,
)


class TestSingleKinds:
    """One geometry kind per placemark."""

    def test_point(self) -> None:
        result = extract_geometries({"Point": {"coordinates": "-0.09,51.505"}})
        assert result == [PointGeometry(Coordinate(-0.09, 51.505))]
        assert result[0].geometry_type is GeometryType.POINT

    def test_point_with_attributed_coordinates(self) -> None:
        result = extract_geometries({"Point": {"coordinates": {"@id": "c", "#text": "1,2,3"}}})
        assert result == [PointGeometry(Coordinate(1.0, 2.0, 3.0))]

    def test_linestring(self) -> None:
        result = extract_geometries({"LineString": {"coordinates": "-0.1,51.5 -0.1,51.51"}})
        assert result == [
            LineStringGeometry((Coordinate(-0.1, 51.5), Coordinate(-0.1, 51.51))),
        ]

    def test_linestring_without_coordinates(self) -> None:
        assert extract_geometries({"LineString": None}) == [LineStringGeometry(())]

    def test_multigeometry_lines(self) -> None:
        placemark = {
            "MultiGeometry": {
                "LineString": [
                    {"coordinates": "0,0 0,1"},
                    {"coordinates": "1,1 2,2 3,3"},
                ]
            }
        }
        (multi,) = extract_geometries(placemark)
        assert isinstance(multi, MultiLineGeometry)
        assert multi.geometry_type is GeometryType.MULTI_LINE_STRING
        assert [len(line.coordinates) for line in multi.lines] == [2, 3]

    def test_multigeometry_single_line(self) -> None:
        (multi,) = extract_geometries({"MultiGeometry": {"LineString": {"coordinates": "0,0 0,1"}}})
        assert isinstance(multi, MultiLineGeometry)
        assert len(multi.lines) == 1

    def test_multigeometry_without_lines(self) -> None:
        placemark = {"MultiGeometry": {"Point": {"coordinates": "0,0"}}}
        assert extract_geometries(placemark) == []


class TestCompositeAndEmpty:
    """Placemarks with several kinds, or none."""

    def test_point_and_linestring_both_extracted(self) -> None:
        placemark = {
            "name": "Trailhead",
            "Point": {"coordinates": "-0.1,51.5"},
            "LineString": {"coordinates": "-0.1,51.5 -0.1,51.51"},
        }
        kinds = [g.geometry_type for g in extract_geometries(placemark)]
        assert kinds == [GeometryType.POINT, GeometryType.LINE_STRING]

    def test_all_three_kinds(self) -> None:
        placemark = {
            "MultiGeometry": {"LineString": {"coordinates": "0,0 0,1"}},
            "LineString": {"coordinates": "0,0 1,0"},
            "Point": {"coordinates": "0,0"},
        }
        kinds = [g.geometry_type for g in extract_geometries(placemark)]
        assert kinds == [
            GeometryType.POINT,
            GeometryType.LINE_STRING,
            GeometryType.MULTI_LINE_STRING,
        ]

    def test_repeated_points(self) -> None:
        placemark = {"Point": [{"coordinates": "0,0"}, {"coordinates": "1,1"}]}
        assert len(extract_geometries(placemark)) == 2

    def test_no_geometry(self) -> None:
        assert extract_geometries({"name": "Label only", "description": "text"}) == []

    def test_empty_placemark(self) -> None:
        assert extract_geometries(None) == []


class TestMalformed:
    """Malformed coordinates abort extraction."""

    def test_bad_point_token_names_placemark(self) -> None:
        with pytest.raises(MalformedCoordinateError, match="in Placemark 'Broken'"):
            extract_geometries({"Point": {"coordinates": "abc,51.5"}}, label="Broken")

    def test_bad_token_in_multigeometry(self) -> None:
        placemark = {"MultiGeometry": {"LineString": {"coordinates": "0,0 zero,1"}}}
        with pytest.raises(MalformedCoordinateError):
            extract_geometries(placemark)

    def test_point_without_coordinates(self) -> None:
        with pytest.raises(MalformedCoordinateError, match="exactly one coordinate, got 0"):
            extract_geometries({"Point": None})

    def test_point_with_two_coordinates(self) -> None:
        with pytest.raises(MalformedCoordinateError, match="got 2"):
            extract_geometries({"Point": {"coordinates": "0,0 1,1"}})
