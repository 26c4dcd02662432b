"""Data models and schemas.

Defines the data structures used throughout the extractor:
- Coordinate / Geometry: parsed KML shapes
- ExtractionResult: counts, length records and map elements of one pass
- ViewerReport: Pydantic payload rendered by the map UI
"""

from kml_viewer.models.geometry import (
    Coordinate,
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

__all__ = [
    "Coordinate",
    "DetailedRecord",
    "ElementCounts",
    "ExtractionResult",
    "Geometry",
    "GeometryType",
    "LineStringGeometry",
    "MapElement",
    "MultiLineGeometry",
    "PathElement",
    "PointElement",
    "PointGeometry",
]
