"""Pydantic report model consumed by the map UI.

``ViewerReport`` is the single payload the UI renders: the summary
table, the detail table, the map elements, and the initial map view.

Coordinate order is handled in exactly one place, ``to_render_pair``:
the extractor stores every coordinate as ``(lon, lat)`` and the report
converts points and paths alike to the renderer's order (``latlon`` for
Leaflet-style maps, the default, or ``lonlat``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

from kml_viewer.core.constants import RENDER_ORDER_LATLON, RENDER_ORDER_LONLAT
from kml_viewer.models.geometry import Coordinate
from kml_viewer.models.results import ExtractionResult, PathElement, PointElement

if TYPE_CHECKING:
    from kml_viewer.core.config import ViewerConfig

SCHEMA_VERSION = "kml-viewer-report-v1"


def to_render_pair(coordinate: Coordinate, order: str = RENDER_ORDER_LATLON) -> list[float]:
    """Return *coordinate* as a two-element list in the renderer's order.

    Raises:
        ValueError: If *order* is not ``latlon`` or ``lonlat``.
    """
    if order == RENDER_ORDER_LATLON:
        return [coordinate.lat, coordinate.lon]
    if order == RENDER_ORDER_LONLAT:
        return [coordinate.lon, coordinate.lat]
    msg = f"Unsupported render order: {order!r}"
    raise ValueError(msg)


class SummaryRow(BaseModel):
    """One row of the element count table."""

    element_type: str
    count: int = 0


class DetailRow(BaseModel):
    """One row of the length table.

    Attributes:
        element_type: ``LineString`` or ``MultiLineString``.
        length_m: Line length in metres, rounded for display (WGS 84
            when that length model is selected, haversine otherwise).
        name: Owning placemark name.
    """

    element_type: str
    length_m: float = 0.0
    name: str = ""


class MapElementPayload(BaseModel):
    """A marker (``position``) or polyline (``path``) in render order."""

    type: str
    position: list[float] | None = None
    path: list[list[float]] | None = None
    name: str = ""


class MapView(BaseModel):
    """Initial map view.

    Attributes:
        center: Map centre in render order.
        zoom: Zoom level to use when ``bounds`` is absent.
        bounds: ``[south-west, north-east]`` corners in render order, or
            ``None`` for a document without elements.
    """

    center: list[float] = Field(default_factory=list)
    zoom: int = 13
    bounds: list[list[float]] | None = None


class ViewerReport(BaseModel):
    """Complete UI payload for one uploaded document."""

    schema_version: str = Field(default=SCHEMA_VERSION, alias="$schema")
    source_file: str = ""
    render_order: str = RENDER_ORDER_LATLON
    summary: list[SummaryRow] = Field(default_factory=list)
    detail: list[DetailRow] = Field(default_factory=list)
    elements: list[MapElementPayload] = Field(default_factory=list)
    view: MapView = Field(default_factory=MapView)

    model_config = {"populate_by_name": True}

    @classmethod
    def from_result(
        cls,
        result: ExtractionResult,
        config: ViewerConfig | None = None,
    ) -> ViewerReport:
        """Build the UI payload from an extraction result.

        Lengths are rounded to ``config.length_precision`` decimals and
        every coordinate is converted with ``to_render_pair``.
        """
        from kml_viewer.core.config import ViewerConfig

        config = config or ViewerConfig()
        order = config.render_order

        elements: list[MapElementPayload] = []
        for element in result.elements:
            if isinstance(element, PointElement):
                elements.append(
                    MapElementPayload(
                        type=element.type.value,
                        position=to_render_pair(element.position, order),
                        name=element.name,
                    )
                )
            else:
                elements.append(
                    MapElementPayload(
                        type=element.type.value,
                        path=[to_render_pair(c, order) for c in element.path],
                        name=element.name,
                    )
                )

        return cls(
            source_file=result.source_file,
            render_order=order,
            summary=[
                SummaryRow(element_type=label, count=count)
                for label, count in result.counts.as_dict().items()
            ],
            detail=[
                DetailRow(
                    element_type=record.type.value,
                    length_m=round(record.display_length, config.length_precision),
                    name=record.name,
                )
                for record in result.records
            ],
            elements=elements,
            view=compute_map_view(result, config),
        )

    def to_json(self, *, indent: int = 2) -> str:
        """Serialise to a JSON string using the ``$schema`` alias."""
        return self.model_dump_json(indent=indent, by_alias=True)

    def to_dict(self) -> dict[str, object]:
        return self.model_dump(by_alias=True)  # type: ignore[return-value]


# ---------------------------------------------------------------------------
# Shapely helpers
# ---------------------------------------------------------------------------


def _shapely_geometry(element: PointElement | PathElement) -> Any:
    """Return a 2-D shapely geometry for *element*, ``None`` for an empty path."""
    from shapely.geometry import LineString, Point

    if isinstance(element, PointElement):
        return Point(element.position.as_pair())
    pairs = [c.as_pair() for c in element.path]
    if not pairs:
        return None
    if len(pairs) == 1:
        return Point(pairs[0])
    return LineString(pairs)


def compute_map_view(result: ExtractionResult, config: ViewerConfig) -> MapView:
    """Fit the map view to every element, or fall back to the default centre."""
    from shapely.geometry import GeometryCollection

    geometries = [g for g in (_shapely_geometry(e) for e in result.elements) if g is not None]
    if not geometries:
        lat, lon = config.default_center
        return MapView(
            center=to_render_pair(Coordinate(lon=lon, lat=lat), config.render_order),
            zoom=config.default_zoom,
            bounds=None,
        )

    min_lon, min_lat, max_lon, max_lat = GeometryCollection(geometries).bounds
    south_west = Coordinate(lon=min_lon, lat=min_lat)
    north_east = Coordinate(lon=max_lon, lat=max_lat)
    centre = Coordinate(lon=(min_lon + max_lon) / 2, lat=(min_lat + max_lat) / 2)
    order = config.render_order
    return MapView(
        center=to_render_pair(centre, order),
        zoom=config.default_zoom,
        bounds=[to_render_pair(south_west, order), to_render_pair(north_east, order)],
    )


def to_geojson(result: ExtractionResult) -> dict[str, object]:
    """Export the map elements as a GeoJSON FeatureCollection.

    GeoJSON positions are always ``[lon, lat]``.  A path with fewer than
    two coordinates gets a ``null`` geometry.
    """
    from shapely.geometry import LineString, mapping

    lengths = iter(result.records)
    features: list[dict[str, object]] = []
    for element in result.elements:
        properties: dict[str, object] = {"type": element.type.value, "name": element.name}
        if isinstance(element, PointElement):
            geometry = mapping(_shapely_geometry(element))
        else:
            # records and path elements are emitted pairwise in the same order
            properties["length_m"] = next(lengths).display_length
            pairs = [c.as_pair() for c in element.path]
            geometry = mapping(LineString(pairs)) if len(pairs) >= 2 else None
        features.append({"type": "Feature", "geometry": geometry, "properties": properties})
    return {"type": "FeatureCollection", "features": features}
