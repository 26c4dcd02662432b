"""Shared constants — single source of truth.

Centralises namespaces, physical constants, and upload rules that are
used by the deserializer, the extractor, and the ingress helpers.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# KML namespaces
# ---------------------------------------------------------------------------

KML_NAMESPACE: str = "http://www.opengis.net/kml/2.2"
"""OGC KML 2.2 namespace."""

KML_NAMESPACES: tuple[str, ...] = (
    KML_NAMESPACE,
    "http://earth.google.com/kml/2.0",
    "http://earth.google.com/kml/2.1",
    "http://earth.google.com/kml/2.2",
)
"""Namespaces collapsed to bare tag names during deserialization."""

# ---------------------------------------------------------------------------
# Geodesy
# ---------------------------------------------------------------------------

EARTH_RADIUS_M: float = 6_371_000.0
"""Mean Earth radius in metres used by the haversine formula."""

LENGTH_MODEL_HAVERSINE: str = "haversine"
LENGTH_MODEL_WGS84: str = "wgs84"
LENGTH_MODELS: frozenset[str] = frozenset({LENGTH_MODEL_HAVERSINE, LENGTH_MODEL_WGS84})

# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

RENDER_ORDER_LATLON: str = "latlon"
RENDER_ORDER_LONLAT: str = "lonlat"
RENDER_ORDERS: frozenset[str] = frozenset({RENDER_ORDER_LATLON, RENDER_ORDER_LONLAT})

DEFAULT_MAP_CENTER: tuple[float, float] = (51.505, -0.09)
"""Fallback map centre as ``(lat, lon)`` when a document has no elements."""

DEFAULT_MAP_ZOOM: int = 13

# ---------------------------------------------------------------------------
# Upload rules
# ---------------------------------------------------------------------------

KML_CONTENT_TYPE: str = "application/vnd.google-earth.kml+xml"
KML_FILE_SUFFIX: str = ".kml"
DEFAULT_MAX_UPLOAD_BYTES: int = 10 * 1024 * 1024
UPLOAD_REJECTED_MESSAGE: str = "Please upload a valid KML file."
