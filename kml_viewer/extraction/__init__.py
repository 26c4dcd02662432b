"""KML element extraction — composable pipeline.

Turns KML text into per-geometry-type counts, geodesic lengths for line
features, and a flat list of render-ready map elements.

The pipeline is split into focused stages:
- **_deserialize**: well-formedness check (lxml) and dict tree (xmltodict)
- **_walker**: single-vs-sequence normalisation, placemark iteration in document order
- **_geometry**: Point / LineString / MultiGeometry extraction per placemark
- **_coordinates**: ``lon,lat[,alt]`` token parsing
- **_geodesy**: haversine distance and line length
- **_aggregate**: counts, detail records, map elements

Supported KML structures:
- ``<kml><Document>`` with one or many Placemarks
- Placemarks nested in Folder hierarchies
- Point, LineString and MultiGeometry-of-LineString placemarks
- Composite placemarks carrying several geometry kinds

Any error aborts the whole pass: a document either yields a complete
result or raises, never a partial result.
"""

from __future__ import annotations

import logging

from kml_viewer.core.constants import LENGTH_MODEL_HAVERSINE
from kml_viewer.extraction._aggregate import Aggregator
from kml_viewer.extraction._coordinates import parse_coordinate, parse_coordinates_text
from kml_viewer.extraction._deserialize import KmlDocument, deserialize, load_document, validate_xml
from kml_viewer.extraction._errors import (
    KmlParseError,
    MalformedCoordinateError,
    MissingDocumentRootError,
    MissingPlacemarksError,
)
from kml_viewer.extraction._geodesy import haversine_distance, line_length
from kml_viewer.extraction._geometry import extract_geometries
from kml_viewer.extraction._walker import as_sequence, iter_placemarks, placemark_name
from kml_viewer.models.results import ExtractionResult

logger = logging.getLogger("kml_viewer.extraction")

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "Aggregator",
    "KmlDocument",
    "KmlParseError",
    "MalformedCoordinateError",
    "MissingDocumentRootError",
    "MissingPlacemarksError",
    "as_sequence",
    "deserialize",
    "extract_elements",
    "extract_geometries",
    "haversine_distance",
    "iter_placemarks",
    "line_length",
    "load_document",
    "parse_coordinate",
    "parse_coordinates_text",
    "validate_xml",
]


def extract_elements(
    content: str | bytes,
    *,
    source_filename: str = "",
    length_model: str = LENGTH_MODEL_HAVERSINE,
) -> ExtractionResult:
    """Extract counts, length records and map elements from KML text.

    Args:
        content: Raw KML document (text, or bytes honouring the XML
            encoding declaration).
        source_filename: Original filename, used in logs and errors.
        length_model: ``haversine`` (default) or ``wgs84``.

    Returns:
        The complete ``ExtractionResult`` for the document.

    Raises:
        KmlParseError: If the document is not well-formed XML.
        MissingDocumentRootError: If there is no ``<kml><Document>``.
        MissingPlacemarksError: If the document has no placemarks.
        MalformedCoordinateError: If any coordinate token is malformed.
    """
    display_name = source_filename or "<text>"
    logger.info("Extracting KML elements from %s", display_name)

    document = load_document(content, source_filename=source_filename)
    aggregator = Aggregator(length_model=length_model)

    try:
        for idx, placemark in enumerate(iter_placemarks(document)):
            name = placemark_name(placemark)
            geometries = extract_geometries(placemark, label=name or f"#{idx}")
            aggregator.add_placemark(geometries, name=name)
    except (MissingDocumentRootError, MissingPlacemarksError, MalformedCoordinateError) as exc:
        exc.source = exc.source or source_filename
        logger.warning("Extraction failed for %s: %s", display_name, exc)
        raise

    result = aggregator.result(source_file=source_filename)
    logger.info(
        "Extracted %s from %s | records=%d | elements=%d",
        result.counts.as_dict(),
        display_name,
        len(result.records),
        len(result.elements),
    )
    return result
