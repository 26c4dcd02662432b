"""Extraction exceptions (public API, re-exported from ``__init__``)."""

from __future__ import annotations

from kml_viewer.core.exceptions import ContractError, ValidationError


class KmlParseError(ValidationError):
    """Raised when the document text is not well-formed markup."""

    default_stage = "deserialize"
    default_code = "KML_PARSE_FAILED"


class MissingDocumentRootError(ContractError):
    """Raised when the tree has no ``<kml><Document>`` root."""

    default_stage = "walk"
    default_code = "KML_DOCUMENT_MISSING"


class MissingPlacemarksError(ContractError):
    """Raised when the document contains no ``<Placemark>`` at all."""

    default_stage = "walk"
    default_code = "KML_PLACEMARKS_MISSING"


class MalformedCoordinateError(ValidationError):
    """Raised when a coordinate token is not ``lon,lat[,alt]`` with finite numbers."""

    default_stage = "extract"
    default_code = "KML_COORDINATE_MALFORMED"
