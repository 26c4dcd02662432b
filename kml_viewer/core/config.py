"""Viewer configuration loaded from environment variables.

All configuration values have sensible defaults matching the map UI
the extractor feeds (Leaflet-style ``[lat, lon]`` positions, lengths
shown with two decimals).

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any value is out
    of its valid range, so bad configuration is caught at startup rather
    than on the first upload.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from kml_viewer.core.constants import (
    DEFAULT_MAP_CENTER,
    DEFAULT_MAP_ZOOM,
    DEFAULT_MAX_UPLOAD_BYTES,
    LENGTH_MODEL_HAVERSINE,
    LENGTH_MODELS,
    RENDER_ORDER_LATLON,
    RENDER_ORDERS,
)
from kml_viewer.core.exceptions import KmlViewerError

MAX_LENGTH_PRECISION = 10
MAX_MAP_ZOOM = 22


class ConfigValidationError(KmlViewerError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class ViewerConfig:
    """Immutable viewer configuration.

    Attributes:
        max_upload_bytes: Largest accepted KML upload in bytes.
        length_precision: Decimal places used when reporting lengths.
        render_order: Coordinate order handed to the map renderer
            (``latlon`` or ``lonlat``).
        length_model: Length shown to the user (``haversine`` or ``wgs84``).
            Records always carry the haversine ``length``; ``wgs84`` adds
            an ``ellipsoidal_length`` alongside it.
        default_center: Map centre ``(lat, lon)`` used for empty documents.
        default_zoom: Map zoom level used for empty documents.
    """

    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES
    length_precision: int = 2
    render_order: str = RENDER_ORDER_LATLON
    length_model: str = LENGTH_MODEL_HAVERSINE
    default_center: tuple[float, float] = DEFAULT_MAP_CENTER
    default_zoom: int = DEFAULT_MAP_ZOOM

    @classmethod
    def from_env(cls) -> ViewerConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range or not one
                of the supported choices.
            ValueError: If a numeric environment variable cannot be
                parsed (e.g. ``KML_LENGTH_PRECISION=abc``).
        """
        config = cls(
            max_upload_bytes=int(os.getenv("KML_MAX_UPLOAD_BYTES", str(DEFAULT_MAX_UPLOAD_BYTES))),
            length_precision=int(os.getenv("KML_LENGTH_PRECISION", "2")),
            render_order=os.getenv("KML_RENDER_ORDER", RENDER_ORDER_LATLON).strip().lower(),
            length_model=os.getenv("KML_LENGTH_MODEL", LENGTH_MODEL_HAVERSINE).strip().lower(),
            default_center=(
                float(os.getenv("KML_MAP_CENTER_LAT", str(DEFAULT_MAP_CENTER[0]))),
                float(os.getenv("KML_MAP_CENTER_LON", str(DEFAULT_MAP_CENTER[1]))),
            ),
            default_zoom=int(os.getenv("KML_MAP_ZOOM", str(DEFAULT_MAP_ZOOM))),
        )
        _validate(config)
        return config


def _validate(config: ViewerConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if config.max_upload_bytes <= 0:
        raise ConfigValidationError(
            "KML_MAX_UPLOAD_BYTES",
            config.max_upload_bytes,
            "must be > 0 (bytes)",
        )

    if not 0 <= config.length_precision <= MAX_LENGTH_PRECISION:
        raise ConfigValidationError(
            "KML_LENGTH_PRECISION",
            config.length_precision,
            f"must be between 0 and {MAX_LENGTH_PRECISION} (decimal places)",
        )

    if config.render_order not in RENDER_ORDERS:
        raise ConfigValidationError(
            "KML_RENDER_ORDER",
            config.render_order,
            f"must be one of {sorted(RENDER_ORDERS)}",
        )

    if config.length_model not in LENGTH_MODELS:
        raise ConfigValidationError(
            "KML_LENGTH_MODEL",
            config.length_model,
            f"must be one of {sorted(LENGTH_MODELS)}",
        )

    lat, lon = config.default_center
    if not -90.0 <= lat <= 90.0:
        raise ConfigValidationError("KML_MAP_CENTER_LAT", lat, "must be between -90 and 90")
    if not -180.0 <= lon <= 180.0:
        raise ConfigValidationError("KML_MAP_CENTER_LON", lon, "must be between -180 and 180")

    if not 0 <= config.default_zoom <= MAX_MAP_ZOOM:
        raise ConfigValidationError(
            "KML_MAP_ZOOM",
            config.default_zoom,
            f"must be between 0 and {MAX_MAP_ZOOM}",
        )
