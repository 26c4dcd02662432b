"""Orchestrator for one KML upload.

Coordinates the steps between the file picker and the map UI:

1. Ingress — validate name / content type / size, decode the bytes
2. Extraction — counts, detail records, map elements
3. Report — render-ready ``ViewerReport``

An upload either produces a complete report or a single error payload.
No partial result is ever published, so the UI can simply replace
whatever it showed for the previous upload with the new outcome.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from kml_viewer.core.config import ViewerConfig
from kml_viewer.core.exceptions import KmlViewerError
from kml_viewer.core.ingress import decode_upload, validate_upload
from kml_viewer.extraction import extract_elements
from kml_viewer.models.report import ViewerReport

if TYPE_CHECKING:
    from kml_viewer.models.results import ExtractionResult

logger = logging.getLogger("kml_viewer.orchestrators.upload")


@dataclass(frozen=True, slots=True)
class UploadOutcome:
    """Result of handling one upload: exactly one of ``report`` / ``error`` is set.

    Attributes:
        report: UI payload for a successful upload.
        result: The underlying extraction result for a successful upload.
        error: Structured error payload (``to_error_dict()``) for a failure.
    """

    report: ViewerReport | None = None
    result: ExtractionResult | None = None
    error: dict[str, object] | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_message(self) -> str:
        """User-facing failure message, ``""`` on success."""
        if self.error is None:
            return ""
        return str(self.error.get("message", ""))


def handle_upload(
    content: bytes,
    *,
    filename: str,
    content_type: str = "",
    config: ViewerConfig | None = None,
) -> UploadOutcome:
    """Validate, extract and report one uploaded KML file.

    Domain errors are converted into ``UploadOutcome.error``; anything
    else propagates.
    """
    config = config or ViewerConfig()

    try:
        validate_upload(filename, content_type, len(content), config)
        text = decode_upload(content, filename=filename)
        result = extract_elements(
            text,
            source_filename=filename,
            length_model=config.length_model,
        )
    except KmlViewerError as exc:
        exc.source = exc.source or filename
        logger.warning(
            "Upload failed | file=%s | code=%s | error=%s",
            filename,
            exc.code,
            exc.message,
        )
        return UploadOutcome(error=exc.to_error_dict())

    report = ViewerReport.from_result(result, config)
    logger.info(
        "Upload processed | file=%s | placemarks=%d | elements=%d",
        filename,
        result.counts.placemark,
        len(result.elements),
    )
    return UploadOutcome(report=report, result=result)
