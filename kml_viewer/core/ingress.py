"""Thin ingress boundary helpers for uploaded KML files.

Centralises the two transport concerns in front of the extractor so
callers (CLI, upload handler) contain only handoff logic:

- **validate_upload** — accepts ``.kml`` files or the KML content type,
  rejecting empty and oversized uploads.
- **decode_upload** — turns uploaded bytes into document text.
"""

from __future__ import annotations

import logging
from pathlib import PurePath
from typing import TYPE_CHECKING

from kml_viewer.core.constants import (
    KML_CONTENT_TYPE,
    KML_FILE_SUFFIX,
    UPLOAD_REJECTED_MESSAGE,
)
from kml_viewer.core.exceptions import ValidationError

if TYPE_CHECKING:
    from kml_viewer.core.config import ViewerConfig

logger = logging.getLogger("kml_viewer.core.ingress")


class UploadRejectedError(ValidationError):
    """Raised when an upload is not an acceptable KML file."""

    default_stage = "ingress"
    default_code = "UPLOAD_REJECTED"


def validate_upload(
    filename: str,
    content_type: str,
    size: int,
    config: ViewerConfig,
) -> None:
    """Check that an upload looks like a KML file of acceptable size.

    An upload is accepted when its content type is the KML media type
    or, for browsers that send a generic type, its name ends in ``.kml``.

    Raises:
        UploadRejectedError: If the upload is not KML, empty, or too large.
    """
    media_type = content_type.split(";", 1)[0].strip().lower()
    is_kml = media_type == KML_CONTENT_TYPE or PurePath(filename).suffix.lower() == KML_FILE_SUFFIX

    reason = ""
    if not is_kml:
        reason = f"not a KML file (name={filename!r}, content_type={content_type!r})"
    elif size <= 0:
        reason = "file is empty"
    elif size > config.max_upload_bytes:
        reason = f"file is {size} bytes, limit is {config.max_upload_bytes}"

    if reason:
        logger.warning("Rejected upload %s: %s", filename, reason)
        raise UploadRejectedError(UPLOAD_REJECTED_MESSAGE, source=filename)

    logger.debug("Accepted upload | name=%s | content_type=%s | size=%d", filename, content_type, size)


def decode_upload(content: bytes, *, filename: str = "") -> str:
    """Decode uploaded bytes as UTF-8 text, tolerating a byte-order mark.

    Raises:
        UploadRejectedError: If the bytes are not valid UTF-8.
    """
    try:
        return content.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        logger.warning("Rejected upload %s: not UTF-8 (%s)", filename, exc)
        raise UploadRejectedError(UPLOAD_REJECTED_MESSAGE, source=filename) from exc
