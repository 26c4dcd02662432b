"""Tests for the upload ingress helpers.

Validates:
- ``validate_upload`` accepts KML by content type or ``.kml`` name
- Empty, oversized and non-KML uploads are rejected
- ``decode_upload`` handles UTF-8 with and without BOM
"""

from __future__ import annotations

import pytest

from kml_viewer.core.config import ViewerConfig
from kml_viewer.core.ingress import UploadRejectedError, decode_upload, validate_upload

KML_TYPE = "application/vnd.google-earth.kml+xml"


class TestValidateUpload:
    """Accept or reject an upload before parsing."""

    def test_kml_content_type(self) -> None:
        validate_upload("route", KML_TYPE, 100, ViewerConfig())

    def test_content_type_with_parameters(self) -> None:
        validate_upload("route", f"{KML_TYPE}; charset=utf-8", 100, ViewerConfig())

    def test_kml_suffix_with_generic_type(self) -> None:
        validate_upload("Route.KML", "application/octet-stream", 100, ViewerConfig())

    def test_kml_suffix_without_type(self) -> None:
        validate_upload("route.kml", "", 100, ViewerConfig())

    def test_non_kml_rejected(self) -> None:
        with pytest.raises(UploadRejectedError, match="Please upload a valid KML file.") as exc_info:
            validate_upload("photo.png", "image/png", 100, ViewerConfig())
        assert exc_info.value.source == "photo.png"
        assert exc_info.value.stage == "ingress"

    def test_kmz_rejected(self) -> None:
        with pytest.raises(UploadRejectedError):
            validate_upload("route.kmz", "application/vnd.google-earth.kmz", 100, ViewerConfig())

    def test_empty_rejected(self) -> None:
        with pytest.raises(UploadRejectedError):
            validate_upload("route.kml", KML_TYPE, 0, ViewerConfig())

    def test_oversized_rejected(self) -> None:
        with pytest.raises(UploadRejectedError):
            validate_upload("route.kml", KML_TYPE, 2048, ViewerConfig(max_upload_bytes=1024))

    def test_at_limit_accepted(self) -> None:
        validate_upload("route.kml", KML_TYPE, 1024, ViewerConfig(max_upload_bytes=1024))


class TestDecodeUpload:
    """Bytes → text."""

    def test_utf8(self) -> None:
        assert decode_upload("<kml>Zürich</kml>".encode()) == "<kml>Zürich</kml>"

    def test_utf8_bom_stripped(self) -> None:
        assert decode_upload(b"\xef\xbb\xbf<kml/>") == "<kml/>"

    def test_invalid_utf8_rejected(self) -> None:
        with pytest.raises(UploadRejectedError) as exc_info:
            decode_upload(b"\xff\xfe\xfa", filename="weird.kml")
        assert exc_info.value.source == "weird.kml"
