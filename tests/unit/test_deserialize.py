"""Tests for XML validation and dict-tree deserialization."""

from __future__ import annotations

import pytest

from kml_viewer.extraction import KmlParseError, deserialize, validate_xml


class TestValidateXml:
    """Well-formedness checks with lxml."""

    def test_valid_text(self) -> None:
        validate_xml("<kml><Document/></kml>")

    def test_valid_bytes_with_declaration(self) -> None:
        validate_xml(b'<?xml version="1.0" encoding="UTF-8"?><kml/>')

    def test_text_with_encoding_declaration(self) -> None:
        validate_xml('<?xml version="1.0" encoding="UTF-8"?><kml/>')

    def test_unclosed_tag(self) -> None:
        with pytest.raises(KmlParseError, match="Not valid XML") as exc_info:
            validate_xml("<kml><Document></kml>", source_filename="broken.kml")
        assert exc_info.value.source == "broken.kml"
        assert exc_info.value.code == "KML_PARSE_FAILED"
        assert exc_info.value.stage == "deserialize"

    def test_empty_bytes(self) -> None:
        with pytest.raises(KmlParseError, match="empty"):
            validate_xml(b"")

    def test_external_entity_not_resolved(self) -> None:
        text = (
            '<?xml version="1.0"?><!DOCTYPE kml [<!ENTITY xxe SYSTEM "file:///etc/passwd">]>'
            "<kml><Document><name>&xxe;</name></Document></kml>"
        )
        validate_xml(text)


class TestDeserialize:
    """xmltodict tree shape."""

    def test_single_child_is_dict(self) -> None:
        tree = deserialize("<kml><Document><Placemark><name>a</name></Placemark></Document></kml>")
        assert tree["kml"]["Document"]["Placemark"] == {"name": "a"}

    def test_repeated_children_are_list(self) -> None:
        tree = deserialize(
            "<kml><Document><Placemark><name>a</name></Placemark>"
            "<Placemark><name>b</name></Placemark></Document></kml>"
        )
        assert tree["kml"]["Document"]["Placemark"] == [{"name": "a"}, {"name": "b"}]

    def test_default_namespace_collapsed(self) -> None:
        tree = deserialize('<kml xmlns="http://www.opengis.net/kml/2.2"><Document/></kml>')
        assert "kml" in tree
        assert "Document" in tree["kml"]

    def test_empty_element_is_none(self) -> None:
        tree = deserialize("<kml><Document><Placemark/></Document></kml>")
        assert tree["kml"]["Document"]["Placemark"] is None

    def test_not_xml(self) -> None:
        with pytest.raises(KmlParseError):
            deserialize("definitely not markup")
