"""Markup-to-tree deserialization.

Two steps:

1. ``validate_xml`` checks well-formedness with a hardened lxml parser
   (no entity resolution, no network access) and returns the element
   tree.
2. ``deserialize`` turns the text into a nested dict tree with
   xmltodict.  Known KML namespaces are collapsed to bare tag names so
   ``<kml:Placemark>`` and ``<Placemark xmlns=...>`` look the same.

The tree has the usual xmltodict shape: a single child element is a
dict (or a string / ``None`` for text-only or empty elements), repeated
children are a list.  Callers normalise that with ``as_sequence``.

Repeated children are grouped by tag, so the dict tree alone cannot
tell whether a ``<Folder>`` sits before or after a sibling
``<Placemark>``.  ``load_document`` keeps the lxml element tree next to
the dict tree so the walker can recover sibling order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any
from xml.parsers.expat import ExpatError

from kml_viewer.core.constants import KML_NAMESPACES
from kml_viewer.extraction._errors import KmlParseError

logger = logging.getLogger("kml_viewer.extraction.deserialize")


@dataclass(frozen=True, slots=True)
class KmlDocument:
    """A parsed document in both shapes.

    Attributes:
        tree: xmltodict dict tree with KML namespaces collapsed.
        root: lxml root element of the same document.
    """

    tree: dict[str, Any]
    root: Any


def _to_bytes(content: str | bytes) -> tuple[bytes, str | None]:
    """Return raw bytes plus the encoding override to use, if any."""
    if isinstance(content, str):
        return content.encode("utf-8"), "utf-8"
    return content, None


def validate_xml(content: str | bytes, *, source_filename: str = "") -> Any:
    """Validate that the content is non-empty, well-formed XML.

    Returns:
        The lxml root element.

    Raises:
        KmlParseError: If the content is empty or not valid XML.
    """
    from lxml import etree  # type: ignore[attr-defined]

    data, encoding = _to_bytes(content)
    if not data.strip():
        msg = "KML document is empty"
        raise KmlParseError(msg, source=source_filename)

    parser = etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        huge_tree=False,
        encoding=encoding,
    )
    try:
        return etree.fromstring(data, parser=parser)
    except etree.XMLSyntaxError as exc:
        msg = f"Not valid XML: {exc}"
        raise KmlParseError(msg, source=source_filename) from exc


def load_document(content: str | bytes, *, source_filename: str = "") -> KmlDocument:
    """Validate KML text and return its dict tree and element tree.

    Raises:
        KmlParseError: If the content is empty or not valid XML.
    """
    import xmltodict

    root = validate_xml(content, source_filename=source_filename)

    data, encoding = _to_bytes(content)
    try:
        tree = xmltodict.parse(
            data,
            encoding=encoding,
            process_namespaces=True,
            namespaces={namespace: None for namespace in KML_NAMESPACES},
        )
    except ExpatError as exc:
        msg = f"Not valid XML: {exc}"
        raise KmlParseError(msg, source=source_filename) from exc

    logger.debug("Deserialized %s | root=%s", source_filename or "<text>", list(tree))
    return KmlDocument(tree=tree, root=root)


def deserialize(content: str | bytes, *, source_filename: str = "") -> dict[str, Any]:
    """Validate and deserialize KML text into a nested dict tree.

    Raises:
        KmlParseError: If the content is empty or not valid XML.
    """
    return load_document(content, source_filename=source_filename).tree
