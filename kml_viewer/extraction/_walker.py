"""Document walker over the deserialized KML tree.

The deserializer represents one child element as a single node and
several as a list; ``as_sequence`` and ``child_nodes`` normalise both
shapes so iteration never depends on how many children there are.

Sibling order between different tags (a Folder between two Placemarks)
is taken from the lxml element tree carried by ``KmlDocument``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from kml_viewer.core.constants import KML_NAMESPACES
from kml_viewer.extraction._errors import MissingDocumentRootError, MissingPlacemarksError

if TYPE_CHECKING:
    from kml_viewer.extraction._deserialize import KmlDocument

logger = logging.getLogger("kml_viewer.extraction.walker")

TEXT_KEY = "#text"


def as_sequence(node: Any) -> list[Any]:
    """Normalise a tree field to a list: ``None`` → ``[]``, list → list, else ``[node]``."""
    if node is None:
        return []
    if isinstance(node, list):
        return node
    return [node]


def child_nodes(node: Any, tag: str) -> list[Any]:
    """Return every ``tag`` child of *node* in document order.

    An empty element (``<Point/>``) is present in the tree as ``None``;
    it is still returned as one child so it can be counted.
    """
    if not isinstance(node, dict) or tag not in node:
        return []
    value = node[tag]
    if value is None:
        return [None]
    return as_sequence(value)


def node_text(node: Any) -> str:
    """Return the text content of a leaf node, ``""`` if it has none."""
    if node is None:
        return ""
    if isinstance(node, dict):
        return str(node.get(TEXT_KEY) or "")
    return str(node)


def placemark_name(placemark: Any) -> str:
    """Return the trimmed ``<name>`` of a placemark, ``""`` if absent."""
    if not isinstance(placemark, dict):
        return ""
    return node_text(placemark.get("name")).strip()


def is_kml_element(element: Any, local_name: str) -> bool:
    """Return True if *element* is ``local_name`` in no namespace or a KML namespace.

    Mirrors the namespace collapsing done by the deserializer, so the
    elements matched here are exactly the bare keys of the dict tree.
    """
    from lxml import etree  # type: ignore[attr-defined]

    # comments, processing instructions and entity references
    if not isinstance(element.tag, str):
        return False
    qname = etree.QName(element)
    return qname.localname == local_name and qname.namespace in (None, *KML_NAMESPACES)


def _child_elements(element: Any, local_name: str) -> list[Any]:
    return [child for child in element if is_kml_element(child, local_name)]


def iter_placemarks(document: KmlDocument) -> Iterator[Any]:
    """Yield every placemark of the document in document order.

    Placemarks inside nested ``<Folder>`` containers are visited where
    the Folder appears, depth-first, so a Placemark / Folder / Placemark
    sequence keeps its order.  Nodes come from the dict tree; the
    element tree only supplies sibling order.

    Raises:
        MissingDocumentRootError: If the tree has no ``<kml><Document>``.
        MissingPlacemarksError: If no placemark exists anywhere in the document.
    """
    tree = document.tree
    kml = tree.get("kml") if isinstance(tree, dict) else None
    if not isinstance(kml, dict) or "Document" not in kml:
        root = next(iter(tree), "") if isinstance(tree, dict) else ""
        msg = f"KML document root not found (expected <kml><Document>, got <{root}>)"
        raise MissingDocumentRootError(msg)

    found = 0
    documents = zip(
        child_nodes(kml, "Document"),
        _child_elements(document.root, "Document"),
        strict=True,
    )
    for node, element in documents:
        for placemark in _iter_container(node, element):
            found += 1
            yield placemark

    if not found:
        msg = "KML document contains no <Placemark> elements"
        raise MissingPlacemarksError(msg)


def _iter_container(node: Any, element: Any) -> Iterator[Any]:
    """Yield placemarks of a Document/Folder, descending into Folders in place."""
    placemarks = iter(child_nodes(node, "Placemark"))
    folders = iter(child_nodes(node, "Folder"))
    for child in element:
        if is_kml_element(child, "Placemark"):
            yield next(placemarks)
        elif is_kml_element(child, "Folder"):
            yield from _iter_container(next(folders), child)
