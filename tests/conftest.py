"""Shared pytest fixtures for the KML Viewer test suite."""

from collections.abc import Callable
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Path fixtures
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).parent
DATA_DIR = TESTS_DIR / "data"
EDGE_CASES_DIR = DATA_DIR / "edge_cases"


@pytest.fixture()
def data_dir() -> Path:
    """Return the path to the test data directory."""
    return DATA_DIR


@pytest.fixture()
def edge_cases_dir() -> Path:
    """Return the path to the edge-cases test data directory."""
    return EDGE_CASES_DIR


# ---------------------------------------------------------------------------
# Sample KML file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def single_point_kml(data_dir: Path) -> Path:
    """Path to a KML with one Point placemark (London)."""
    return data_dir / "01_single_point.kml"


@pytest.fixture()
def single_linestring_kml(data_dir: Path) -> Path:
    """Path to a KML with one two-vertex LineString (~1113 m)."""
    return data_dir / "02_single_linestring.kml"


@pytest.fixture()
def multigeometry_kml(data_dir: Path) -> Path:
    """Path to a KML with one MultiGeometry holding two LineStrings."""
    return data_dir / "03_multigeometry_lines.kml"


@pytest.fixture()
def mixed_folders_kml(data_dir: Path) -> Path:
    """Path to a KML mixing points, lines, empty and nested-Folder placemarks."""
    return data_dir / "04_mixed_folders.kml"


# ---------------------------------------------------------------------------
# Edge-case KML file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def not_xml_kml(edge_cases_dir: Path) -> Path:
    """Path to a file that is not valid XML."""
    return edge_cases_dir / "11_malformed_not_xml.kml"


@pytest.fixture()
def malformed_coordinate_kml(edge_cases_dir: Path) -> Path:
    """Path to a KML whose second placemark has a non-numeric coordinate."""
    return edge_cases_dir / "12_malformed_coordinate.kml"


@pytest.fixture()
def no_placemarks_kml(edge_cases_dir: Path) -> Path:
    """Path to a valid KML Document without any Placemark."""
    return edge_cases_dir / "13_no_placemarks.kml"


@pytest.fixture()
def no_document_kml(edge_cases_dir: Path) -> Path:
    """Path to a KML whose Placemark sits directly under <kml>."""
    return edge_cases_dir / "14_no_document.kml"


# ---------------------------------------------------------------------------
# Inline document builder
# ---------------------------------------------------------------------------


def _build_kml_document(*placemarks: str) -> str:
    """Wrap placemark bodies in a namespaced ``<kml><Document>``."""
    body = "".join(f"<Placemark>{p}</Placemark>" for p in placemarks)
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<kml xmlns="http://www.opengis.net/kml/2.2">'
        f"<Document>{body}</Document></kml>"
    )


@pytest.fixture()
def kml_document() -> Callable[..., str]:
    """Return a builder that wraps placemark bodies in a KML document."""
    return _build_kml_document
