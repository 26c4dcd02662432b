"""KML Element Extractor.

Ingests KML documents and turns them into per-geometry-type counts,
geodesic lengths for line features, and render-ready map elements for
a map-visualization UI.
"""

__version__ = "0.1.0"
