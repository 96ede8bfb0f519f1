"""
KML parsing module for the KML Viewer.

Turns placemark geometries into typed records and summary counts.
"""

from .geometry import (
    Coordinate,
    GeometryKind,
    GeometryRecord,
    LineStringRecord,
    MultiLineStringRecord,
    PointRecord,
    PolygonRecord,
    parse_coordinates,
)
from .kml_parser import (
    KMLParser,
    ParsedDocument,
    PlacemarkGeometries,
    empty_summary,
    parse_kml_file,
    parse_kml_string,
)

__all__ = [
    # Geometry
    "Coordinate",
    "GeometryKind",
    "GeometryRecord",
    "LineStringRecord",
    "MultiLineStringRecord",
    "PointRecord",
    "PolygonRecord",
    "parse_coordinates",
    # KML
    "KMLParser",
    "ParsedDocument",
    "PlacemarkGeometries",
    "empty_summary",
    "parse_kml_file",
    "parse_kml_string",
]
