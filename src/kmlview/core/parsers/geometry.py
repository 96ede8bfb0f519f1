"""
Geometry records and coordinate parsing for KML placemarks.

KML stores coordinates as whitespace-separated ``lon,lat[,alt]`` tuples.
Records keep them as ``(lat, lon)`` pairs, the order mapping widgets expect.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from shapely.geometry import LineString, MultiLineString, Point, Polygon
from shapely.geometry.base import BaseGeometry

from kmlview.core.metrics import format_length, is_valid_coordinate, path_length

Coordinate = Tuple[float, float]


class GeometryKind(str, Enum):
    """Geometry kinds extracted from placemarks."""

    POINT = "Point"
    LINE_STRING = "LineString"
    POLYGON = "Polygon"
    MULTI_LINE_STRING = "MultiLineString"


def _parse_number(text: str) -> Optional[float]:
    try:
        return float(text)
    except ValueError:
        return None


def parse_coordinates(coord_string: Optional[str]) -> List[Coordinate]:
    """
    Parse a KML coordinate string into ``(lat, lon)`` pairs.

    Tuples that lack a longitude or latitude, or whose values are not finite
    numbers, are dropped without error. The altitude field is ignored.

    Args:
        coord_string: Raw text of a ``<coordinates>`` element

    Returns:
        Valid coordinates in input order

    Examples:
        >>> parse_coordinates("1,2,0")
        [(2.0, 1.0)]

        >>> parse_coordinates("1,2 bad 3,4")
        [(2.0, 1.0), (4.0, 3.0)]
    """
    if not coord_string or not coord_string.strip():
        return []

    coordinates: List[Coordinate] = []
    for part in re.split(r"\s+", coord_string.strip()):
        values = part.split(",")
        if len(values) < 2 or not values[0] or not values[1]:
            continue

        lon = _parse_number(values[0])
        lat = _parse_number(values[1])
        if lon is None or lat is None:
            continue

        coord = (lat, lon)
        if is_valid_coordinate(coord):
            coordinates.append(coord)

    return coordinates


@dataclass(frozen=True)
class PointRecord:
    """A single marker position."""

    name: str
    coordinate: Coordinate

    kind = GeometryKind.POINT

    def to_shapely(self) -> BaseGeometry:
        lat, lon = self.coordinate
        return Point(lon, lat)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.kind.value,
            "name": self.name,
            "coords": list(self.coordinate),
        }


@dataclass(frozen=True)
class LineStringRecord:
    """
    An open path of two or more coordinates.

    Attributes:
        name: Placemark name or the kind label
        coordinates: Path vertices as ``(lat, lon)``
        length_km: Great-circle length of the path
    """

    name: str
    coordinates: Tuple[Coordinate, ...]
    length_km: float

    kind = GeometryKind.LINE_STRING

    @property
    def length(self) -> str:
        """Length in kilometres with two decimals."""
        return format_length(self.length_km)

    def to_shapely(self) -> BaseGeometry:
        return LineString([(lon, lat) for lat, lon in self.coordinates])

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.kind.value,
            "name": self.name,
            "coords": [list(c) for c in self.coordinates],
            "length": self.length,
        }


@dataclass(frozen=True)
class PolygonRecord:
    """Outer boundary of a polygon; three or more coordinates."""

    name: str
    coordinates: Tuple[Coordinate, ...]

    kind = GeometryKind.POLYGON

    def to_shapely(self) -> BaseGeometry:
        return Polygon([(lon, lat) for lat, lon in self.coordinates])

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.kind.value,
            "name": self.name,
            "coords": [list(c) for c in self.coordinates],
        }


@dataclass(frozen=True)
class MultiLineStringRecord:
    """
    The LineString members of a MultiGeometry.

    Attributes:
        name: Placemark name or the kind label
        lines: Sub-lines, each with at least two coordinates
        length_km: Sum of the sub-line lengths
    """

    name: str
    lines: Tuple[Tuple[Coordinate, ...], ...]
    length_km: float

    kind = GeometryKind.MULTI_LINE_STRING

    @property
    def length(self) -> str:
        """Combined length in kilometres with two decimals."""
        return format_length(self.length_km)

    def to_shapely(self) -> BaseGeometry:
        return MultiLineString(
            [[(lon, lat) for lat, lon in line] for line in self.lines]
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.kind.value,
            "name": self.name,
            "coords": [[list(c) for c in line] for line in self.lines],
            "length": self.length,
        }


GeometryRecord = Union[
    PointRecord, LineStringRecord, PolygonRecord, MultiLineStringRecord
]


def build_line_string(
    name: str, coordinates: Sequence[Coordinate]
) -> Optional[LineStringRecord]:
    """Create a LineString record, or None with fewer than two coordinates."""
    if len(coordinates) < 2:
        return None
    return LineStringRecord(
        name=name,
        coordinates=tuple(coordinates),
        length_km=path_length(coordinates),
    )


def build_polygon(
    name: str, coordinates: Sequence[Coordinate]
) -> Optional[PolygonRecord]:
    """Create a Polygon record, or None with fewer than three coordinates."""
    if len(coordinates) < 3:
        return None
    return PolygonRecord(name=name, coordinates=tuple(coordinates))


def build_multi_line_string(
    name: str, lines: Sequence[Sequence[Coordinate]]
) -> Optional[MultiLineStringRecord]:
    """
    Create a MultiLineString record from candidate sub-lines.

    Sub-lines with fewer than two coordinates are discarded; None is
    returned when none remain.
    """
    kept = tuple(tuple(line) for line in lines if len(line) >= 2)
    if not kept:
        return None
    return MultiLineStringRecord(
        name=name,
        lines=kept,
        length_km=sum(path_length(line) for line in kept),
    )
