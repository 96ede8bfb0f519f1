"""
Coordinate validation and great-circle length calculations.

Coordinates are ``(lat, lon)`` pairs in degrees; lengths are kilometres on a
spherical earth.
"""

import math
from numbers import Real
from typing import Any, Sequence, Tuple

EARTH_RADIUS_KM = 6371.0


def is_valid_coordinate(value: Any) -> bool:
    """
    Check that a value is a usable ``(lat, lon)`` pair.

    Both components must be real numbers (booleans excluded) and finite.
    """
    if not isinstance(value, (tuple, list)) or len(value) != 2:
        return False
    for component in value:
        if isinstance(component, bool) or not isinstance(component, Real):
            return False
        if not math.isfinite(component):
            return False
    return True


def haversine_distance(
    start: Tuple[float, float], end: Tuple[float, float]
) -> float:
    """
    Distance between two coordinates using the haversine formula.

    Args:
        start: ``(lat, lon)`` in degrees
        end: ``(lat, lon)`` in degrees

    Returns:
        Distance in kilometres
    """
    lat1, lon1 = start
    lat2, lon2 = end

    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def path_length(coordinates: Sequence[Tuple[float, float]]) -> float:
    """
    Total length of a path in kilometres.

    Segments with an invalid endpoint contribute nothing; paths with fewer
    than two coordinates have zero length.
    """
    if not coordinates or len(coordinates) < 2:
        return 0.0

    total = 0.0
    for start, end in zip(coordinates, coordinates[1:]):
        if not is_valid_coordinate(start) or not is_valid_coordinate(end):
            continue
        total += haversine_distance(start, end)
    return total


def format_length(length_km: float) -> str:
    """Format a length with exactly two decimals."""
    return f"{length_km:.2f}"


def calculate_length(coordinates: Sequence[Tuple[float, float]]) -> str:
    """Path length in kilometres, formatted with two decimals."""
    return format_length(path_length(coordinates))
