"""
Tests for KML coordinate string parsing.
"""

from kmlview.core.parsers import parse_coordinates


class TestParseCoordinates:
    """Tests for parse_coordinates."""

    def test_swaps_to_lat_lon(self):
        assert parse_coordinates("1,2,0") == [(2.0, 1.0)]

    def test_altitude_optional(self):
        assert parse_coordinates("-122.08,37.42") == [(37.42, -122.08)]

    def test_multiple_tuples_keep_order(self):
        text = "1,2 3,4,100\n\t5,6"
        assert parse_coordinates(text) == [(2.0, 1.0), (4.0, 3.0), (6.0, 5.0)]

    def test_duplicates_kept(self):
        assert parse_coordinates("1,2 1,2") == [(2.0, 1.0), (2.0, 1.0)]

    def test_missing_comma_dropped(self):
        assert parse_coordinates("1,2 34 5,6") == [(2.0, 1.0), (6.0, 5.0)]

    def test_non_numeric_dropped(self):
        assert parse_coordinates("a,2 1,b 1,2") == [(2.0, 1.0)]

    def test_empty_field_dropped(self):
        assert parse_coordinates(",2 1, 3,4") == [(4.0, 3.0)]

    def test_nan_and_infinity_dropped(self):
        assert parse_coordinates("nan,1 1,inf 7,8") == [(8.0, 7.0)]

    def test_empty_input(self):
        assert parse_coordinates(None) == []
        assert parse_coordinates("") == []
        assert parse_coordinates("   \n  ") == []

    def test_surrounding_whitespace(self):
        assert parse_coordinates("\n      0,0,0 1,0,0\n    ") == [(0.0, 0.0), (0.0, 1.0)]
