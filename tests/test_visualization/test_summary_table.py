"""
Tests for the summary table.
"""

from kmlview.core.visualization import render_summary_html, summary_rows


class TestSummaryRows:
    """Tests for summary_rows."""

    def test_zero_counts_hidden(self):
        summary = {"Point": 2, "LineString": 0, "Polygon": 1, "MultiLineString": 0}

        assert summary_rows(summary) == [("Point", 2), ("Polygon", 1)]

    def test_kind_order(self):
        summary = {"MultiLineString": 1, "Point": 3}

        assert summary_rows(summary) == [("Point", 3), ("MultiLineString", 1)]

    def test_all_zero(self):
        assert summary_rows({"Point": 0}) == []


class TestRenderSummaryHtml:
    """Tests for render_summary_html."""

    def test_table(self):
        html = render_summary_html({"Point": 2, "LineString": 0})

        assert "<th>Element Type</th>" in html
        assert "<tr><td>Point</td><td>2</td></tr>" in html
        assert "LineString" not in html
