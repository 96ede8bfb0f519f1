"""
Visualization module for the KML Viewer.

- Summary table of geometry counts
- Interactive map of parsed geometries (plotly HTML)
"""

from kmlview.core.visualization.map_view import MapRenderer, MapViewConfig, line_popup
from kmlview.core.visualization.summary_table import render_summary_html, summary_rows

__all__ = [
    "MapRenderer",
    "MapViewConfig",
    "line_popup",
    "render_summary_html",
    "summary_rows",
]
