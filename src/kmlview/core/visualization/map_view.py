"""
Interactive map rendering of parsed KML geometries.

Points become markers, LineStrings blue polylines, Polygons green filled
outlines and MultiLineStrings one polyline per member. Hover text carries the
popup content: the element name, plus the length for line geometries.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

import plotly.graph_objects as go

from kmlview.core.config import settings
from kmlview.core.metrics import is_valid_coordinate
from kmlview.core.parsers import (
    Coordinate,
    GeometryRecord,
    LineStringRecord,
    MultiLineStringRecord,
    PointRecord,
    PolygonRecord,
)

logger = logging.getLogger(__name__)


@dataclass
class MapViewConfig:
    """
    Configuration for the map view.

    Attributes:
        title: Map title
        height: Figure height in pixels
        center_lat: Initial latitude of the view
        center_lon: Initial longitude of the view
        zoom: Initial zoom level
        map_style: Base map style (tiles are fetched by the browser)
        point_color: Marker color
        line_color: Polyline color
        polygon_color: Polygon outline and fill color
    """

    title: Optional[str] = None
    height: int = 500
    center_lat: float = 20.0
    center_lon: float = 0.0
    zoom: int = 2
    map_style: str = "open-street-map"
    point_color: str = "#d62728"
    line_color: str = "blue"
    polygon_color: str = "green"

    @classmethod
    def from_settings(cls) -> "MapViewConfig":
        return cls(
            center_lat=settings.map_center_lat,
            center_lon=settings.map_center_lon,
            zoom=settings.map_zoom,
        )


def _all_valid(coordinates: Iterable[Coordinate]) -> bool:
    return all(is_valid_coordinate(c) for c in coordinates)


def line_popup(name: str, length: str) -> str:
    """Popup text for line geometries."""
    return f"{name}: Length {length} km"


class MapRenderer:
    """
    Render geometry records onto an OpenStreetMap base layer.

    Elements with any invalid coordinate are skipped rather than drawn.
    """

    def __init__(self, config: Optional[MapViewConfig] = None):
        self.config = config or MapViewConfig()
        self.elements: List[GeometryRecord] = []
        self.skipped = 0
        self._figure: Optional[go.Figure] = None

    def add_elements(self, elements: Sequence[GeometryRecord]) -> None:
        self.elements.extend(elements)
        self._figure = None

    def _point_trace(self, record: PointRecord) -> Optional[go.Scattermap]:
        if not is_valid_coordinate(record.coordinate):
            return None
        lat, lon = record.coordinate
        return go.Scattermap(
            lat=[lat],
            lon=[lon],
            mode="markers",
            marker=dict(size=10, color=self.config.point_color),
            name=record.name,
            hovertext=[record.name],
            hoverinfo="text",
        )

    def _line_trace(
        self, coordinates: Sequence[Coordinate], name: str, popup: str
    ) -> go.Scattermap:
        return go.Scattermap(
            lat=[c[0] for c in coordinates],
            lon=[c[1] for c in coordinates],
            mode="lines",
            line=dict(width=3, color=self.config.line_color),
            name=name,
            hovertext=[popup] * len(coordinates),
            hoverinfo="text",
        )

    def _polygon_trace(self, record: PolygonRecord) -> Optional[go.Scattermap]:
        if not _all_valid(record.coordinates):
            return None
        coords = list(record.coordinates)
        if coords[0] != coords[-1]:
            coords.append(coords[0])
        return go.Scattermap(
            lat=[c[0] for c in coords],
            lon=[c[1] for c in coords],
            mode="lines",
            fill="toself",
            fillcolor="rgba(0, 128, 0, 0.2)",
            line=dict(width=2, color=self.config.polygon_color),
            name=record.name,
            hovertext=[record.name] * len(coords),
            hoverinfo="text",
        )

    def _traces_for(self, record: GeometryRecord) -> List[go.Scattermap]:
        if isinstance(record, PointRecord):
            trace = self._point_trace(record)
            return [trace] if trace is not None else []

        if isinstance(record, LineStringRecord):
            if not _all_valid(record.coordinates):
                return []
            popup = line_popup(record.name, record.length)
            return [self._line_trace(record.coordinates, record.name, popup)]

        if isinstance(record, PolygonRecord):
            trace = self._polygon_trace(record)
            return [trace] if trace is not None else []

        if isinstance(record, MultiLineStringRecord):
            if not all(_all_valid(line) for line in record.lines):
                return []
            popup = line_popup(record.name, record.length)
            return [
                self._line_trace(line, record.name, popup) for line in record.lines
            ]

        return []

    def render(self) -> go.Figure:
        """
        Render the map.

        Returns:
            Plotly Figure object
        """
        traces: List[go.Scattermap] = []
        self.skipped = 0
        for record in self.elements:
            record_traces = self._traces_for(record)
            if not record_traces:
                self.skipped += 1
            traces.extend(record_traces)

        fig = go.Figure(data=traces)
        fig.update_layout(
            title=self.config.title,
            height=self.config.height,
            map=dict(
                style=self.config.map_style,
                center=dict(lat=self.config.center_lat, lon=self.config.center_lon),
                zoom=self.config.zoom,
            ),
            margin=dict(l=0, r=0, t=40 if self.config.title else 0, b=0),
            showlegend=False,
        )

        if self.skipped:
            logger.warning(f"Skipped {self.skipped} elements with invalid coordinates")
        logger.info(f"Rendered map with {len(traces)} traces")

        self._figure = fig
        return fig

    def export_html_string(self) -> str:
        """
        Export the map as an HTML page.

        Returns:
            HTML string
        """
        if self._figure is None:
            self.render()

        return self._figure.to_html(include_plotlyjs="cdn", full_html=True)

    def export(self, output_path: Union[str, Path]) -> Path:
        """
        Write the map to an HTML file.

        Args:
            output_path: Output file path

        Returns:
            Path to the exported file
        """
        if self._figure is None:
            self.render()

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        if not output_path.suffix:
            output_path = output_path.with_suffix(".html")

        self._figure.write_html(str(output_path), include_plotlyjs="cdn", auto_open=False)
        logger.info(f"Exported map to {output_path}")
        return output_path
