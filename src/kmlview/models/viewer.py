"""
Pydantic models for the KML viewer endpoints.
"""

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from kmlview.core.parsers import ParsedDocument
from kmlview.core.session import DisplayMode

LatLon = List[float]


class GeometryElement(BaseModel):
    """
    One parsed geometry.

    ``coords`` is ``[lat, lon]`` for a Point, a list of those for LineString
    and Polygon, and a list of lists for MultiLineString.
    """

    type: str = Field(..., description="Geometry kind")
    name: str = Field(..., description="Placemark name or the kind label")
    coords: Union[LatLon, List[LatLon], List[List[LatLon]]] = Field(
        ..., description="Coordinates as [lat, lon]"
    )
    length: Optional[str] = Field(
        None, description="Length in km with two decimals (line geometries only)"
    )


class ViewerDocumentResponse(BaseModel):
    """
    Response for a successfully parsed upload.

    Attributes:
        filename: Original filename
        document_name: Name of the KML Document element
        summary: Placemark counts per geometry kind
        elements: Parsed geometries
    """

    filename: Optional[str] = Field(None, description="Original filename")
    document_name: Optional[str] = Field(None, description="KML Document name")
    summary: Dict[str, int] = Field(..., description="Counts per geometry kind")
    elements: List[GeometryElement] = Field(default_factory=list)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "filename": "routes.kml",
                "document_name": "Routes",
                "summary": {
                    "Point": 1,
                    "LineString": 1,
                    "Polygon": 0,
                    "MultiLineString": 0,
                },
                "elements": [
                    {"type": "Point", "name": "Start", "coords": [2.0, 1.0]},
                    {
                        "type": "LineString",
                        "name": "Route",
                        "coords": [[0.0, 0.0], [0.0, 1.0]],
                        "length": "111.19",
                    },
                ],
            }
        }
    )

    @classmethod
    def from_document(
        cls, document: ParsedDocument, filename: Optional[str] = None
    ) -> "ViewerDocumentResponse":
        data = document.to_dict()
        return cls(
            filename=filename,
            document_name=data["document_name"],
            summary=data["summary"],
            elements=[GeometryElement(**e) for e in data["elements"]],
        )


class SummaryRow(BaseModel):
    type: str
    count: int


class SummaryResponse(BaseModel):
    """Counts for every kind plus the table rows (non-zero kinds only)."""

    summary: Dict[str, int]
    rows: List[SummaryRow]


class ElementsResponse(BaseModel):
    elements: List[GeometryElement] = Field(default_factory=list)


class DisplayModeRequest(BaseModel):
    mode: DisplayMode = Field(..., description="View to show")


class DisplayModeResponse(BaseModel):
    mode: DisplayMode
    summary_visible: bool
    map_visible: bool
