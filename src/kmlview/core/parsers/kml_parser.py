"""
KML parsing module.

Reads the placemarks of ``kml/Document`` and turns each into zero or more
typed geometry records, while counting every geometry tag encountered.
"""

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from kmlview.core.errors import ParseError

from .geometry import (
    GeometryKind,
    GeometryRecord,
    PointRecord,
    build_line_string,
    build_multi_line_string,
    build_polygon,
    parse_coordinates,
)

logger = logging.getLogger(__name__)

KML_NS = "{http://www.opengis.net/kml/2.2}"


def empty_summary() -> Dict[str, int]:
    """Counts for every geometry kind, all zero."""
    return {kind.value: 0 for kind in GeometryKind}


@dataclass
class PlacemarkGeometries:
    """
    Geometries found on a single Placemark.

    A placemark may carry several geometry tags; each present tag is listed
    in ``kinds`` even when it yields no usable record.

    Attributes:
        name: Placemark name, if it has one
        kinds: Geometry kinds whose tag is present
        records: Records built from those tags
    """

    name: Optional[str] = None
    kinds: List[GeometryKind] = field(default_factory=list)
    records: List[GeometryRecord] = field(default_factory=list)


@dataclass(frozen=True)
class ParsedDocument:
    """
    Result of parsing one KML document.

    Attributes:
        summary: Placemark tag counts per geometry kind
        elements: Geometry records in document order
        document_name: Name of the KML Document, if present
    """

    summary: Dict[str, int] = field(default_factory=empty_summary)
    elements: Tuple[GeometryRecord, ...] = ()
    document_name: Optional[str] = None

    @property
    def element_count(self) -> int:
        """Number of usable geometry records."""
        return len(self.elements)

    def get_elements_by_kind(self, kind: GeometryKind) -> List[GeometryRecord]:
        """Get records filtered by geometry kind."""
        return [e for e in self.elements if e.kind == kind]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "document_name": self.document_name,
            "summary": dict(self.summary),
            "elements": [e.to_dict() for e in self.elements],
        }


def _local_name(tag: Any) -> str:
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def _children(element: ET.Element, name: str) -> Iterator[ET.Element]:
    for child in element:
        if _local_name(child.tag) == name:
            yield child


def _child(element: Optional[ET.Element], name: str) -> Optional[ET.Element]:
    if element is None:
        return None
    return next(_children(element, name), None)


def _child_text(element: Optional[ET.Element], name: str) -> Optional[str]:
    child = _child(element, name)
    if child is None:
        return None
    return child.text


class KMLParser:
    """
    Parse KML content into geometry records and summary counts.

    Only direct ``Placemark`` children of the top-level ``Document`` are
    read. Elements are matched by local name, so documents with or without
    the KML namespace are handled alike.
    """

    def parse(self, kml_content: Union[str, bytes, Path]) -> ParsedDocument:
        """
        Parse KML content.

        Args:
            kml_content: KML content as string, bytes, or file path

        Returns:
            ParsedDocument with counts and records

        Raises:
            ParseError: If the content is not well-formed XML
        """
        if isinstance(kml_content, Path):
            kml_content = kml_content.read_bytes()

        try:
            root = ET.fromstring(kml_content)
        except ET.ParseError as e:
            line_number = e.position[0] if e.position else None
            raise ParseError(
                f"Invalid XML structure: {e}", line_number=line_number
            ) from e

        document = _child(root, "Document") if _local_name(root.tag) == "kml" else None
        if document is None:
            logger.debug("No kml/Document element found; document is empty")
            return ParsedDocument()

        summary = empty_summary()
        elements: List[GeometryRecord] = []

        for placemark_elem in _children(document, "Placemark"):
            placemark = self.parse_placemark(placemark_elem)
            for kind in placemark.kinds:
                summary[kind.value] += 1
            elements.extend(placemark.records)

        name = _child_text(document, "name")
        return ParsedDocument(
            summary=summary,
            elements=tuple(elements),
            document_name=name.strip() if name and name.strip() else None,
        )

    def parse_placemark(self, element: ET.Element) -> PlacemarkGeometries:
        """
        Parse every supported geometry tag of a Placemark.

        Point, LineString, Polygon and a MultiGeometry of LineStrings are
        checked independently, so one placemark can contribute to several
        kinds. Only the first tag of each type is read.

        Args:
            element: Placemark XML element

        Returns:
            PlacemarkGeometries for the placemark
        """
        result = PlacemarkGeometries()
        raw_name = _child_text(element, "name")
        if raw_name and raw_name.strip():
            result.name = raw_name.strip()

        def name_for(kind: GeometryKind) -> str:
            return result.name or kind.value

        point = _child(element, "Point")
        if point is not None:
            result.kinds.append(GeometryKind.POINT)
            coords = parse_coordinates(_child_text(point, "coordinates"))
            if coords:
                result.records.append(
                    PointRecord(name=name_for(GeometryKind.POINT), coordinate=coords[0])
                )

        line = _child(element, "LineString")
        if line is not None:
            result.kinds.append(GeometryKind.LINE_STRING)
            record = build_line_string(
                name_for(GeometryKind.LINE_STRING),
                parse_coordinates(_child_text(line, "coordinates")),
            )
            if record:
                result.records.append(record)

        polygon = _child(element, "Polygon")
        if polygon is not None:
            result.kinds.append(GeometryKind.POLYGON)
            ring = _child(_child(polygon, "outerBoundaryIs"), "LinearRing")
            record = build_polygon(
                name_for(GeometryKind.POLYGON),
                parse_coordinates(_child_text(ring, "coordinates")),
            )
            if record:
                result.records.append(record)

        multi = _child(element, "MultiGeometry")
        sub_lines = list(_children(multi, "LineString")) if multi is not None else []
        if sub_lines:
            result.kinds.append(GeometryKind.MULTI_LINE_STRING)
            record = build_multi_line_string(
                name_for(GeometryKind.MULTI_LINE_STRING),
                [parse_coordinates(_child_text(sub, "coordinates")) for sub in sub_lines],
            )
            if record:
                result.records.append(record)

        return result


def parse_kml_string(kml_content: Union[str, bytes]) -> Optional[ParsedDocument]:
    """
    Parse KML text, logging and returning None if it is malformed.

    Args:
        kml_content: KML content as string or bytes

    Returns:
        ParsedDocument, or None when the XML cannot be parsed
    """
    try:
        return KMLParser().parse(kml_content)
    except ParseError as e:
        logger.error(f"Error parsing KML: {e.message}")
        return None


def parse_kml_file(file_path: Union[str, Path]) -> Optional[ParsedDocument]:
    """
    Convenience function to parse a KML file.

    Args:
        file_path: Path to KML file

    Returns:
        ParsedDocument, or None when the XML cannot be parsed
    """
    return parse_kml_string(Path(file_path).read_bytes())
