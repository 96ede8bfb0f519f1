"""
In-memory viewer session.

Holds the most recently parsed KML document and the current display mode.
A successful load replaces the previous document; a failed load leaves it
untouched.
"""

import logging
import threading
from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from kmlview.core.errors import ParseError
from kmlview.core.parsers import GeometryRecord, KMLParser, ParsedDocument
from kmlview.utils.logging import PerformanceTimer

logger = logging.getLogger(__name__)


class DisplayMode(str, Enum):
    """Which view of the current document is shown."""

    NONE = "none"
    SUMMARY = "summary"
    DETAILED = "detailed"


class ViewerSession:
    """
    Single-document viewer state.

    Concurrent loads are not ordered: whichever finishes last wins. The lock
    only makes each swap of document and mode atomic.
    """

    def __init__(self, parser: Optional[KMLParser] = None) -> None:
        self.parser = parser or KMLParser()
        self._lock = threading.Lock()
        self._document: Optional[ParsedDocument] = None
        self._mode = DisplayMode.NONE

    @property
    def document(self) -> Optional[ParsedDocument]:
        return self._document

    @property
    def mode(self) -> DisplayMode:
        return self._mode

    @property
    def summary(self) -> Optional[Dict[str, int]]:
        """Counts of the current document, or None before the first load."""
        if self._document is None:
            return None
        return dict(self._document.summary)

    @property
    def elements(self) -> Tuple[GeometryRecord, ...]:
        if self._document is None:
            return ()
        return self._document.elements

    def load_or_raise(self, kml_content: Union[str, bytes, Path]) -> ParsedDocument:
        """
        Parse content and make it the current document.

        Args:
            kml_content: KML content as string, bytes, or file path

        Returns:
            The newly loaded document

        Raises:
            ParseError: If the content is malformed; the session is unchanged
        """
        with PerformanceTimer("parse_kml", log_level=logging.DEBUG):
            document = self.parser.parse(kml_content)

        with self._lock:
            self._document = document
            self._mode = DisplayMode.NONE

        logger.info(
            f"Loaded KML document: {document.element_count} elements, "
            f"counts={document.summary}"
        )
        return document

    def load(self, kml_content: Union[str, bytes, Path]) -> bool:
        """
        Parse content and make it the current document.

        Malformed XML is logged and leaves the session unchanged.

        Returns:
            True if the document was loaded
        """
        try:
            self.load_or_raise(kml_content)
        except ParseError as e:
            logger.error(f"Error parsing KML: {e.message}")
            return False
        return True

    def show_summary(self) -> DisplayMode:
        return self.set_mode(DisplayMode.SUMMARY)

    def show_detailed(self) -> DisplayMode:
        return self.set_mode(DisplayMode.DETAILED)

    def set_mode(self, mode: DisplayMode) -> DisplayMode:
        with self._lock:
            self._mode = DisplayMode(mode)
        return self._mode

    @property
    def summary_visible(self) -> bool:
        """Summary table is shown only once a document exists."""
        return self._mode == DisplayMode.SUMMARY and self._document is not None

    @property
    def map_visible(self) -> bool:
        """Map is shown only when the document has at least one element."""
        return self._mode == DisplayMode.DETAILED and len(self.elements) > 0

    def clear(self) -> None:
        with self._lock:
            self._document = None
            self._mode = DisplayMode.NONE


# Global session instance
viewer_session = ViewerSession()
