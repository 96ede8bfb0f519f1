"""
Tests for the in-memory viewer session.
"""

import pytest

from kmlview.core.errors import ParseError
from kmlview.core.session import DisplayMode, ViewerSession

POINT_KML = """<?xml version="1.0"?>
<kml xmlns="http://www.opengis.net/kml/2.2"><Document>
<Placemark><name>A</name><Point><coordinates>1,2,0</coordinates></Point></Placemark>
</Document></kml>"""

LINE_KML = """<kml><Document>
<Placemark><LineString><coordinates>0,0 1,0</coordinates></LineString></Placemark>
</Document></kml>"""

EMPTY_KML = "<kml><Document/></kml>"

MALFORMED_KML = "<kml><Document><Placemark>"


@pytest.fixture
def session() -> ViewerSession:
    return ViewerSession()


class TestLoad:
    """Tests for loading documents."""

    def test_initial_state(self, session: ViewerSession) -> None:
        assert session.document is None
        assert session.summary is None
        assert session.elements == ()
        assert session.mode == DisplayMode.NONE

    def test_load_replaces_document(self, session: ViewerSession) -> None:
        assert session.load(POINT_KML) is True
        assert session.summary["Point"] == 1

        assert session.load(LINE_KML) is True
        assert session.summary["Point"] == 0
        assert session.summary["LineString"] == 1
        assert len(session.elements) == 1
        assert session.elements[0].name == "LineString"

    def test_malformed_leaves_state_untouched(self, session: ViewerSession, caplog) -> None:
        session.load(POINT_KML)
        session.show_summary()
        before = session.document

        with caplog.at_level("ERROR"):
            assert session.load(MALFORMED_KML) is False

        assert session.document is before
        assert session.mode == DisplayMode.SUMMARY
        assert "Error parsing KML" in caplog.text

    def test_malformed_on_fresh_session(self, session: ViewerSession) -> None:
        assert session.load(MALFORMED_KML) is False
        assert session.document is None

    def test_load_or_raise(self, session: ViewerSession) -> None:
        document = session.load_or_raise(POINT_KML)
        assert session.document is document

        with pytest.raises(ParseError):
            session.load_or_raise(MALFORMED_KML)
        assert session.document is document

    def test_load_resets_mode(self, session: ViewerSession) -> None:
        session.load(POINT_KML)
        session.show_detailed()
        session.load(LINE_KML)

        assert session.mode == DisplayMode.NONE

    def test_summary_is_a_copy(self, session: ViewerSession) -> None:
        session.load(POINT_KML)
        session.summary["Point"] = 99

        assert session.summary["Point"] == 1

    def test_clear(self, session: ViewerSession) -> None:
        session.load(POINT_KML)
        session.show_summary()
        session.clear()

        assert session.document is None
        assert session.mode == DisplayMode.NONE


class TestDisplayMode:
    """Tests for the summary/detailed toggle."""

    def test_modes_are_exclusive(self, session: ViewerSession) -> None:
        session.load(POINT_KML)

        session.show_summary()
        assert session.summary_visible
        assert not session.map_visible

        session.show_detailed()
        assert session.map_visible
        assert not session.summary_visible

    def test_summary_needs_document(self, session: ViewerSession) -> None:
        session.show_summary()
        assert session.mode == DisplayMode.SUMMARY
        assert not session.summary_visible

    def test_map_needs_elements(self, session: ViewerSession) -> None:
        session.load(EMPTY_KML)
        session.show_detailed()

        assert not session.map_visible

        session.show_summary()
        assert session.summary_visible

    def test_set_mode_from_string(self, session: ViewerSession) -> None:
        assert session.set_mode("detailed") == DisplayMode.DETAILED
