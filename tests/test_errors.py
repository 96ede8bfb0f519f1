"""
Tests for the exception hierarchy.
"""

from kmlview.core.errors import (
    FileTooLargeError,
    KMLViewException,
    NotFoundError,
    ParseError,
    ValidationError,
)


class TestExceptions:
    """Tests for KMLViewException and subclasses."""

    def test_base_exception(self):
        exc = KMLViewException("Boom", error_code="TEST", status_code=418, details={"a": 1})

        assert str(exc) == "TEST: Boom"
        assert exc.to_dict() == {
            "error_code": "TEST",
            "message": "Boom",
            "details": {"a": 1},
            "suggestions": [],
        }
        assert "status_code=418" in repr(exc)

    def test_validation_error(self):
        exc = ValidationError("Bad input", field="file")

        assert exc.status_code == 400
        assert exc.error_code == "VALIDATION_ERROR"
        assert exc.details == {"field": "file"}
        assert exc.suggestions

    def test_parse_error(self):
        exc = ParseError("Invalid XML", line_number=7)

        assert exc.status_code == 422
        assert exc.error_code == "PARSE_ERROR"
        assert exc.details == {"file_type": "KML", "line_number": 7}

    def test_file_too_large(self):
        exc = FileTooLargeError("Too big", file_size=20, max_size=10)

        assert isinstance(exc, ValidationError)
        assert exc.status_code == 413
        assert exc.error_code == "FILE_TOO_LARGE"
        assert exc.details["max_size"] == 10

    def test_not_found(self):
        exc = NotFoundError("Missing", error_code="NO_DOCUMENT")

        assert exc.status_code == 404
        assert exc.error_code == "NO_DOCUMENT"
        assert isinstance(exc, KMLViewException)
