"""
Custom exception hierarchy for the KML Viewer application.

All application errors derive from ``KMLViewException`` so the API layer
can turn them into consistent error responses.
"""

from typing import Any, Dict, List, Optional


class KMLViewException(Exception):
    """
    Base exception for all KML Viewer errors.

    Attributes:
        error_code: String identifier for the error type
        message: User-friendly error message
        details: Technical details for logging/debugging
        status_code: HTTP status code for API responses
        suggestions: Optional list of resolution suggestions
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}
        self.suggestions = suggestions or []

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary for API responses.

        Returns:
            Dictionary representation of the error
        """
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "suggestions": self.suggestions,
        }

    def __str__(self) -> str:
        return f"{self.error_code}: {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"error_code='{self.error_code}', "
            f"message='{self.message}', "
            f"status_code={self.status_code})"
        )


class ValidationError(KMLViewException):
    """
    Raised when input validation fails.

    Maps to HTTP 400 Bad Request.
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        error_details = details or {}
        if field:
            error_details["field"] = field

        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            status_code=400,
            details=error_details,
            suggestions=suggestions or ["Check the input format and try again"],
        )


class ParseError(KMLViewException):
    """
    Raised when a KML document cannot be parsed.

    Used for malformed XML. Maps to HTTP 422 Unprocessable Entity.
    """

    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        error_details = details or {}
        error_details["file_type"] = "KML"
        if line_number:
            error_details["line_number"] = line_number

        default_suggestions = [
            "Verify the file is well-formed XML",
            "Try opening the file in Google Earth to validate it",
        ]

        super().__init__(
            message=message,
            error_code="PARSE_ERROR",
            status_code=422,
            details=error_details,
            suggestions=suggestions or default_suggestions,
        )


class NotFoundError(KMLViewException):
    """
    Raised when a requested resource is not available.

    Maps to HTTP 404 Not Found.
    """

    def __init__(
        self,
        message: str,
        error_code: str = "NOT_FOUND",
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        super().__init__(
            message=message,
            error_code=error_code,
            status_code=404,
            details=details,
            suggestions=suggestions,
        )


class FileTooLargeError(ValidationError):
    """
    Raised when an upload exceeds the configured size limit.

    Maps to HTTP 413 Request Entity Too Large.
    """

    def __init__(self, message: str, file_size: int, max_size: int):
        super().__init__(
            message,
            field="file",
            details={"file_size": file_size, "max_size": max_size},
            suggestions=["Split the document or raise KMLVIEW_MAX_UPLOAD_SIZE_MB"],
        )
        self.error_code = "FILE_TOO_LARGE"
        self.status_code = 413
