"""
Data models and schemas.
"""

from .errors import ErrorDetail, ErrorResponse
from .viewer import (
    DisplayModeRequest,
    DisplayModeResponse,
    ElementsResponse,
    GeometryElement,
    SummaryResponse,
    SummaryRow,
    ViewerDocumentResponse,
)

__all__ = [
    "DisplayModeRequest",
    "DisplayModeResponse",
    "ElementsResponse",
    "ErrorDetail",
    "ErrorResponse",
    "GeometryElement",
    "SummaryResponse",
    "SummaryRow",
    "ViewerDocumentResponse",
]
