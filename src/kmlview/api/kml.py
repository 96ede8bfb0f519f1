"""
KML viewer API endpoints.

Upload a KML file into the viewer session, then read its summary, its
elements, or the rendered map.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, File, UploadFile, status
from fastapi.responses import HTMLResponse

from kmlview.core.config import settings
from kmlview.core.errors import NotFoundError, ValidationError
from kmlview.core.session import viewer_session
from kmlview.core.validation import (
    decode_kml_text,
    validate_file_extension,
    validate_file_size,
)
from kmlview.core.visualization import (
    MapRenderer,
    MapViewConfig,
    render_summary_html,
    summary_rows,
)
from kmlview.models.errors import ErrorResponse
from kmlview.models.viewer import (
    DisplayModeRequest,
    DisplayModeResponse,
    ElementsResponse,
    GeometryElement,
    SummaryResponse,
    SummaryRow,
    ViewerDocumentResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/kml", tags=["kml"])

UPLOAD_FORM = """<form action="{action}" method="post" enctype="multipart/form-data">
<input type="file" name="file" accept=".kml"><button type="submit">Upload</button>
</form>"""


def _no_document() -> NotFoundError:
    return NotFoundError(
        "No KML document has been loaded",
        error_code="NO_DOCUMENT",
        suggestions=[f"Upload a KML file to {settings.api_v1_prefix}/kml first"],
    )


def _mode_response() -> DisplayModeResponse:
    return DisplayModeResponse(
        mode=viewer_session.mode,
        summary_visible=viewer_session.summary_visible,
        map_visible=viewer_session.map_visible,
    )


@router.post(
    "",
    response_model=ViewerDocumentResponse,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid file"},
        413: {"model": ErrorResponse, "description": "File too large"},
        422: {"model": ErrorResponse, "description": "Malformed KML"},
    },
    summary="Upload a KML file",
    description=(
        "Parse a KML file and make it the current document. "
        f"Maximum file size: {settings.max_upload_size_mb}MB. "
        "Malformed XML leaves the previously loaded document in place."
    ),
)
async def upload_kml(
    file: Annotated[UploadFile, File(description="KML file to view")],
) -> ViewerDocumentResponse:
    logger.info(f"Received KML upload: {file.filename}")

    if not file.filename:
        raise ValidationError("Filename is required", field="file")

    validate_file_extension(file.filename, settings.allowed_extensions)

    content = await file.read()
    validate_file_size(len(content), settings.max_upload_size_bytes)

    document = viewer_session.load_or_raise(decode_kml_text(content))
    return ViewerDocumentResponse.from_document(document, filename=file.filename)


@router.get("/summary", response_model=SummaryResponse, summary="Geometry counts")
async def get_summary() -> SummaryResponse:
    summary = viewer_session.summary
    if summary is None:
        raise _no_document()
    return SummaryResponse(
        summary=summary,
        rows=[SummaryRow(type=kind, count=count) for kind, count in summary_rows(summary)],
    )


@router.get("/elements", response_model=ElementsResponse, summary="Parsed geometries")
async def get_elements() -> ElementsResponse:
    return ElementsResponse(
        elements=[GeometryElement(**e.to_dict()) for e in viewer_session.elements]
    )


@router.get("/mode", response_model=DisplayModeResponse, summary="Current display mode")
async def get_mode() -> DisplayModeResponse:
    return _mode_response()


@router.put("/mode", response_model=DisplayModeResponse, summary="Switch display mode")
async def set_mode(request: DisplayModeRequest) -> DisplayModeResponse:
    viewer_session.set_mode(request.mode)
    logger.debug(f"Display mode set to {request.mode.value}")
    return _mode_response()


def _render_map() -> str:
    renderer = MapRenderer(MapViewConfig.from_settings())
    renderer.add_elements(viewer_session.elements)
    return renderer.export_html_string()


@router.get("/map", response_class=HTMLResponse, summary="Interactive map")
async def get_map() -> HTMLResponse:
    if not viewer_session.elements:
        raise _no_document()
    return HTMLResponse(content=_render_map())


@router.get("/view", response_class=HTMLResponse, summary="Current view")
async def get_view() -> HTMLResponse:
    """
    Render the view selected by the display mode.

    Falls back to the upload form when the selected view has nothing to show.
    """
    if viewer_session.summary_visible:
        return HTMLResponse(content=render_summary_html(viewer_session.summary or {}))
    if viewer_session.map_visible:
        return HTMLResponse(content=_render_map())
    return HTMLResponse(
        content=UPLOAD_FORM.format(action=f"{settings.api_v1_prefix}/kml")
    )
