"""Export format endpoints."""

from fastapi import APIRouter
from fastapi.responses import Response

from cladding.infrastructure.exporters import ExporterRegistry
from cladding.web.dependencies import LayoutCommandDep
from cladding.web.exceptions import UnsupportedFormatError
from cladding.web.routers.layout import run_layout
from cladding.web.schemas.requests import LayoutRequest
from cladding.web.schemas.responses import ExportFormatsSchema

router = APIRouter(prefix="/export", tags=["export"])

MEDIA_TYPES: dict[str, str] = {
    "csv": "text/csv",
    "json": "application/json",
    "svg": "image/svg+xml",
}


@router.get("/formats", response_model=ExportFormatsSchema)
async def list_export_formats() -> ExportFormatsSchema:
    """List all available export formats."""
    return ExportFormatsSchema(formats=ExporterRegistry.available_formats())


@router.post("/{format_name}")
def export_layout(
    format_name: str,
    request: LayoutRequest,
    command: LayoutCommandDep,
) -> Response:
    """Calculate a layout and return it in the requested format.

    Raises:
        UnsupportedFormatError: If no exporter is registered for the format.
    """
    if not ExporterRegistry.is_registered(format_name):
        raise UnsupportedFormatError(format_name, ExporterRegistry.available_formats())

    output = run_layout(command, request)
    exporter = ExporterRegistry.get(format_name)()
    filename = f"wall.{exporter.file_extension}"
    return Response(
        content=exporter.export_string(output),
        media_type=MEDIA_TYPES.get(format_name, "text/plain"),
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
