"""Layout calculation endpoints."""

import math

from fastapi import APIRouter
from fastapi.responses import Response

from cladding.application.config import config_to_dtos, load_config_from_dict
from cladding.application.dtos import (
    ExclusionInput,
    LayoutOutput,
    PanelInput,
    WallInput,
)
from cladding.infrastructure import LayoutRenderer
from cladding.web.dependencies import LayoutCommandDep
from cladding.web.exceptions import LayoutCalculationError
from cladding.web.schemas.requests import LayoutFromConfigRequest, LayoutRequest
from cladding.web.schemas.responses import (
    LayoutResponseSchema,
    LayoutSummarySchema,
    PlacedPanelSchema,
)

router = APIRouter(prefix="/layout", tags=["layout"])

MAX_LAYOUT_CELLS = 100_000


def request_to_inputs(
    request: LayoutRequest,
) -> tuple[WallInput, PanelInput, list[ExclusionInput]]:
    """Convert a layout request into command inputs."""
    wall_input = WallInput(width=request.wall.width, height=request.wall.height)
    panel_input = PanelInput(width=request.panel.width, height=request.panel.height)
    exclusion_inputs = [
        ExclusionInput(
            id=e.id or str(index + 1),
            x=e.x,
            y=e.y,
            width=e.width,
            height=e.height,
            kind=e.type.value,
        )
        for index, e in enumerate(request.exclusions)
    ]
    return wall_input, panel_input, exclusion_inputs


def check_layout_size(wall_input: WallInput, panel_input: PanelInput) -> None:
    """Refuse layouts whose nominal grid exceeds MAX_LAYOUT_CELLS.

    Non-positive or non-finite sizes are left for the command to report.

    Raises:
        LayoutCalculationError: If the grid is too large to compute per request.
    """
    sizes = (wall_input.width, wall_input.height, panel_input.width, panel_input.height)
    if not all(math.isfinite(s) and s > 0 for s in sizes):
        return
    columns = math.ceil(wall_input.width / panel_input.width)
    courses = math.ceil(wall_input.height / panel_input.height)
    if columns * courses > MAX_LAYOUT_CELLS:
        raise LayoutCalculationError(
            [
                f"Layout needs {columns} x {courses} panel cells; "
                f"at most {MAX_LAYOUT_CELLS} are allowed per request"
            ]
        )


def execute_layout(
    command: LayoutCommandDep,
    wall_input: WallInput,
    panel_input: PanelInput,
    exclusion_inputs: list[ExclusionInput],
) -> LayoutOutput:
    """Size-check and run the layout command.

    Raises:
        LayoutCalculationError: If the grid is too large or the inputs are invalid.
    """
    check_layout_size(wall_input, panel_input)
    output = command.execute(wall_input, panel_input, exclusion_inputs)
    if not output.is_valid:
        raise LayoutCalculationError(output.errors)
    return output


def run_layout(command: LayoutCommandDep, request: LayoutRequest) -> LayoutOutput:
    """Run the layout command, raising LayoutCalculationError on bad input."""
    return execute_layout(command, *request_to_inputs(request))


def layout_output_to_schema(output: LayoutOutput) -> LayoutResponseSchema:
    """Convert LayoutOutput to response schema."""
    result = output.result
    return LayoutResponseSchema(
        summary=LayoutSummarySchema(
            gross_area=result.gross_area,
            net_area=result.net_area,
            theoretical_panels=result.theoretical_panels,
            practical_panels=result.practical_panels,
            waste_area=result.waste_area,
            placed_count=result.placed_count,
            reused_count=result.reused_count,
        ),
        placed_panels=[
            PlacedPanelSchema(
                id=p.id,
                row=p.row,
                column=p.column,
                x=p.x,
                y=p.y,
                width=p.width,
                height=p.height,
                is_cut=p.is_cut,
                is_offcut_reuse=p.is_offcut_reuse,
            )
            for p in result.placed_panels
        ],
    )


@router.post("", response_model=LayoutResponseSchema)
def calculate_layout(
    request: LayoutRequest,
    command: LayoutCommandDep,
) -> LayoutResponseSchema:
    """Calculate the panel layout for a wall.

    Raises:
        LayoutCalculationError: If any dimension is not positive or the
            panel grid is too large.
    """
    return layout_output_to_schema(run_layout(command, request))


@router.post("/config", response_model=LayoutResponseSchema)
def calculate_layout_from_config(
    request: LayoutFromConfigRequest,
    command: LayoutCommandDep,
) -> LayoutResponseSchema:
    """Calculate the panel layout from a full job configuration.

    Raises:
        ConfigError: If the configuration fails schema validation.
        LayoutCalculationError: If the layout command rejects the inputs.
    """
    config = load_config_from_dict(request.config)
    return layout_output_to_schema(execute_layout(command, *config_to_dtos(config)))


@router.post("/svg")
def render_layout_svg(
    request: LayoutRequest,
    command: LayoutCommandDep,
) -> Response:
    """Render the layout as an SVG drawing."""
    output = run_layout(command, request)
    return Response(
        content=LayoutRenderer().render_svg(output),
        media_type="image/svg+xml",
    )
