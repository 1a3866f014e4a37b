"""API error types and their JSON error responses."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cladding.application.config import ConfigError
from cladding.domain import InvalidInputError


class LayoutCalculationError(Exception):
    """Raised when the layout command reports input errors."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Layout failed: {errors}")


class UnsupportedFormatError(Exception):
    """Raised when no exporter is registered for the requested format."""

    def __init__(self, format_name: str, available: list[str]) -> None:
        self.format_name = format_name
        self.available = available
        super().__init__(
            f"No exporter for '{format_name}' (available: {', '.join(available)})"
        )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the JSON error handlers to an application."""

    @app.exception_handler(LayoutCalculationError)
    async def layout_error_handler(
        request: Request, exc: LayoutCalculationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Layout calculation failed",
                "error_type": "invalid_input",
                "details": [{"message": e} for e in exc.errors],
            },
        )

    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(
        request: Request, exc: InvalidInputError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "invalid_input",
                "details": [{"field": exc.field, "message": str(exc)}],
            },
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Invalid configuration",
                "error_type": exc.error_type,
                "details": [
                    {"path": d.get("path"), "message": d.get("message")}
                    for d in exc.details
                ],
            },
        )

    @app.exception_handler(UnsupportedFormatError)
    async def unsupported_format_handler(
        request: Request, exc: UnsupportedFormatError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={
                "error": str(exc),
                "error_type": "unsupported_format",
                "details": {"format": exc.format_name, "available": exc.available},
            },
        )
