"""Application factory for the cladding REST API."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cladding.web.exceptions import register_exception_handlers
from cladding.web.routers import export_router, layout_router, validate_router


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title="Panel Cladding API",
        description="REST API for running-bond panel layouts and order advice",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(layout_router, prefix="/api/v1")
    app.include_router(validate_router, prefix="/api/v1")
    app.include_router(export_router, prefix="/api/v1")

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Liveness probe."""
        return {"status": "healthy"}

    return app


# Application instance for ASGI servers
app = create_app()
