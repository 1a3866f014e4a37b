"""FastAPI REST API for panel layout calculation.

This module provides a REST API for calculating wall layouts, validating
job files, and exporting layouts to JSON, SVG and CSV.

Usage:
    uvicorn cladding.web:app --reload
"""

from cladding.web.app import app, create_app

__all__ = ["app", "create_app"]
