"""Configuration validation endpoints."""

from fastapi import APIRouter

from cladding.application.config import (
    ConfigError,
    load_config_from_dict,
    validate_config,
)
from cladding.web.schemas.requests import ConfigValidateRequest
from cladding.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a job configuration without calculating.

    Schema failures come back as errors in the body rather than as an
    error response.
    """
    try:
        config = load_config_from_dict(request.config)
    except ConfigError as e:
        return ValidationResultSchema(
            is_valid=False,
            errors=[{"path": d["path"], "message": d["message"]} for d in e.details],
        )

    result = validate_config(config)
    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"path": e.path, "message": e.message} for e in result.errors],
        warnings=[{"path": w.path, "message": w.message} for w in result.warnings],
    )
