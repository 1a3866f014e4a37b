"""Configuration schema and loading system for cladding job files.

This package provides JSON-based job file loading and validation. It
includes Pydantic models for schema validation, a loader with
comprehensive error handling, and geometric advisory checks.

Public API:
    - CladdingConfiguration: Root configuration model
    - WallConfig / PanelConfig / ExclusionConfig: Input models
    - OutputConfig / SvgOutputConfigSchema: Output options
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - validate_config: Perform semantic validation
    - config_to_dtos: Convert configuration to command inputs
    - merge_config_with_cli: Apply CLI overrides

Example:
    >>> from pathlib import Path
    >>> from cladding.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("garage.json"))
    ...     print(f"Wall: {config.wall.width}x{config.wall.height} cm")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from cladding.application.config.adapter import config_to_dtos
from cladding.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from cladding.application.config.merger import merge_config_with_cli
from cladding.application.config.schema import (
    SUPPORTED_VERSIONS,
    CladdingConfiguration,
    ExclusionConfig,
    OutputConfig,
    PanelConfig,
    SvgOutputConfigSchema,
    WallConfig,
)
from cladding.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "CladdingConfiguration",
    "ConfigError",
    "ExclusionConfig",
    "OutputConfig",
    "PanelConfig",
    "SvgOutputConfigSchema",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "WallConfig",
    "config_to_dtos",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
    "validate_config",
]
