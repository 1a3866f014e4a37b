"""Loading of JSON job files into validated configuration models.

Every failure is reported as a ``ConfigError`` whose ``error_type`` tells
the caller what went wrong (missing file, unreadable file, bad JSON or a
schema violation) and whose ``details`` point at the offending location.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from cladding.application.config.schema import CladdingConfiguration

FILE_NOT_FOUND = "file_not_found"
PERMISSION_DENIED = "permission_denied"
FILE_READ_ERROR = "file_read_error"
JSON_PARSE = "json_parse"
VALIDATION = "validation"


class ConfigError(Exception):
    """A job file or job dictionary could not be turned into a configuration.

    Attributes:
        message: Human-readable summary.
        error_type: One of ``file_not_found``, ``permission_denied``,
            ``file_read_error``, ``json_parse`` or ``validation``.
        path: The job file, when loading from disk.
        details: Per-problem dicts. JSON errors carry ``line``, ``column``
            and ``message``; schema errors carry ``path``, ``message``,
            ``value`` and ``error_type``.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = list(details) if details else []

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic error location the way it would be written in JSON.

    Examples:
        >>> _format_json_path(("wall", "width"))
        'wall.width'
        >>> _format_json_path(("exclusions", 0, "height"))
        'exclusions[0].height'
    """
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        elif path:
            path += f".{segment}"
        else:
            path = str(segment)
    return path


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    return [
        {
            "path": _format_json_path(item["loc"]),
            "message": item["msg"],
            "value": item.get("input"),
            "error_type": item["type"],
        }
        for item in error.errors()
    ]


def _describe(details: list[dict[str, Any]], source: str) -> str:
    lines = [f"Invalid job configuration in {source}:"]
    for detail in details:
        entry = f"  - {detail['path']}: {detail['message']}"
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            entry += f" (got: {value!r})"
        lines.append(entry)
    return "\n".join(lines)


def _build(data: Any, path: Path | None) -> CladdingConfiguration:
    try:
        return CladdingConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        source = str(path) if path is not None else "request"
        raise ConfigError(
            message=_describe(details, source),
            error_type=VALIDATION,
            path=path,
            details=details,
        ) from e


def _read_text(path: Path) -> str:
    if not path.exists():
        raise ConfigError(
            message=f"Job file not found: {path}",
            error_type=FILE_NOT_FOUND,
            path=path,
        )
    try:
        return path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            message=f"No permission to read job file: {path}",
            error_type=PERMISSION_DENIED,
            path=path,
        ) from e
    except OSError as e:
        raise ConfigError(
            message=f"Could not read job file {path}: {e}",
            error_type=FILE_READ_ERROR,
            path=path,
        ) from e


def load_config(path: Path) -> CladdingConfiguration:
    """Read, parse and validate a JSON job file.

    Raises:
        ConfigError: If the file is missing, unreadable, not valid JSON or
            does not match the schema. ``error_type`` names the case.

    Example:
        >>> try:
        ...     config = load_config(Path("garage.json"))
        ... except ConfigError as e:
        ...     print(e.error_type, e.details)
    """
    text = _read_text(path)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"{path} is not valid JSON: {e.msg} at line {e.lineno}, column {e.colno}",
            error_type=JSON_PARSE,
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e
    return _build(data, path)


def load_config_from_dict(data: dict[str, Any]) -> CladdingConfiguration:
    """Validate a job configuration that is already parsed, e.g. a request body.

    Raises:
        ConfigError: With ``error_type="validation"`` and no path.
    """
    return _build(data, None)
