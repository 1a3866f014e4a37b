"""Validation structures and geometric advisory checks.

The schema only guarantees positive dimensions. This module adds the
checks a caller is responsible for before trusting the net area: openings
that stick out of the wall or overlap each other are counted in full, so
the net area and waste figures come out skewed.
"""

from dataclasses import dataclass, field
from itertools import combinations
from typing import Any

from cladding.application.config.schema import CladdingConfiguration, ExclusionConfig


@dataclass
class ValidationError:
    """A problem that makes the job file unusable.

    Attributes:
        path: Location in the job file, e.g. ``exclusions[1].id``.
        message: What is wrong.
        value: The offending value, when there is one.
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """Advice about a job file that can still be calculated.

    Attributes:
        path: Location in the job file.
        message: What looks suspicious.
        suggestion: How to fix it, if obvious.
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Errors and warnings collected by ``validate_config``."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """True when nothing blocks a calculation."""
        return not self.errors

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @property
    def exit_code(self) -> int:
        """Process exit code: 1 on errors, 2 on warnings only, else 0."""
        if self.errors:
            return 1
        return 2 if self.warnings else 0

    def add_error(self, path: str, message: str, value: Any = None) -> "ValidationResult":
        """Record an error; returns self so calls can be chained."""
        self.errors.append(ValidationError(path, message, value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Record a warning; returns self so calls can be chained."""
        self.warnings.append(ValidationWarning(path, message, suggestion))
        return self


def _overlap_area(a: ExclusionConfig, b: ExclusionConfig) -> float:
    overlap_w = min(a.x + a.width, b.x + b.width) - max(a.x, b.x)
    overlap_h = min(a.y + a.height, b.y + b.height) - max(a.y, b.y)
    if overlap_w <= 0 or overlap_h <= 0:
        return 0.0
    return overlap_w * overlap_h


def check_duplicate_ids(config: CladdingConfiguration) -> list[ValidationError]:
    """Exclusion ids must be unique so reports can refer to them."""
    errors: list[ValidationError] = []
    seen: set[str] = set()
    for index, exclusion in enumerate(config.exclusions):
        if exclusion.id in seen:
            errors.append(
                ValidationError(
                    path=f"exclusions[{index}].id",
                    message=f"Duplicate exclusion id '{exclusion.id}'",
                    value=exclusion.id,
                )
            )
        seen.add(exclusion.id)
    return errors


def check_exclusion_bounds(config: CladdingConfiguration) -> list[ValidationWarning]:
    """Warn about openings that extend past the wall edges."""
    warnings: list[ValidationWarning] = []
    wall = config.wall
    for index, exclusion in enumerate(config.exclusions):
        right = exclusion.x + exclusion.width
        top = exclusion.y + exclusion.height
        if exclusion.x < 0 or exclusion.y < 0 or right > wall.width or top > wall.height:
            warnings.append(
                ValidationWarning(
                    path=f"exclusions[{index}]",
                    message=(
                        f"Exclusion '{exclusion.id}' extends beyond the "
                        f"{wall.width:g} x {wall.height:g} cm wall; net area will be understated"
                    ),
                    suggestion="Clip the opening to the wall edges",
                )
            )
    return warnings


def check_exclusion_overlaps(config: CladdingConfiguration) -> list[ValidationWarning]:
    """Warn about openings that overlap each other."""
    warnings: list[ValidationWarning] = []
    indexed = list(enumerate(config.exclusions))
    for (i, a), (j, b) in combinations(indexed, 2):
        area = _overlap_area(a, b)
        if area > 0:
            warnings.append(
                ValidationWarning(
                    path=f"exclusions[{j}]",
                    message=(
                        f"Exclusion '{b.id}' overlaps exclusion '{a.id}' by "
                        f"{area:g} cm²; the overlap is subtracted twice"
                    ),
                    suggestion="Merge or trim overlapping openings",
                )
            )
    return warnings


def check_panel_fits(config: CladdingConfiguration) -> list[ValidationWarning]:
    """Warn when a single panel is larger than the wall."""
    warnings: list[ValidationWarning] = []
    if config.panel.width > config.wall.width:
        warnings.append(
            ValidationWarning(
                path="panel.width",
                message=(
                    f"Panel width {config.panel.width:g} cm exceeds wall width "
                    f"{config.wall.width:g} cm; every panel will be cut"
                ),
            )
        )
    if config.panel.height > config.wall.height:
        warnings.append(
            ValidationWarning(
                path="panel.height",
                message=(
                    f"Panel height {config.panel.height:g} cm exceeds wall height "
                    f"{config.wall.height:g} cm; every panel will be cut"
                ),
            )
        )
    return warnings


def check_net_area(config: CladdingConfiguration) -> list[ValidationWarning]:
    """Warn when the openings leave nothing to clad."""
    gross = config.wall.width * config.wall.height
    excluded = sum(e.width * e.height for e in config.exclusions)
    if config.exclusions and gross - excluded <= 0:
        return [
            ValidationWarning(
                path="exclusions",
                message=(
                    f"Exclusions total {excluded:g} cm², covering the whole "
                    f"{gross:g} cm² wall"
                ),
                suggestion="Check exclusion sizes and units (centimeters)",
            )
        ]
    return []


def validate_config(config: CladdingConfiguration) -> ValidationResult:
    """Perform semantic validation beyond the schema.

    Args:
        config: A schema-valid configuration.

    Returns:
        ValidationResult with errors (blocking) and warnings (advisory).
    """
    result = ValidationResult()
    result.errors.extend(check_duplicate_ids(config))
    result.warnings.extend(check_exclusion_bounds(config))
    result.warnings.extend(check_exclusion_overlaps(config))
    result.warnings.extend(check_panel_fits(config))
    result.warnings.extend(check_net_area(config))
    return result
