"""Domain exceptions."""

from __future__ import annotations


class InvalidInputError(ValueError):
    """Raised when wall, panel or exclusion inputs are not usable.

    Covers non-positive or non-finite dimensions and non-finite exclusion
    positions. Geometric oddities such as overlapping or out-of-bounds
    exclusions are accepted and never raise this error.

    Attributes:
        field: Dotted name of the offending input (e.g. "panel.width").
        value: The rejected value.
    """

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        self.field = field
        self.value = value
        super().__init__(message)
