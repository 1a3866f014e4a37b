"""CLI command implementations for the cladding application.

This package contains subcommands for the cladding CLI, including:
- validate: Validate a job file
"""

from cladding.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]
