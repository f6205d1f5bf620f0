"""CLI command implementations for the editbook application.

- validate: Validate a case file
"""

from editbook.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]
