"""CLI command implementations for the patioroof application.

- validate: Validate a configuration file
- output_handlers: Quote rendering and multi-format export
"""

from patioroof.cli.commands.output_handlers import (
    emit,
    handle_multi_format_export,
    render_quote,
)
from patioroof.cli.commands.validate import display_load_error, validate_command

__all__ = [
    "display_load_error",
    "emit",
    "handle_multi_format_export",
    "render_quote",
    "validate_command",
]
