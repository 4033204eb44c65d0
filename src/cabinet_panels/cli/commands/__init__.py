"""CLI subcommands for cabinet-panels.

- validate: Validate a configuration file
- templates: Manage cabinet configuration templates
"""

from cabinet_panels.cli.commands.templates import templates_app
from cabinet_panels.cli.commands.validate import validate_command

__all__ = ["templates_app", "validate_command"]
