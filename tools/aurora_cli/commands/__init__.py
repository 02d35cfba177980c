"""CLI commands for the aurora tool.

This module exports all command handlers:
- extensions: create, list, upload, update, remove, deprecate, install
- help: usage text or structured description
- handling: the error boundary wrapped around every handler
"""

from aurora_cli.commands.context import CommandContext
from aurora_cli.commands.extensions import (
    cmd_extension_create,
    cmd_extension_deprecate,
    cmd_extension_install,
    cmd_extension_list,
    cmd_extension_remove,
    cmd_extension_update,
    cmd_extension_upload,
)
from aurora_cli.commands.handling import Handler, with_error_handling
from aurora_cli.commands.help import cmd_help, describe_parser

__all__ = [
    "CommandContext",
    "Handler",
    "with_error_handling",
    # Extensions
    "cmd_extension_create",
    "cmd_extension_list",
    "cmd_extension_upload",
    "cmd_extension_update",
    "cmd_extension_remove",
    "cmd_extension_deprecate",
    "cmd_extension_install",
    # Help
    "cmd_help",
    "describe_parser",
]
