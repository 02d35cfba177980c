#!/usr/bin/env python3
"""CLI entry point for the aurora extension tool.

This module provides the argument parser and main entry point that
wires together all commands from the commands package.

Usage:
    aurora extension --create
    aurora extension --list
    aurora extension --remove my-extension
    aurora help --json
"""

from __future__ import annotations

import argparse
import signal
import sys
import threading
from pathlib import Path
from types import FrameType
from typing import Final

from aurora_cli import __version__, output
from aurora_cli.commands import (
    CommandContext,
    Handler,
    cmd_extension_create,
    cmd_extension_deprecate,
    cmd_extension_install,
    cmd_extension_list,
    cmd_extension_remove,
    cmd_extension_update,
    cmd_extension_upload,
    cmd_help,
    with_error_handling,
)
from aurora_cli.config import PROGRAM_DESCRIPTION, PROGRAM_NAME
from aurora_cli.logging_config import configure_logging
from aurora_cli.persistence import resolve_workspace_paths

# Flag dest -> wrapped handler, in the order the flags are checked.
EXTENSION_HANDLERS: Final[tuple[tuple[str, Handler], ...]] = (
    ("create", with_error_handling(cmd_extension_create)),
    ("list", with_error_handling(cmd_extension_list)),
    ("upload", with_error_handling(cmd_extension_upload)),
    ("update", with_error_handling(cmd_extension_update)),
    ("remove", with_error_handling(cmd_extension_remove)),
    ("deprecate", with_error_handling(cmd_extension_deprecate)),
    ("install", with_error_handling(cmd_extension_install)),
)


def _configure_stdio_utf8() -> None:
    """Ensure non-ASCII names and paths can be printed on Windows terminals."""
    stdout = getattr(sys, "stdout", None)
    stderr = getattr(sys, "stderr", None)
    if hasattr(stdout, "reconfigure"):
        stdout.reconfigure(encoding="utf-8")  # type: ignore[attr-defined]
    if hasattr(stderr, "reconfigure"):
        stderr.reconfigure(encoding="utf-8")  # type: ignore[attr-defined]


def _announce_shutdown(signal_name: str) -> None:
    output.notice(f"\nReceived {signal_name}. Gracefully shutting down...")


def _handle_sigterm(signum: int, _frame: FrameType | None) -> None:
    _announce_shutdown(signal.Signals(signum).name)
    raise SystemExit(0)


def _install_signal_handlers() -> None:
    # SIGINT surfaces as KeyboardInterrupt and is handled in main().
    if threading.current_thread() is threading.main_thread():
        signal.signal(signal.SIGTERM, _handle_sigterm)


def build_parser() -> argparse.ArgumentParser:
    """Build the complete argument parser with all subcommands.

    Returns:
        Configured ArgumentParser with subcommands for:
        - extension (--create, --list, --upload, --update, --remove, --deprecate, --install)
        - help
    """
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description=PROGRAM_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  aurora extension --create
  aurora extension --list
  aurora extension --update my-extension
  aurora extension --install
  aurora help --json
""",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=__version__,
        help="Output the current version.",
    )
    parser.add_argument(
        "--config-dir",
        type=Path,
        default=None,
        help="Directory holding author.json (default: $AURORA_CONFIG_DIR or ~/.aurora).",
    )
    parser.add_argument(
        "--templates-dir",
        type=Path,
        default=None,
        help="Template root with one directory per language (default: bundled templates).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug logging.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # ---------------------------------------------------------------------
    # extension command
    # ---------------------------------------------------------------------
    extension_parser = subparsers.add_parser(
        "extension",
        help="Manage Aurora Editor extensions.",
    )
    actions = extension_parser.add_mutually_exclusive_group()
    actions.add_argument("--create", action="store_true", help="Create a new extension.")
    actions.add_argument("--list", action="store_true", help="List all extensions.")
    actions.add_argument(
        "--upload",
        action="store_true",
        help="Validate and package the extension in the current directory.",
    )
    actions.add_argument("--update", metavar="id", help="Update an extension by ID.")
    actions.add_argument("--remove", metavar="id", help="Remove an extension by ID.")
    actions.add_argument("--deprecate", metavar="id", help="Deprecate an extension by ID.")
    actions.add_argument(
        "--install",
        action="store_true",
        help="Install the extension in the current directory.",
    )

    # ---------------------------------------------------------------------
    # help command
    # ---------------------------------------------------------------------
    help_parser = subparsers.add_parser("help", help="Display help information.")
    help_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the commands and options as JSON.",
    )
    help_parser.set_defaults(
        handler=with_error_handling(cmd_help),
        root_parser=parser,
    )

    return parser


def resolve_handler(args: argparse.Namespace) -> Handler | None:
    """Pick the handler selected by the parsed arguments, if any."""
    if args.command == "extension":
        for dest, handler in EXTENSION_HANDLERS:
            if getattr(args, dest, None):
                return handler
        return None
    return getattr(args, "handler", None)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code: 0 on success and on any error reported by a handler
    """
    _configure_stdio_utf8()
    parser = build_parser()
    args = parser.parse_args(argv)

    paths = resolve_workspace_paths(
        config_dir=args.config_dir,
        templates_root=args.templates_dir,
    )
    configure_logging(error_log=paths.error_log, verbose=args.verbose)
    _install_signal_handlers()

    handler = resolve_handler(args)
    if handler is None:
        output.failure(f"No valid {args.command} command provided.")
        return 0

    try:
        return int(handler(CommandContext(paths=paths), args))
    except KeyboardInterrupt:
        _announce_shutdown("SIGINT")
        return 0


if __name__ == "__main__":
    raise SystemExit(main())
