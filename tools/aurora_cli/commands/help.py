"""Help command: plain usage text or a structured description of the CLI."""

from __future__ import annotations

import argparse
from typing import Any

from aurora_cli import __version__, output
from aurora_cli.commands.context import CommandContext


def _describe_options(parser: argparse.ArgumentParser) -> list[dict[str, Any]]:
    options = []
    for action in parser._actions:
        if not action.option_strings or action.help == argparse.SUPPRESS:
            continue
        flags = ", ".join(action.option_strings)
        if action.metavar is not None:
            flags += f" <{action.metavar}>"
        options.append({"flags": flags, "description": action.help or ""})
    return options


def describe_parser(parser: argparse.ArgumentParser) -> dict[str, Any]:
    """Build a structured description of the program, its commands and options."""
    commands = []
    for action in parser._actions:
        if not isinstance(action, argparse._SubParsersAction):
            continue
        summaries = {choice.dest: choice.help or "" for choice in action._choices_actions}
        for name, subparser in action.choices.items():
            commands.append({
                "name": name,
                "description": summaries.get(name, ""),
                "options": _describe_options(subparser),
            })
    return {
        "name": parser.prog,
        "description": parser.description or "",
        "version": __version__,
        "commands": commands,
        "options": _describe_options(parser),
    }


def cmd_help(_context: CommandContext, args: argparse.Namespace) -> int:
    """Print usage, or the structured description with --json."""
    parser: argparse.ArgumentParser = args.root_parser
    if args.json:
        output.print_json(describe_parser(parser))
    else:
        parser.print_help()
    return 0
