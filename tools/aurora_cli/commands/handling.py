"""Error boundary applied to every command handler.

with_error_handling() is composed once, when handlers are registered on the
parser, so individual commands simply raise.
"""

from __future__ import annotations

import argparse
import functools
from collections.abc import Callable

from aurora_cli import output
from aurora_cli.commands.context import CommandContext
from aurora_cli.errors import CliError, UserCancelledError
from aurora_cli.logging_config import log_unexpected_error

Handler = Callable[[CommandContext, argparse.Namespace], int]


def with_error_handling(handler: Handler) -> Handler:
    """Wrap a handler so no exception escapes it.

    - UserCancelledError: yellow notice, exit code 0
    - other CliError: red message, exit code 0
    - anything else: red message plus an error-log entry, exit code 0
    """
    @functools.wraps(handler)
    def wrapper(context: CommandContext, args: argparse.Namespace) -> int:
        try:
            return int(handler(context, args) or 0)
        except UserCancelledError as error:
            output.notice(str(error))
            return 0
        except CliError as error:
            output.failure(str(error))
            return 0
        except Exception as error:  # noqa: BLE001
            output.failure(f"An unexpected error occurred: {error}")
            log_unexpected_error(error)
            return 0

    return wrapper
