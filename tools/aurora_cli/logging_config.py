"""Logging setup for the CLI process.

Two destinations are configured:
- the "aurora_cli" logger renders warnings (or debug output with --verbose)
  through rich on stderr
- the "aurora_cli.error_log" logger appends unexpected failures to the
  error log file as "[<ISO-8601 timestamp>] <detail>" lines
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path

from rich.logging import RichHandler

from aurora_cli.output import err_console

PACKAGE_LOGGER = "aurora_cli"
ERROR_LOG_LOGGER = "aurora_cli.error_log"


class IsoTimestampFormatter(logging.Formatter):
    """Formatter whose %(asctime)s is an ISO-8601 UTC timestamp."""

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        moment = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _reset_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def configure_logging(*, error_log: Path, verbose: bool = False) -> None:
    """Install console and error-log handlers.

    Safe to call more than once; previously installed handlers are replaced.
    The error log file is only created when the first record is written.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    _reset_handlers(package_logger)
    console_handler = RichHandler(
        console=err_console,
        show_time=False,
        show_path=verbose,
        markup=False,
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(console_handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    error_logger = logging.getLogger(ERROR_LOG_LOGGER)
    _reset_handlers(error_logger)
    file_handler = logging.FileHandler(error_log, encoding="utf-8", delay=True)
    file_handler.setFormatter(IsoTimestampFormatter("[%(asctime)s] %(message)s"))
    error_logger.addHandler(file_handler)
    error_logger.setLevel(logging.ERROR)
    error_logger.propagate = False


def log_unexpected_error(error: BaseException) -> None:
    """Append an unexpected failure, with its traceback, to the error log."""
    logging.getLogger(ERROR_LOG_LOGGER).error(
        "%s", error, exc_info=(type(error), error, error.__traceback__)
    )
