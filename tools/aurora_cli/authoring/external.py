"""Invocation of external command-line tools."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from aurora_cli.errors import ExternalToolError

logger = logging.getLogger(__name__)


def run_external(command: Sequence[str], cwd: Path) -> str:
    """Run a command to completion in cwd and return its stdout.

    Raises:
        ExternalToolError: If the binary cannot be started or exits non-zero
    """
    logger.debug("Running %s in %s", " ".join(command), cwd)
    try:
        result = subprocess.run(
            list(command),
            cwd=cwd,
            check=False,
            capture_output=True,
            text=True,
        )
    except OSError as exc:
        raise ExternalToolError(command, None, str(exc)) from exc
    if result.returncode != 0:
        output = (result.stderr or result.stdout or "").strip()
        raise ExternalToolError(command, result.returncode, output)
    return result.stdout.strip()


def git_init(directory: Path) -> None:
    """Initialize a git repository in directory.

    Raises:
        ExternalToolError: If git is missing or `git init` fails
    """
    run_external(["git", "init"], cwd=directory)
