"""Install the extension in the working directory into the editor.

Installation is only available on macOS, where the editor reads extensions
from ~/Library/Application Support/com.auroraeditor/Extensions.
"""

from __future__ import annotations

import logging
import shutil
import sys
from pathlib import Path
from typing import Any

from aurora_cli.config import (
    DEFAULT_INSTALL_SUFFIX,
    INSTALL_PLATFORM,
    INSTALL_SUFFIXES,
    MANIFEST_FILENAME,
)
from aurora_cli.errors import PlatformUnsupportedError
from aurora_cli.persistence.repositories import load_manifest_file
from aurora_cli.validation import ensure_valid_manifest

logger = logging.getLogger(__name__)


def install_suffix(manifest: dict[str, Any]) -> str:
    """AEext for swift extensions, JSext for everything else."""
    return INSTALL_SUFFIXES.get(str(manifest.get("type", "")), DEFAULT_INSTALL_SUFFIX)


def install_extension(
    cwd: Path,
    *,
    install_root: Path,
    platform: str | None = None,
) -> Path:
    """Copy the extension in cwd to <install_root>/<name>.<suffix>.

    Fails fast, before touching the filesystem, when not on macOS or when
    extension.json is missing, unreadable or invalid.

    Returns:
        The installation path

    Raises:
        PlatformUnsupportedError: If not running on macOS
        NotFoundError: If extension.json is missing
        InvalidJsonError: If extension.json cannot be parsed
        ValidationError: If the manifest is invalid
    """
    if (platform or sys.platform) != INSTALL_PLATFORM:
        raise PlatformUnsupportedError("install")

    manifest = load_manifest_file(cwd / MANIFEST_FILENAME)
    ensure_valid_manifest(manifest)

    install_path = install_root / f"{manifest['name']}.{install_suffix(manifest)}"
    install_path.parent.mkdir(parents=True, exist_ok=True)
    logger.debug("Installing %s to %s", cwd, install_path)
    shutil.copytree(cwd, install_path, dirs_exist_ok=True)
    return install_path
