"""Repositories for persisted state.

- AuthorRepository loads and saves the per-user author record
- ExtensionRepository gives typed access to the extensions/ directory
All file locations are injected so tests can point them at tmp_path.
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from aurora_cli.config import MANIFEST_FILENAME
from aurora_cli.errors import (
    CliError,
    InvalidJsonError,
    InvalidValueError,
    NotFoundError,
)
from aurora_cli.models.author import AuthorInfo
from aurora_cli.models.common import ExtensionId, validate_extension_id
from aurora_cli.persistence.json_io import read_config_file, read_json_file, write_json_file

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Author
# -----------------------------------------------------------------------------

class AuthorRepository:
    """Per-user author record stored as JSON at an injected path."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def exists(self) -> bool:
        return self.path.is_file()

    def _read_raw(self) -> dict[str, Any]:
        data = read_config_file(self.path)
        if not isinstance(data, dict):
            raise InvalidJsonError(str(self.path), "root must be an object")
        return data

    def load(self) -> AuthorInfo:
        """Load the stored record.

        Returns:
            The stored AuthorInfo, or an empty one when the file is missing,
            unreadable or corrupt (the latter two are logged as warnings).
        """
        if not self.exists():
            logger.info("Author information file not found at %s", self.path)
            return AuthorInfo()
        try:
            info = AuthorInfo.from_dict(self._read_raw())
        except (OSError, CliError) as exc:
            logger.warning("Error reading author information: %s", exc)
            return AuthorInfo()
        logger.info("Loaded author information from %s", self.path)
        return info

    def save(self, info: AuthorInfo) -> None:
        """Merge the record into the stored file, creating parent directories.

        Keys already on disk that AuthorInfo does not model are preserved.

        Raises:
            OSError: If the file cannot be written
        """
        stored: dict[str, Any] = {}
        if self.exists():
            try:
                stored = self._read_raw()
            except (OSError, CliError) as exc:
                logger.warning("Overwriting unreadable author file %s: %s", self.path, exc)
        stored.update(info.to_dict())
        write_json_file(self.path, stored)


# -----------------------------------------------------------------------------
# Extensions
# -----------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ExtensionEntry:
    """One directory under extensions/.

    manifest is None when the directory has no readable extension.json.
    """
    extension_id: ExtensionId
    path: Path
    manifest: dict[str, Any] | None


def load_manifest_file(path: Path) -> dict[str, Any]:
    """Read an extension.json file.

    Raises:
        NotFoundError: If the file is missing
        InvalidJsonError: If it is not a JSON object
    """
    if not path.is_file():
        raise NotFoundError(
            "Manifest",
            str(path),
            f"{MANIFEST_FILENAME} file not found in {path.parent}.",
        )
    data = read_json_file(path)
    if not isinstance(data, dict):
        raise InvalidJsonError(str(path), "root must be an object")
    return data


class ExtensionRepository:
    """Typed access to the extensions/ directory of a workspace."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def exists(self) -> bool:
        return self.root.is_dir()

    def resolve(self, extension_id: str) -> Path:
        """Map an id to its directory without checking that it exists.

        Raises:
            InvalidValueError: If the id would escape the extensions directory
        """
        safe_id = validate_extension_id(extension_id)
        if safe_id is None:
            raise InvalidValueError(extension_id, "extension id must be a plain directory name")
        return self.root / safe_id

    def list_entries(self) -> list[ExtensionEntry]:
        """All entries under the root, sorted by name.

        Raises:
            NotFoundError: If the extensions directory does not exist
        """
        if not self.exists():
            raise NotFoundError("Directory", str(self.root), "No extensions directory found.")
        entries = []
        for child in sorted(self.root.iterdir(), key=lambda p: p.name):
            manifest = None
            manifest_path = child / MANIFEST_FILENAME
            if child.is_dir() and manifest_path.is_file():
                try:
                    manifest = load_manifest_file(manifest_path)
                except (OSError, CliError) as exc:
                    logger.warning("Skipping unreadable manifest %s: %s", manifest_path, exc)
            entries.append(ExtensionEntry(ExtensionId(child.name), child, manifest))
        return entries

    def find(self, extension_id: str) -> Path:
        """Return the directory of an existing extension.

        Raises:
            InvalidValueError: If the id is unsafe
            NotFoundError: If no such extension exists
        """
        path = self.resolve(extension_id)
        if not path.exists():
            raise NotFoundError(
                "Extension",
                extension_id,
                f"Extension with ID {extension_id} does not exist.",
            )
        return path

    def load_manifest(self, extension_id: str) -> dict[str, Any]:
        return load_manifest_file(self.find(extension_id) / MANIFEST_FILENAME)

    def save_manifest(self, extension_id: str, manifest: dict[str, Any]) -> Path:
        path = self.find(extension_id) / MANIFEST_FILENAME
        write_json_file(path, manifest)
        return path

    def remove(self, extension_id: str) -> Path:
        """Delete an extension directory and everything in it."""
        path = self.find(extension_id)
        if path.is_dir():
            shutil.rmtree(path)
        else:
            path.unlink()
        return path
