"""Operations on existing extensions: version bumps, deprecation, packaging."""

from __future__ import annotations

import logging
import re
import zipfile
from pathlib import Path
from typing import Any

from aurora_cli.config import MANIFEST_FILENAME, PACKAGE_EXCLUDES
from aurora_cli.errors import InvalidValueError
from aurora_cli.persistence.repositories import ExtensionRepository, load_manifest_file
from aurora_cli.validation import ensure_valid_manifest

logger = logging.getLogger(__name__)

_VERSION_PARTS = re.compile(r"([0-9]+)\.([0-9]+)\.([0-9]+)")


def bump_patch(version: str) -> str:
    """Return version with its patch component incremented ("0.0.1" -> "0.0.2")."""
    match = _VERSION_PARTS.fullmatch(version)
    if match is None:
        raise InvalidValueError(version, "expected MAJOR.MINOR.PATCH")
    major, minor, patch = (int(part) for part in match.groups())
    return f"{major}.{minor}.{patch + 1}"


def update_extension(repository: ExtensionRepository, extension_id: str) -> dict[str, Any]:
    """Validate extensions/<id>/extension.json and bump its patch version.

    The file is left untouched if the current manifest is invalid.
    """
    manifest = repository.load_manifest(extension_id)
    ensure_valid_manifest(manifest)
    updated = {**manifest, "version": bump_patch(manifest["version"])}
    ensure_valid_manifest(updated)
    repository.save_manifest(extension_id, updated)
    return updated


def deprecate_extension(repository: ExtensionRepository, extension_id: str) -> dict[str, Any]:
    """Mark extensions/<id>/extension.json as deprecated.

    Deprecation is recorded as a top-level "deprecated": true key, which
    the schema tolerates. Marking an already deprecated extension is a no-op.
    """
    manifest = repository.load_manifest(extension_id)
    ensure_valid_manifest(manifest)
    if manifest.get("deprecated") is True:
        return manifest
    updated = {**manifest, "deprecated": True}
    repository.save_manifest(extension_id, updated)
    return updated


def _is_excluded(relative: Path) -> bool:
    return any(part in PACKAGE_EXCLUDES for part in relative.parts)


def package_extension(cwd: Path, dist_dir: Path) -> Path:
    """Validate the extension in cwd and zip it as <dist>/<name>-<version>.zip.

    VCS metadata, node_modules, the error log and dist/ itself are left out.

    Returns:
        Path of the archive (an existing archive of the same version is replaced)
    """
    manifest = load_manifest_file(cwd / MANIFEST_FILENAME)
    ensure_valid_manifest(manifest)

    archive = dist_dir / f"{manifest['name']}-{manifest['version']}.zip"
    dist_dir.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(archive, "w", compression=zipfile.ZIP_DEFLATED) as bundle:
        for path in sorted(cwd.rglob("*")):
            relative = path.relative_to(cwd)
            if path.is_dir() or _is_excluded(relative):
                continue
            bundle.write(path, relative.as_posix())
    logger.debug("Packaged %s into %s", cwd, archive)
    return archive
