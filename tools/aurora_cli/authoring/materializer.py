"""Turn a validated manifest into an extension directory on disk.

Each step is a gate; a failing gate aborts the operation. Nothing already
written is rolled back, but the existence check runs before any write so a
collision never touches the existing directory.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from pathlib import Path

from aurora_cli import output
from aurora_cli.authoring.external import git_init
from aurora_cli.config import MANIFEST_FILENAME
from aurora_cli.errors import AlreadyExistsError, ExternalToolError, InvalidValueError
from aurora_cli.models.common import is_valid_extension_id
from aurora_cli.models.extension import ExtensionAnswers, Manifest
from aurora_cli.persistence.json_io import write_json_file
from aurora_cli.validation import ensure_valid_manifest

logger = logging.getLogger(__name__)


def template_dir_for(templates_root: Path, extension_type: str) -> Path:
    return templates_root / extension_type.lower()


def materialize(
    manifest: Manifest,
    answers: ExtensionAnswers,
    *,
    cwd: Path,
    templates_root: Path,
    init_repository: Callable[[Path], None] = git_init,
) -> Path:
    """Create <cwd>/<manifest.name> with its manifest, template and optional git repo.

    Args:
        manifest: The manifest to write
        answers: Create answers (only git_support is read here)
        cwd: Directory the extension is created in
        templates_root: Directory holding one template per extension type
        init_repository: Version-control initializer, called with the destination

    Returns:
        The destination directory

    Raises:
        ValidationError: If the manifest is invalid (nothing written)
        InvalidValueError: If the name is not a single directory name (nothing written)
        AlreadyExistsError: If the destination exists (nothing written)
    """
    document = manifest.to_dict()
    ensure_valid_manifest(document)

    if not is_valid_extension_id(manifest.name):
        raise InvalidValueError(manifest.name, "extension name must be a plain directory name")

    dest = cwd / manifest.name
    if dest.exists():
        raise AlreadyExistsError(manifest.name)

    dest.mkdir(parents=True)
    write_json_file(dest / MANIFEST_FILENAME, document)
    output.success(f"{MANIFEST_FILENAME} file created successfully.")

    template = template_dir_for(templates_root, manifest.type)
    if template.is_dir():
        shutil.copytree(template, dest, dirs_exist_ok=True)
        output.success(f"Template for {manifest.type} copied successfully.")
    else:
        logger.warning("Template for %s not found at %s", manifest.type, template)

    if answers.git_support:
        try:
            init_repository(dest)
        except ExternalToolError as exc:
            logger.warning("Failed to initialize Git repository: %s", exc)
        else:
            output.success("Git repository initialized successfully in the directory.")

    return dest
