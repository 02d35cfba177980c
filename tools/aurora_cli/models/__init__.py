"""Domain models for extension authoring.

- ExtensionAnswers / Manifest / ManifestAuthor: what gets written to extension.json
- AuthorInfo: the persisted author identity
- ExtensionId: a safe directory name under extensions/
"""

from aurora_cli.models.author import AuthorInfo
from aurora_cli.models.common import ExtensionId, is_valid_extension_id, validate_extension_id
from aurora_cli.models.extension import (
    ExtensionAnswers,
    Manifest,
    ManifestAuthor,
    build_manifest,
)

__all__ = [
    "AuthorInfo",
    "ExtensionAnswers",
    "ExtensionId",
    "Manifest",
    "ManifestAuthor",
    "build_manifest",
    "is_valid_extension_id",
    "validate_extension_id",
]
