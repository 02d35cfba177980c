"""Validation layer for extension manifests."""

from aurora_cli.validation.schemas import (
    MANIFEST_SCHEMA,
    ensure_valid_manifest,
    validate_manifest,
)

__all__ = [
    "MANIFEST_SCHEMA",
    "ensure_valid_manifest",
    "validate_manifest",
]
