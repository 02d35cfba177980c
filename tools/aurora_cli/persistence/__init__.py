"""Persistence layer for the aurora CLI.

This module exports file I/O and repository components:
- JSON/JSON5 parsing and atomic writes
- WorkspacePaths resolution
- Author and extension repositories
"""

from aurora_cli.persistence.json_io import (
    read_config_file,
    read_json_file,
    write_json_file,
)
from aurora_cli.persistence.repositories import (
    AuthorRepository,
    ExtensionEntry,
    ExtensionRepository,
    load_manifest_file,
)
from aurora_cli.persistence.workspace_paths import WorkspacePaths, resolve_workspace_paths

__all__ = [
    # JSON I/O
    "read_config_file",
    "read_json_file",
    "write_json_file",
    # Workspace Paths
    "WorkspacePaths",
    "resolve_workspace_paths",
    # Repositories
    "AuthorRepository",
    "ExtensionEntry",
    "ExtensionRepository",
    "load_manifest_file",
]
