"""Configuration constants for extension scaffolding.

This module centralizes the enumerations, defaults and file locations used
across the CLI. Adding a new extension language requires updating
EXTENSION_TYPES here and shipping a matching directory under templates/.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Final, FrozenSet

PROGRAM_NAME: Final[str] = "aurora"
PROGRAM_DESCRIPTION: Final[str] = (
    "Aurora CLI tool for generating extensions and managing profiles"
)


# -----------------------------------------------------------------------------
# Manifest
# -----------------------------------------------------------------------------

MANIFEST_FILENAME: Final[str] = "extension.json"
"""Name of the manifest file written at the root of every extension."""

INITIAL_VERSION: Final[str] = "0.0.1"
"""Version assigned to every freshly created extension."""

DEFAULT_LICENSE: Final[str] = "MIT"

VERSION_PATTERN: Final[str] = r"^[0-9]+\.[0-9]+\.[0-9]+\Z"
"""Semantic version shape accepted for `version` and `editor` entries.

jsonschema applies patterns with re.search, so the end is anchored with \\Z;
`$` would also accept a trailing newline.
"""

EMAIL_REGEX: Final[re.Pattern[str]] = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
"""Simple local@domain.tld check shared by the prompt and the schema."""

EXTENSION_TYPES: Final[tuple[str, ...]] = ("swift", "javascript", "typescript")
"""Supported extension languages, in prompt order."""

EXTENSION_CATEGORIES: Final[tuple[str, ...]] = (
    "Programming Languages",
    "Snippets",
    "Linters",
    "Themes",
    "Debuggers",
    "Formatters",
    "Keymaps",
    "SCM Providers",
    "Other",
    "Extension Packs",
    "Language Packs",
    "Data Science",
    "Machine Learning",
    "Visualization",
    "Notebooks",
    "Education",
    "Testing",
)
"""Category vocabulary offered by the create prompt (not enforced by the schema)."""

EDITOR_VERSIONS: Final[tuple[str, ...]] = ("1.0.0", "1.1.0", "1.2.0")
"""Editor releases an extension can declare support for."""


# -----------------------------------------------------------------------------
# Installation
# -----------------------------------------------------------------------------

INSTALL_PLATFORM: Final[str] = "darwin"
"""sys.platform value the install command is gated to."""

INSTALL_SUFFIXES: Final[dict[str, str]] = {"swift": "AEext"}
DEFAULT_INSTALL_SUFFIX: Final[str] = "JSext"

INSTALL_ROOT: Final[Path] = (
    Path.home() / "Library" / "Application Support" / "com.auroraeditor" / "Extensions"
)


# -----------------------------------------------------------------------------
# Locations
# -----------------------------------------------------------------------------

EXTENSIONS_DIRNAME: Final[str] = "extensions"
"""Directory (relative to the working directory) scanned by list/remove/update."""

DIST_DIRNAME: Final[str] = "dist"
ERROR_LOG_FILENAME: Final[str] = "error.log"
AUTHOR_FILENAME: Final[str] = "author.json"

CONFIG_DIR_ENV: Final[str] = "AURORA_CONFIG_DIR"
TEMPLATES_DIR_ENV: Final[str] = "AURORA_TEMPLATES_DIR"

DEFAULT_CONFIG_DIR: Final[Path] = Path.home() / ".aurora"
BUNDLED_TEMPLATES_DIR: Final[Path] = Path(__file__).resolve().parent / "templates"

# Files never copied into an installed or uploaded extension.
PACKAGE_EXCLUDES: Final[FrozenSet[str]] = frozenset({
    ".git",
    DIST_DIRNAME,
    ERROR_LOG_FILENAME,
    "node_modules",
    ".DS_Store",
})


def default_config_dir() -> Path:
    """Return the per-user config directory, honouring AURORA_CONFIG_DIR."""
    override = os.environ.get(CONFIG_DIR_ENV)
    return Path(override).expanduser() if override else DEFAULT_CONFIG_DIR


def default_templates_dir() -> Path:
    """Return the templates root, honouring AURORA_TEMPLATES_DIR."""
    override = os.environ.get(TEMPLATES_DIR_ENV)
    return Path(override).expanduser() if override else BUNDLED_TEMPLATES_DIR
