"""Workspace path resolution.

Every command works relative to the current working directory plus a couple
of per-user locations. They are resolved once into WorkspacePaths so commands
and tests never reach for module-level paths.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from aurora_cli.config import (
    AUTHOR_FILENAME,
    DIST_DIRNAME,
    ERROR_LOG_FILENAME,
    EXTENSIONS_DIRNAME,
    INSTALL_ROOT,
    MANIFEST_FILENAME,
    default_config_dir,
    default_templates_dir,
)


@dataclass(frozen=True, slots=True)
class WorkspacePaths:
    """Resolved locations for one CLI invocation.

    Invariants:
        - cwd is absolute
        - none of the paths are required to exist yet
    """
    cwd: Path
    config_dir: Path
    templates_root: Path
    install_root: Path

    @property
    def author_file(self) -> Path:
        return self.config_dir / AUTHOR_FILENAME

    @property
    def extensions_dir(self) -> Path:
        return self.cwd / EXTENSIONS_DIRNAME

    @property
    def manifest_file(self) -> Path:
        """extension.json of the extension in the working directory."""
        return self.cwd / MANIFEST_FILENAME

    @property
    def dist_dir(self) -> Path:
        return self.cwd / DIST_DIRNAME

    @property
    def error_log(self) -> Path:
        return self.cwd / ERROR_LOG_FILENAME


def resolve_workspace_paths(
    cwd: Path | None = None,
    *,
    config_dir: Path | None = None,
    templates_root: Path | None = None,
    install_root: Path | None = None,
) -> WorkspacePaths:
    """Resolve all locations, falling back to environment and defaults.

    Args:
        cwd: Working directory (defaults to Path.cwd())
        config_dir: Directory holding author.json (defaults to AURORA_CONFIG_DIR or ~/.aurora)
        templates_root: Template root (defaults to AURORA_TEMPLATES_DIR or the bundled templates)
        install_root: Editor extension folder used by install
    """
    return WorkspacePaths(
        cwd=(cwd or Path.cwd()).resolve(),
        config_dir=(config_dir or default_config_dir()).expanduser(),
        templates_root=(templates_root or default_templates_dir()).expanduser(),
        install_root=install_root or INSTALL_ROOT,
    )
