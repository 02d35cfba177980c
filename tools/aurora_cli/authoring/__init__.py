"""Extension authoring pipeline.

- author_info: resolve the author identity (load, prompt, persist)
- materializer: write a validated manifest and template to disk
- installer: copy an extension into the editor (macOS only)
- lifecycle: update, deprecate and package existing extensions
- external: run git and other external tools
"""

from aurora_cli.authoring.author_info import resolve_author_info
from aurora_cli.authoring.external import git_init, run_external
from aurora_cli.authoring.installer import install_extension, install_suffix
from aurora_cli.authoring.lifecycle import (
    bump_patch,
    deprecate_extension,
    package_extension,
    update_extension,
)
from aurora_cli.authoring.materializer import materialize

__all__ = [
    "bump_patch",
    "deprecate_extension",
    "git_init",
    "install_extension",
    "install_suffix",
    "materialize",
    "package_extension",
    "resolve_author_info",
    "run_external",
    "update_extension",
]
