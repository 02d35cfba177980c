"""Per-invocation state handed to every command handler."""

from __future__ import annotations

from dataclasses import dataclass, field

from aurora_cli.persistence import AuthorRepository, ExtensionRepository, WorkspacePaths
from aurora_cli.prompts import Prompter


@dataclass
class CommandContext:
    """Resolved paths, repositories and the prompt layer for one command."""
    paths: WorkspacePaths
    prompter: Prompter = field(default_factory=Prompter)

    @property
    def authors(self) -> AuthorRepository:
        return AuthorRepository(self.paths.author_file)

    @property
    def extensions(self) -> ExtensionRepository:
        return ExtensionRepository(self.paths.extensions_dir)
