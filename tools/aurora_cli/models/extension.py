"""Domain models for extension authoring.

ExtensionAnswers is what the create prompt collects; Manifest is the
canonical, immutable description written to extension.json.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from aurora_cli.config import DEFAULT_LICENSE, INITIAL_VERSION
from aurora_cli.models.author import AuthorInfo


@dataclass(frozen=True)
class ExtensionAnswers:
    """Answers collected by the interactive create flow.

    Invariants (guaranteed by the prompt layer, re-checked by the schema):
        - name, description and license are non-empty
        - categories and editor_version contain at least one entry
        - type is one of config.EXTENSION_TYPES
    """
    type: str
    name: str
    description: str
    categories: tuple[str, ...]
    editor_version: tuple[str, ...]
    license: str = DEFAULT_LICENSE
    git_support: bool = False
    homepage: str | None = None


@dataclass(frozen=True)
class ManifestAuthor:
    """The author block of a manifest. No other keys are permitted."""
    name: str
    email: str = ""
    company: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "email": self.email, "company": self.company}


@dataclass(frozen=True)
class Manifest:
    """Canonical description of an extension.

    Instances are built by build_manifest() and must pass
    validation.ensure_valid_manifest() before being materialized.
    """
    name: str
    description: str
    categories: tuple[str, ...]
    type: str
    author: ManifestAuthor
    editor: tuple[str, ...]
    license: str = DEFAULT_LICENSE
    version: str = INITIAL_VERSION
    icon: str = ""
    homepage: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the extension.json document (key order is stable)."""
        result: dict[str, Any] = {
            "name": self.name,
            "description": self.description,
            "icon": self.icon,
            "categories": list(self.categories),
            "version": self.version,
            "type": self.type,
            "author": self.author.to_dict(),
            "license": self.license,
            "editor": list(self.editor),
        }
        if self.homepage is not None:
            result["homepage"] = self.homepage
        return result


def build_manifest(answers: ExtensionAnswers, author: AuthorInfo) -> Manifest:
    """Assemble a manifest from create answers and the resolved author.

    The version is always the initial release and the icon starts empty.
    No validation happens here; callers validate explicitly before use.
    """
    return Manifest(
        name=answers.name,
        description=answers.description,
        icon="",
        categories=tuple(answers.categories),
        version=INITIAL_VERSION,
        type=answers.type,
        author=ManifestAuthor(
            name=author.name or "",
            email=author.email or "",
            company=author.company or "",
        ),
        license=answers.license,
        editor=tuple(answers.editor_version),
        homepage=answers.homepage,
    )
