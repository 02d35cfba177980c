from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import pytest

from aurora_cli.commands.context import CommandContext
from aurora_cli.persistence import AuthorRepository, resolve_workspace_paths
from aurora_cli.prompts import Validator


class ScriptedPrompter:
    """Prompter double that replays queued answers and records every question."""

    def __init__(self, answers: Sequence[Any] = ()) -> None:
        self.answers = list(answers)
        self.asked: list[str] = []

    def _next(self, message: str) -> Any:
        self.asked.append(message)
        if not self.answers:
            raise AssertionError(f"unexpected prompt: {message}")
        return self.answers.pop(0)

    def text(self, message: str, *, default: str | None = None, validate: Validator | None = None) -> str:
        answer = self._next(message)
        if validate is not None:
            problem = validate(answer)
            assert problem is None, problem
        return answer

    def select(self, message: str, choices: Sequence[str]) -> str:
        answer = self._next(message)
        assert answer in choices
        return answer

    def checkbox(self, message: str, choices: Sequence[str], *, error: str = "") -> list[str]:
        answer = self._next(message)
        assert answer and all(choice in choices for choice in answer)
        return list(answer)

    def confirm(self, message: str, *, default: bool = True) -> bool:
        return bool(self._next(message))


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    root = tmp_path / "workspace"
    root.mkdir()
    monkeypatch.chdir(root)
    monkeypatch.setenv("AURORA_CONFIG_DIR", str(tmp_path / "config"))
    return root


@pytest.fixture
def templates_root(tmp_path: Path) -> Path:
    root = tmp_path / "templates"
    (root / "javascript").mkdir(parents=True)
    (root / "javascript" / "index.js").write_text("module.exports = {};\n", encoding="utf-8")
    (root / "swift" / "Sources").mkdir(parents=True)
    (root / "swift" / "Sources" / "main.swift").write_text("print(1)\n", encoding="utf-8")
    return root


@pytest.fixture
def author_repository(tmp_path: Path) -> AuthorRepository:
    return AuthorRepository(tmp_path / "config" / "author.json")


@pytest.fixture
def make_context(workspace: Path, templates_root: Path, tmp_path: Path):
    def factory(answers: Sequence[Any] = ()) -> CommandContext:
        paths = resolve_workspace_paths(
            workspace,
            config_dir=tmp_path / "config",
            templates_root=templates_root,
            install_root=tmp_path / "installed",
        )
        return CommandContext(paths=paths, prompter=ScriptedPrompter(answers))

    return factory


@pytest.fixture
def valid_manifest() -> dict[str, Any]:
    return {
        "name": "demo",
        "description": "d",
        "icon": "",
        "categories": ["Snippets"],
        "version": "0.0.1",
        "type": "javascript",
        "author": {"name": "A", "email": "", "company": ""},
        "license": "MIT",
        "editor": ["1.0.0"],
    }


def write_manifest(directory: Path, manifest: dict[str, Any]) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / "extension.json"
    path.write_text(json.dumps(manifest, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def manifest_writer():
    return write_manifest
