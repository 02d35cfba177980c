from __future__ import annotations

import json
import logging

from aurora_cli.authoring import resolve_author_info
from aurora_cli.models import AuthorInfo
from aurora_cli.persistence import AuthorRepository

from conftest import ScriptedPrompter


def test_complete_record_issues_no_prompts(author_repository):
    stored = {"name": "Ada", "email": "ada@example.com", "company": "Engines"}
    author_repository.path.parent.mkdir(parents=True)
    author_repository.path.write_text(json.dumps(stored), encoding="utf-8")
    prompter = ScriptedPrompter()

    author = resolve_author_info(author_repository, prompter)

    assert prompter.asked == []
    assert author.to_dict() == stored
    assert json.loads(author_repository.path.read_text(encoding="utf-8")) == stored


def test_missing_file_prompts_for_everything_and_saves(author_repository):
    prompter = ScriptedPrompter(["Ada", "ada@example.com", "", True])

    author = resolve_author_info(author_repository, prompter)

    assert author == AuthorInfo(name="Ada", email="ada@example.com", company="")
    assert len(prompter.asked) == 4
    assert prompter.asked[-1].startswith("Would you like to save")
    saved = json.loads(author_repository.path.read_text(encoding="utf-8"))
    assert saved == {"name": "Ada", "email": "ada@example.com", "company": ""}


def test_only_absent_fields_are_requested(author_repository):
    author_repository.path.parent.mkdir(parents=True)
    author_repository.path.write_text(
        json.dumps({"name": "Ada", "website": "https://ada.dev"}), encoding="utf-8"
    )
    prompter = ScriptedPrompter(["", "Engines", False])

    author = resolve_author_info(author_repository, prompter)

    assert prompter.asked == [
        "Enter the author email (optional)",
        "Enter the author company (optional)",
        "Would you like to save this author information for future use?",
    ]
    assert author == AuthorInfo(name="Ada", email="", company="Engines", website="https://ada.dev")


def test_blank_stored_fields_are_requested_again(author_repository):
    author_repository.path.parent.mkdir(parents=True)
    author_repository.path.write_text(
        json.dumps({"name": "A", "email": "", "company": ""}), encoding="utf-8"
    )
    prompter = ScriptedPrompter(["a@b.io", "Acme", False])

    author = resolve_author_info(author_repository, prompter)

    assert prompter.asked[:2] == [
        "Enter the author email (optional)",
        "Enter the author company (optional)",
    ]
    assert author == AuthorInfo(name="A", email="a@b.io", company="Acme")


def test_declining_save_leaves_disk_untouched(author_repository):
    prompter = ScriptedPrompter(["Ada", "", "", False])

    resolve_author_info(author_repository, prompter)

    assert not author_repository.path.exists()


def test_saved_answers_are_not_requested_again(author_repository):
    resolve_author_info(author_repository, ScriptedPrompter(["Ada", "ada@example.com", "Engines", True]))
    prompter = ScriptedPrompter()

    author = resolve_author_info(author_repository, prompter)

    assert prompter.asked == []
    assert author.name == "Ada"


def test_corrupt_file_is_logged_and_treated_as_empty(author_repository, caplog):
    author_repository.path.parent.mkdir(parents=True)
    author_repository.path.write_text("{not json at all", encoding="utf-8")
    prompter = ScriptedPrompter(["Ada", "", "", False])

    with caplog.at_level(logging.WARNING):
        author = resolve_author_info(author_repository, prompter)

    assert author.name == "Ada"
    assert "Error reading author information" in caplog.text


def test_hand_edited_file_with_comments_is_accepted(author_repository):
    author_repository.path.parent.mkdir(parents=True)
    author_repository.path.write_text(
        '{\n  // who signs the manifests\n  name: "Ada",\n  email: "ada@example.com",\n  company: "Engines",\n}\n',
        encoding="utf-8",
    )
    prompter = ScriptedPrompter()

    author = resolve_author_info(author_repository, prompter)

    assert prompter.asked == []
    assert author == AuthorInfo(name="Ada", email="ada@example.com", company="Engines")


def test_save_preserves_unknown_keys(author_repository):
    author_repository.path.parent.mkdir(parents=True)
    author_repository.path.write_text(json.dumps({"theme": "dark"}), encoding="utf-8")

    resolve_author_info(author_repository, ScriptedPrompter(["Ada", "", "", True]))

    saved = json.loads(author_repository.path.read_text(encoding="utf-8"))
    assert saved == {"theme": "dark", "name": "Ada", "email": "", "company": ""}


def test_save_failure_is_not_fatal(tmp_path, caplog):
    blocker = tmp_path / "blocker"
    blocker.write_text("a file where a directory should be", encoding="utf-8")
    repository = AuthorRepository(blocker / "author.json")

    with caplog.at_level(logging.ERROR):
        author = resolve_author_info(repository, ScriptedPrompter(["Ada", "", "", True]))

    assert author.name == "Ada"
    assert "Error saving author information" in caplog.text


def test_undecodable_file_is_logged_and_treated_as_empty(author_repository, caplog):
    author_repository.path.parent.mkdir(parents=True)
    author_repository.path.write_bytes(b'{"name": "\xff\xfe"}')
    prompter = ScriptedPrompter(["Ada", "", "", False])

    with caplog.at_level(logging.WARNING):
        author = resolve_author_info(author_repository, prompter)

    assert author.name == "Ada"
    assert prompter.asked[0] == "Enter the author name"
    assert "Error reading author information" in caplog.text
    assert "not valid UTF-8" in caplog.text
