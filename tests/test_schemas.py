from __future__ import annotations

import copy

import pytest

from aurora_cli.errors import ValidationError
from aurora_cli.validation import MANIFEST_SCHEMA, ensure_valid_manifest, validate_manifest

REQUIRED_FIELDS = [
    "name",
    "description",
    "icon",
    "categories",
    "version",
    "type",
    "author",
    "license",
    "editor",
]


def test_valid_manifest_has_no_issues(valid_manifest):
    assert validate_manifest(valid_manifest) == []
    ensure_valid_manifest(valid_manifest)


def test_empty_manifest_reports_every_missing_field():
    issues = validate_manifest({})

    for field in REQUIRED_FIELDS:
        assert f"$manifest.{field} is a required property" in issues
    assert len(issues) == len(REQUIRED_FIELDS)


@pytest.mark.parametrize("dropped", [["name"], ["icon", "editor"], ["author", "license", "type"]])
def test_missing_fields_are_all_reported(valid_manifest, dropped):
    for field in dropped:
        del valid_manifest[field]

    issues = validate_manifest(valid_manifest)

    assert sorted(issues) == sorted(f"$manifest.{field} is a required property" for field in dropped)


def test_unknown_author_field_is_rejected_until_removed(valid_manifest):
    valid_manifest["author"]["twitter"] = "@demo"

    assert validate_manifest(valid_manifest) == [
        "$manifest.author.twitter is not an allowed property"
    ]

    del valid_manifest["author"]["twitter"]
    assert validate_manifest(valid_manifest) == []


def test_unknown_top_level_fields_are_tolerated(valid_manifest):
    valid_manifest["deprecated"] = True
    valid_manifest["homepage"] = "not even a url"

    assert validate_manifest(valid_manifest) == []


def test_author_name_is_required(valid_manifest):
    valid_manifest["author"] = {"email": "a@b.io"}

    assert validate_manifest(valid_manifest) == ["$manifest.author.name is a required property"]


@pytest.mark.parametrize("version", ["1.0", "v1.0.0", "1.0.0-beta", "", "1.0.0.0", "1.0.0\n", "１.0.0"])
def test_malformed_versions_are_rejected(valid_manifest, version):
    valid_manifest["version"] = version

    issues = validate_manifest(valid_manifest)

    assert len(issues) == 1
    assert issues[0].startswith("$manifest.version ")


def test_semantic_version_is_accepted(valid_manifest):
    valid_manifest["version"] = "1.0.0"

    assert validate_manifest(valid_manifest) == []


def test_editor_entries_are_checked_individually(valid_manifest):
    valid_manifest["editor"] = ["1.0.0", "2", "1.2.0"]

    issues = validate_manifest(valid_manifest)

    assert len(issues) == 1
    assert issues[0].startswith("$manifest.editor[1] '2' must match")


def test_editor_entry_with_trailing_newline_is_rejected(valid_manifest):
    valid_manifest["editor"] = ["1.0.0\n"]

    issues = validate_manifest(valid_manifest)

    assert len(issues) == 1
    assert issues[0].startswith("$manifest.editor[0] ")


@pytest.mark.parametrize("email", ["", "dev@example.com", "first.last@sub.example.org"])
def test_accepted_emails(valid_manifest, email):
    valid_manifest["author"]["email"] = email

    assert validate_manifest(valid_manifest) == []


@pytest.mark.parametrize("email", ["nope", "a@b", "a b@c.io"])
def test_rejected_emails(valid_manifest, email):
    valid_manifest["author"]["email"] = email

    assert validate_manifest(valid_manifest) == [
        f"$manifest.author.email {email!r} is not a valid email"
    ]


def test_type_must_be_a_supported_language(valid_manifest):
    valid_manifest["type"] = "python"

    assert validate_manifest(valid_manifest) == [
        "$manifest.type must be one of swift, javascript, typescript"
    ]


def test_empty_collections_and_strings(valid_manifest):
    valid_manifest["categories"] = []
    valid_manifest["name"] = ""
    valid_manifest["license"] = ""

    issues = validate_manifest(valid_manifest)

    assert "$manifest.categories must contain at least 1 item(s)" in issues
    assert "$manifest.name must not be empty" in issues
    assert "$manifest.license must not be empty" in issues


def test_non_object_manifest():
    assert validate_manifest(["demo"]) == ["$manifest must be of type object"]


def test_validation_is_idempotent(valid_manifest):
    valid_manifest["version"] = "1.0"
    del valid_manifest["icon"]
    snapshot = copy.deepcopy(valid_manifest)

    first = validate_manifest(valid_manifest)
    second = validate_manifest(valid_manifest)

    assert first == second
    assert valid_manifest == snapshot


def test_error_message_joins_all_issues(valid_manifest):
    del valid_manifest["name"]
    valid_manifest["version"] = "v1"

    with pytest.raises(ValidationError) as excinfo:
        ensure_valid_manifest(valid_manifest)

    assert len(excinfo.value.issues) == 2
    assert str(excinfo.value) == "Validation failed: " + ", ".join(excinfo.value.issues)


def test_schema_keeps_author_closed_and_root_open():
    assert MANIFEST_SCHEMA["additionalProperties"] is True
    assert MANIFEST_SCHEMA["properties"]["author"]["additionalProperties"] is False
    assert "homepage" not in MANIFEST_SCHEMA["required"]
