"""Schema validation for extension manifests.

The manifest rules live in MANIFEST_SCHEMA as a JSON Schema document; this
module only runs it. Every violation is collected (never fail fast) and
reported as a "<field-path> <reason>" string, with paths written the way the
rest of the CLI prints them ($manifest.author.email, $manifest.editor[0]).
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Final

from jsonschema import Draft7Validator, FormatChecker
from jsonschema.exceptions import ValidationError as SchemaViolation

from aurora_cli.config import EMAIL_REGEX, EXTENSION_TYPES, VERSION_PATTERN
from aurora_cli.errors import ValidationError

ROOT_PATH: Final[str] = "$manifest"

# Top-level keys are open (additionalProperties true) while the author block
# is closed. homepage is declared but not required.
MANIFEST_SCHEMA: Final[dict[str, Any]] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "properties": {
        "name": {"type": "string", "minLength": 1},
        "description": {"type": "string", "minLength": 1},
        "icon": {"type": "string"},
        "categories": {
            "type": "array",
            "items": {"type": "string"},
            "minItems": 1,
        },
        "version": {"type": "string", "pattern": VERSION_PATTERN},
        "type": {"type": "string", "enum": list(EXTENSION_TYPES)},
        "author": {
            "type": "object",
            "properties": {
                "name": {"type": "string", "minLength": 1},
                "email": {"type": "string", "format": "email"},
                "company": {"type": "string"},
            },
            "required": ["name"],
            "additionalProperties": False,
        },
        "license": {"type": "string", "minLength": 1},
        "editor": {
            "type": "array",
            "items": {"type": "string", "pattern": VERSION_PATTERN},
            "minItems": 1,
        },
        "homepage": {"type": "string"},
    },
    "required": [
        "name",
        "description",
        "icon",
        "categories",
        "version",
        "type",
        "author",
        "license",
        "editor",
    ],
    "additionalProperties": True,
}

_format_checker = FormatChecker()


@_format_checker.checks("email")
def _is_email(instance: object) -> bool:
    # An empty string means "no email given"; the builder writes "" by default.
    if not isinstance(instance, str) or instance == "":
        return True
    return bool(EMAIL_REGEX.fullmatch(instance))


_validator = Draft7Validator(MANIFEST_SCHEMA, format_checker=_format_checker)


def format_path(parts: Iterable[str | int]) -> str:
    """Render a jsonschema path deque as $manifest.a.b[0]."""
    rendered = ROOT_PATH
    for part in parts:
        if isinstance(part, int):
            rendered += f"[{part}]"
        else:
            rendered += f".{part}"
    return rendered


def _describe(error: SchemaViolation) -> list[tuple[str, str]]:
    """Turn one jsonschema error into (path, reason) pairs."""
    path = list(error.absolute_path)

    if error.validator == "required" and isinstance(error.instance, dict):
        return [
            (format_path([*path, name]), "is a required property")
            for name in error.validator_value
            if name not in error.instance
        ]
    if error.validator == "additionalProperties" and isinstance(error.instance, dict):
        allowed = set(error.schema.get("properties", {}))
        return [
            (format_path([*path, name]), "is not an allowed property")
            for name in error.instance
            if name not in allowed
        ]
    if error.validator == "minLength":
        return [(format_path(path), "must not be empty")]
    if error.validator == "minItems":
        return [(format_path(path), f"must contain at least {error.validator_value} item(s)")]
    if error.validator == "pattern":
        return [(format_path(path), f"{error.instance!r} must match {error.validator_value}")]
    if error.validator == "enum":
        return [(format_path(path), f"must be one of {', '.join(error.validator_value)}")]
    if error.validator == "format":
        return [(format_path(path), f"{error.instance!r} is not a valid {error.validator_value}")]
    if error.validator == "type":
        return [(format_path(path), f"must be of type {error.validator_value}")]
    return [(format_path(path), error.message)]


def validate_manifest(manifest: Any) -> list[str]:
    """Validate a manifest document against MANIFEST_SCHEMA.

    Args:
        manifest: Parsed extension.json content (or Manifest.to_dict())

    Returns:
        Every violation as "<field-path> <reason>", ordered by path.
        An empty list means the manifest is valid.
    """
    seen: set[tuple[str, str]] = set()
    pairs: list[tuple[str, str]] = []
    for error in _validator.iter_errors(manifest):
        for pair in _describe(error):
            if pair not in seen:
                seen.add(pair)
                pairs.append(pair)
    pairs.sort(key=lambda pair: pair[0])
    return [f"{path} {reason}" for path, reason in pairs]


def ensure_valid_manifest(manifest: Any) -> None:
    """Raise ValidationError listing all violations if the manifest is invalid."""
    issues = validate_manifest(manifest)
    if issues:
        raise ValidationError(issues)
