"""Domain model for the persisted author identity."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any


@dataclass(frozen=True)
class AuthorInfo:
    """Author identity reused across manifest creation.

    A field is None when it has never been supplied. Empty and missing
    fields are both asked for again on the next create.
    """
    name: str | None = None
    email: str | None = None
    company: str | None = None
    website: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AuthorInfo":
        """Create AuthorInfo from a raw dictionary, ignoring unknown keys."""
        values = {}
        for item in fields(cls):
            raw = data.get(item.name)
            values[item.name] = None if raw is None else str(raw)
        return cls(**values)

    def to_dict(self) -> dict[str, str]:
        """Convert to a dictionary, omitting fields that were never supplied."""
        return {
            item.name: getattr(self, item.name)
            for item in fields(self)
            if getattr(self, item.name) is not None
        }

    def missing_fields(self) -> list[str]:
        """Fields the resolver still has to ask for, in prompt order."""
        return [name for name in ("name", "email", "company") if not getattr(self, name)]

    def merged_with(self, answers: dict[str, str]) -> "AuthorInfo":
        """Return a copy with the given answers applied over this record."""
        known = {item.name for item in fields(self)}
        return replace(self, **{key: value for key, value in answers.items() if key in known})
