"""Common types shared across domain models."""

from __future__ import annotations

from pathlib import PurePath
from typing import NewType

# -----------------------------------------------------------------------------
# Extension ID Type
# -----------------------------------------------------------------------------

ExtensionId = NewType("ExtensionId", str)
"""Name of an extension directory under extensions/.

An id is a single, non-hidden path component so that it can never address
anything outside the extensions directory.
"""


def is_valid_extension_id(value: str) -> bool:
    """Check if a string can be used as an extension directory name.

    Example:
        >>> is_valid_extension_id("my-theme")
        True
        >>> is_valid_extension_id("../secrets")
        False
    """
    if not isinstance(value, str) or not value.strip():
        return False
    if value in {".", ".."} or "/" in value or "\\" in value:
        return False
    return PurePath(value).name == value


def validate_extension_id(value: str) -> ExtensionId | None:
    """Convert a raw string to an ExtensionId, or None if it is unsafe."""
    if is_valid_extension_id(value):
        return ExtensionId(value)
    return None
