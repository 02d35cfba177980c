"""JSON file I/O with atomic writes.

This module handles reading and writing the tool's JSON documents:
- Manifests (extension.json) are parsed strictly as JSON
- Hand-edited config files are parsed leniently as JSON5
- Writes use the atomic pattern (write temp file, then rename)
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import json5

from aurora_cli.errors import InvalidJsonError


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidJsonError(str(path), f"file is not valid UTF-8 ({exc.reason})") from exc


def read_json_file(path: Path) -> Any:
    """Parse a strict JSON file.

    Args:
        path: Path to the JSON file

    Returns:
        Parsed Python object

    Raises:
        InvalidJsonError: If the file is not UTF-8 or parsing fails
        FileNotFoundError: If file doesn't exist
    """
    raw = _read_text(path)
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise InvalidJsonError(str(path), str(exc)) from exc


def read_config_file(path: Path) -> Any:
    """Parse a config file that may contain JSON5 syntax.

    Comments, trailing commas and unquoted keys are accepted so users can
    edit the file by hand.

    Raises:
        InvalidJsonError: If the file is not UTF-8 or parsing fails
        FileNotFoundError: If file doesn't exist
    """
    raw = _read_text(path)
    try:
        return json5.loads(raw)
    except ValueError as exc:
        raise InvalidJsonError(str(path), str(exc)) from exc


def write_json_file(path: Path, payload: Any) -> None:
    """Write JSON to a file atomically.

    Uses a write-then-rename pattern to ensure file integrity:
    1. Write to a temporary file (path.tmp)
    2. Rename temp file to target path

    Invariants:
        - Parent directories are created if they don't exist
        - Output is indented with 2 spaces and ends with a newline
        - Original file is not corrupted if write fails partway
        - No temporary file is left behind on failure
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = path.with_suffix(f"{path.suffix}.tmp")
    serialized = json.dumps(payload, indent=2, ensure_ascii=False) + "\n"
    try:
        temp_path.write_text(serialized, encoding="utf-8")
        temp_path.replace(path)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise
