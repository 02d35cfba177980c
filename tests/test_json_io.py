from __future__ import annotations

import json
from pathlib import Path

import pytest

from aurora_cli.errors import InvalidJsonError
from aurora_cli.persistence import read_config_file, read_json_file, write_json_file


@pytest.mark.parametrize("reader", [read_json_file, read_config_file])
def test_undecodable_file_is_invalid_json(tmp_path: Path, reader):
    path = tmp_path / "data.json"
    path.write_bytes(b'{"name": "\xff\xfe"}')

    with pytest.raises(InvalidJsonError) as excinfo:
        reader(path)

    assert excinfo.value.path == str(path)
    assert "not valid UTF-8" in excinfo.value.detail


def test_config_reader_accepts_json5(tmp_path: Path):
    path = tmp_path / "author.json"
    path.write_text("{name: 'Ada', // comment\n}", encoding="utf-8")

    assert read_config_file(path) == {"name": "Ada"}


def test_manifest_reader_is_strict(tmp_path: Path):
    path = tmp_path / "extension.json"
    path.write_text("{name: 'Ada'}", encoding="utf-8")

    with pytest.raises(InvalidJsonError):
        read_json_file(path)


def test_write_creates_parents_and_ends_with_newline(tmp_path: Path):
    path = tmp_path / "a" / "b" / "extension.json"

    write_json_file(path, {"name": "démo"})

    assert path.read_text(encoding="utf-8") == '{\n  "name": "démo"\n}\n'
    assert [p.name for p in path.parent.iterdir()] == ["extension.json"]


def test_failed_write_leaves_no_temporary_file(tmp_path: Path, monkeypatch):
    path = tmp_path / "extension.json"
    path.write_text(json.dumps({"version": "0.0.1"}), encoding="utf-8")
    original_write_text = Path.write_text

    def write_then_fail(self, data, *args, **kwargs):
        original_write_text(self, data[:5], *args, **kwargs)
        raise OSError("disk full")

    monkeypatch.setattr(Path, "write_text", write_then_fail)

    with pytest.raises(OSError, match="disk full"):
        write_json_file(path, {"version": "0.0.2"})

    monkeypatch.undo()
    assert [p.name for p in tmp_path.iterdir()] == ["extension.json"]
    assert json.loads(path.read_text(encoding="utf-8")) == {"version": "0.0.1"}
