"""Tests for forgiving JSON reads and atomic writes."""

import json
from pathlib import Path

from nex.core.json_store import load_json, save_json


def test_missing_file_reads_as_empty_object(tmp_path: Path) -> None:
    assert load_json(tmp_path / "absent.json") == {}


def test_corrupt_file_reads_as_empty_object(tmp_path: Path) -> None:
    path = tmp_path / "aliases.json"
    path.write_text("{", encoding="utf-8")

    assert load_json(path) == {}


def test_non_utf8_file_reads_as_empty_object(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_bytes(b"\xff\xfe\x00")

    assert load_json(path) == {}


def test_save_writes_pretty_json_with_trailing_newline(tmp_path: Path) -> None:
    path = tmp_path / "config.json"

    save_json(path, {"b": 1, "a": True})

    text = path.read_text(encoding="utf-8")
    assert text == '{\n  "b": 1,\n  "a": true\n}\n'
    assert json.loads(text) == {"b": 1, "a": True}


def test_save_leaves_no_temporary_file(tmp_path: Path) -> None:
    path = tmp_path / "installed.json"

    save_json(path, [])

    assert [p.name for p in tmp_path.iterdir()] == ["installed.json"]


def test_save_creates_parent_directory(tmp_path: Path) -> None:
    path = tmp_path / "nested" / ".nex" / "aliases.json"

    save_json(path, {})

    assert load_json(path) == {}
