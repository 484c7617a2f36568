"""Tests for xcdocs.config.load_utils module."""

from pathlib import Path

import pytest

from xcdocs.config.load_utils import read_json_object, read_json_object_if_exists
from xcdocs.core.errors import LoadError, XcdocsError


class TestReadJsonObject:
    """Required JSON object files."""

    def test_load_valid_json_file(self, tmp_path: Path) -> None:
        json_file = tmp_path / "config.json"
        json_file.write_text('{"search": {"default_limit": 5}}', encoding="utf-8")

        assert read_json_object(json_file) == {"search": {"default_limit": 5}}

    def test_load_empty_file_returns_empty_dict(self, tmp_path: Path) -> None:
        """Empty or whitespace-only files mean "no settings"."""
        json_file = tmp_path / "empty.json"
        json_file.write_text("  \n\t ", encoding="utf-8")

        assert read_json_object(json_file) == {}

    def test_utf8_bom_accepted(self, tmp_path: Path) -> None:
        json_file = tmp_path / "bom.json"
        json_file.write_bytes(b'\xef\xbb\xbf{"a": 1}')

        assert read_json_object(json_file) == {"a": 1}

    def test_load_nonexistent_file_raises_load_error(self, tmp_path: Path) -> None:
        nonexistent = tmp_path / "does_not_exist.json"

        with pytest.raises(LoadError) as exc_info:
            read_json_object(nonexistent, context="config")

        assert "config: File not found" in str(exc_info.value)
        assert str(nonexistent) in str(exc_info.value)

    def test_load_invalid_json_raises_load_error(self, tmp_path: Path) -> None:
        invalid_file = tmp_path / "invalid.json"
        invalid_file.write_text('{"key": "unclosed', encoding="utf-8")

        with pytest.raises(LoadError, match="Invalid JSON"):
            read_json_object(invalid_file)

    def test_load_non_dict_json_raises_load_error(self, tmp_path: Path) -> None:
        array_file = tmp_path / "array.json"
        array_file.write_text('["item1", "item2"]', encoding="utf-8")

        with pytest.raises(LoadError) as exc_info:
            read_json_object(array_file)

        assert "Expected object" in str(exc_info.value)
        assert "list" in str(exc_info.value)

    def test_load_error_is_xcdocs_error_subclass(self, tmp_path: Path) -> None:
        with pytest.raises(XcdocsError):
            read_json_object(tmp_path / "missing.json")


class TestReadJsonObjectIfExists:
    def test_missing_returns_none(self, tmp_path: Path) -> None:
        assert read_json_object_if_exists(tmp_path / "missing.json") is None

    def test_existing_file_loaded(self, tmp_path: Path) -> None:
        json_file = tmp_path / "config.json"
        json_file.write_text('{"a": true}', encoding="utf-8")

        assert read_json_object_if_exists(json_file) == {"a": True}

    def test_invalid_existing_file_still_raises(self, tmp_path: Path) -> None:
        json_file = tmp_path / "config.json"
        json_file.write_text("{", encoding="utf-8")

        with pytest.raises(LoadError):
            read_json_object_if_exists(json_file)
