"""Tests for shared config discovery helpers."""

from pathlib import Path

from shared.config import CONFIG_FILENAME, find_config_file, load_yaml_file, read_section


class TestFindConfigFile:
    def test_finds_file_in_start_dir(self, tmp_path: Path) -> None:
        config_path = tmp_path / CONFIG_FILENAME
        config_path.write_text("engine: {}\n")
        assert find_config_file(tmp_path) == config_path

    def test_finds_file_in_parent(self, tmp_path: Path) -> None:
        config_path = tmp_path / CONFIG_FILENAME
        config_path.write_text("engine: {}\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config_file(nested) == config_path


class TestLoadYamlFile:
    def test_missing_file_returns_empty_dict(self, tmp_path: Path) -> None:
        assert load_yaml_file(tmp_path / "missing.yaml") == {}

    def test_empty_file_returns_empty_dict(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_yaml_file(path) == {}

    def test_parses_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "c.yaml"
        path.write_text("engine:\n  page_size: 12\n")
        assert load_yaml_file(path) == {"engine": {"page_size": 12}}


class TestReadSection:
    def test_returns_section(self) -> None:
        assert read_section({"engine": {"a": 1}}, "engine") == {"a": 1}

    def test_null_section_is_empty(self) -> None:
        assert read_section({"engine": None}, "engine") == {}

    def test_non_dict_section(self) -> None:
        assert read_section({"engine": "oops"}, "engine") == {}

    def test_flat_file_skips_other_sections(self) -> None:
        raw = {"page_size": 12, "demo": {"verbose": True}}
        assert read_section(raw, "engine") == {"page_size": 12}

    def test_non_mapping_document(self) -> None:
        assert read_section(["a", "b"], "engine") == {}
