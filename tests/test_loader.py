"""Unit tests for loading and validating Tailwind configuration JSON."""

import json

import jsonschema
import pytest

from theme_rescaler.core.loader import get_schema, load_default_config, validate_config


class TestLoadDefaultConfig:

    def test_loads_valid_dump(self, default_config_path, default_config):
        assert load_default_config(default_config_path) == default_config

    def test_accepts_str_path(self, default_config_path):
        config = load_default_config(str(default_config_path))
        assert "spacing" in config["theme"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_default_config(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{\"theme\": ", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            load_default_config(path)

    def test_top_level_must_be_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(jsonschema.ValidationError):
            load_default_config(path)

    def test_theme_must_be_object(self, tmp_path):
        path = tmp_path / "theme.json"
        path.write_text(json.dumps({"theme": ["1rem"]}), encoding="utf-8")
        with pytest.raises(jsonschema.ValidationError):
            load_default_config(path)

    def test_config_without_theme_is_valid(self, tmp_path):
        path = tmp_path / "plugins.json"
        path.write_text(json.dumps({"plugins": []}), encoding="utf-8")
        assert load_default_config(path) == {"plugins": []}


class TestValidateConfig:

    def test_rejects_non_json_values(self):
        with pytest.raises(jsonschema.ValidationError):
            validate_config({"theme": {"spacing": {"1": ("0.4rem",)}}})

    def test_rejects_bad_content(self):
        with pytest.raises(jsonschema.ValidationError):
            validate_config({"content": [1]})

    def test_schema_is_cached(self):
        assert get_schema() is get_schema()
