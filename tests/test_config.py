"""
Tests for configuration loading, merging and validation.
"""

import json

import pytest

from so_creator.codegen.core.config import (
    ConfigError,
    ConfigManager,
    GeneratorConfig,
    load_config,
)


class TestGeneratorConfig:
    """Tests for the config dataclass."""

    def test_defaults(self):
        config = GeneratorConfig()
        assert config.usings == ["UnityEngine"]
        assert config.base_class is None
        assert config.class_visibility == "public"
        assert config.indent == "\t"
        assert config.line_ending == "\n"

    def test_space_indent(self):
        assert GeneratorConfig(use_tabs=False, indent_size=2).indent == "  "

    def test_usings_not_shared_between_instances(self):
        first = GeneratorConfig()
        first.usings.append("System")
        assert GeneratorConfig().usings == ["UnityEngine"]

    def test_to_dict_inlines_language_config(self):
        data = GeneratorConfig(language_config={"template_dir": "tpl"}).to_dict()
        assert data["template_dir"] == "tpl"
        assert "language_config" not in data


class TestConfigManager:
    """Tests for merging configuration sources."""

    def test_language_defaults(self):
        config = ConfigManager().get_config("csharp")
        assert config.usings == ["UnityEngine"]
        assert config.use_tabs is True

    def test_preset(self):
        config = load_config(preset="scriptable_object")
        assert config.base_class == "ScriptableObject"

    def test_plain_preset(self):
        config = load_config(preset="plain")
        assert config.usings == []
        assert config.base_class is None

    def test_unknown_preset(self):
        with pytest.raises(ConfigError, match="Unknown preset"):
            load_config(preset="unreal")

    def test_merge_order(self, write_json):
        path = write_json(
            {"base_class": "MonoBehaviour", "usings": ["System"]}, name="config.json"
        )
        config = load_config(
            preset="scriptable_object",
            config_file=path,
            custom_config={"usings": ["UnityEngine"]},
        )
        # file beats preset, overrides beat file
        assert config.base_class == "MonoBehaviour"
        assert config.usings == ["UnityEngine"]

    def test_unknown_keys_go_to_language_config(self):
        config = load_config(custom_config={"template_dir": "templates", "use_tabs": False})
        assert config.language_config == {"template_dir": "templates"}
        assert config.use_tabs is False

    def test_single_using_string(self):
        assert load_config(custom_config={"usings": "System"}).usings == ["System"]

    def test_null_usings_becomes_empty(self, write_json):
        path = write_json({"usings": None}, name="config.json")
        config = load_config(config_file=path)
        assert config.usings == []
        assert ConfigManager().validate_config(config) == []

    def test_defaults_not_mutated(self):
        manager = ConfigManager()
        config = manager.get_config("csharp")
        config.usings.append("System")
        assert manager.get_config("csharp").usings == ["UnityEngine"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(config_file=tmp_path / "missing.json")

    def test_non_json_suffix(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("usings: []", encoding="utf-8")
        with pytest.raises(ConfigError, match="must be JSON"):
            load_config(config_file=path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_config(config_file=path)

    def test_non_object_json(self, write_json):
        path = write_json(["UnityEngine"], name="config.json")
        with pytest.raises(ConfigError, match="JSON object"):
            load_config(config_file=path)

    def test_non_utf8_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_bytes(b'{"base_class": "\xff\xfe"}')
        with pytest.raises(ConfigError, match="not valid UTF-8"):
            load_config(config_file=path)

    def test_save_and_reload(self, tmp_path):
        manager = ConfigManager()
        original = GeneratorConfig(
            usings=["System"],
            base_class="ScriptableObject",
            use_tabs=False,
            indent_size=2,
            language_config={"template_dir": "tpl"},
        )
        path = tmp_path / "saved.json"
        manager.save_config(original, path)

        assert json.loads(path.read_text(encoding="utf-8"))["base_class"] == "ScriptableObject"
        assert manager.get_config("csharp", config_file=path) == original


class TestValidateConfig:
    """Tests for validate_config warnings."""

    def test_valid_default(self):
        assert ConfigManager().validate_config(GeneratorConfig()) == []

    def test_dotted_namespace_is_valid(self):
        config = GeneratorConfig(usings=["System.Collections.Generic"])
        assert ConfigManager().validate_config(config) == []

    def test_invalid_values(self):
        config = GeneratorConfig(
            class_visibility="private",
            line_ending="\r",
            use_tabs=False,
            indent_size=0,
            usings=["System..IO"],
            base_class="1Base",
        )
        warnings = ConfigManager().validate_config(config)
        assert warnings == [
            "Invalid class_visibility: private",
            "Invalid line_ending: '\\r'",
            "Invalid indent_size: 0",
            "Invalid using namespace: System..IO",
            "Invalid base_class: 1Base",
        ]
