"""
Tests for the command-line interface.
"""

import io
import json

import pytest

from so_creator.main import create_parser, main

PLAYER_STATS_CS = (
    "using UnityEngine;\n"
    "\n"
    "public class PlayerStats\n"
    "{\n"
    "\tpublic int health;\n"
    "\tprivate float speed;\n"
    "\tpublic void Heal(string source, params int[] amounts){ }\n"
    "}\n"
)


class TestParser:
    """Tests for argument parsing."""

    def test_generate_defaults(self):
        args = create_parser().parse_args(["generate", "spec.json"])
        assert args.file == "spec.json"
        assert args.language == "csharp"
        assert args.types == []
        assert args.usings is None

    def test_repeatable_options(self):
        args = create_parser().parse_args(
            ["generate", "spec.json", "--types", "a.json", "--types", "b.json",
             "--using", "System", "--using", "UnityEngine"]
        )
        assert args.types == ["a.json", "b.json"]
        assert args.usings == ["System", "UnityEngine"]

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert "usage:" in capsys.readouterr().out


class TestGenerateCommand:
    """End-to-end tests for ``so-creator generate``."""

    def test_generate_to_file(self, write_json, player_document, tmp_path):
        spec_path = write_json(player_document)
        output = tmp_path / "out" / "PlayerStats.cs"

        assert main(["generate", str(spec_path), "-o", str(output)]) == 0
        assert output.read_text(encoding="utf-8") == PLAYER_STATS_CS

    def test_generate_to_stdout(self, write_json, player_document, capsys):
        assert main(["generate", str(write_json(player_document))]) == 0
        assert "public class PlayerStats" in capsys.readouterr().out

    def test_generate_from_stdin(self, player_document, tmp_path, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(player_document)))
        output = tmp_path / "PlayerStats.cs"

        assert main(["generate", "--stdin", "-o", str(output)]) == 0
        assert output.read_text(encoding="utf-8") == PLAYER_STATS_CS

    def test_preset_and_spaces(self, write_json, tmp_path):
        spec_path = write_json({"name": "Settings", "fields": [{"name": "volume", "type": "float"}]})
        output = tmp_path / "Settings.cs"

        code = main(
            ["generate", str(spec_path), "--preset", "scriptable_object",
             "--spaces", "4", "-o", str(output)]
        )
        assert code == 0
        assert output.read_text(encoding="utf-8") == (
            "using UnityEngine;\n"
            "\n"
            "public class Settings : ScriptableObject\n"
            "{\n"
            "    public float volume;\n"
            "}\n"
        )

    def test_no_usings_and_type_catalog(self, write_json, tmp_path):
        spec_path = write_json(
            {"name": "Bag", "fields": [{"name": "sword", "type": "Sword"}]}
        )
        catalog_path = write_json(
            {"types": [{"name": "Sword", "namespace": "Game"}]}, name="types.json"
        )
        output = tmp_path / "Bag.cs"

        code = main(
            ["generate", str(spec_path), "--types", str(catalog_path),
             "--no-builtin-types", "--no-usings", "-o", str(output)]
        )
        assert code == 0
        assert output.read_text(encoding="utf-8") == (
            "public class Bag\n{\n\tpublic Sword sword;\n}\n"
        )

    def test_unknown_type_is_omitted(self, write_json, tmp_path):
        spec_path = write_json(
            {"name": "Bag", "fields": [{"name": "sword", "type": "Sword"}]}
        )
        output = tmp_path / "Bag.cs"

        assert main(["generate", str(spec_path), "--no-usings", "-o", str(output)]) == 0
        assert output.read_text(encoding="utf-8") == "public class Bag\n{\n}\n"

    def test_missing_input_file(self, tmp_path):
        assert main(["generate", str(tmp_path / "missing.json")]) == 1

    def test_no_input_source(self):
        assert main(["generate"]) == 1

    def test_invalid_spec(self, write_json):
        assert main(["generate", str(write_json({"name": "A", "fields": {}}))]) == 1

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{", encoding="utf-8")
        assert main(["generate", str(path)]) == 1

    def test_non_utf8_input(self, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"name": "\xff\xfe"}')
        assert main(["generate", str(path)]) == 1

    def test_non_utf8_config(self, write_json, player_document, tmp_path):
        config_path = tmp_path / "config.json"
        config_path.write_bytes(b'{"base_class": "\xff"}')
        code = main(
            ["generate", str(write_json(player_document)), "--config", str(config_path)]
        )
        assert code == 1

    def test_null_usings_in_config(self, write_json, tmp_path):
        spec_path = write_json({"name": "Bag", "fields": [{"name": "n", "type": "int"}]})
        config_path = write_json({"usings": None}, name="config.json")
        output = tmp_path / "Bag.cs"

        code = main(
            ["generate", str(spec_path), "--config", str(config_path), "-o", str(output)]
        )
        assert code == 0
        assert output.read_text(encoding="utf-8") == "public class Bag\n{\n\tpublic int n;\n}\n"

    def test_unsupported_language(self, write_json, player_document, capsys):
        assert main(["generate", str(write_json(player_document)), "-l", "cobol"]) == 1
        assert "Unsupported language" in capsys.readouterr().out

    def test_missing_type_catalog(self, write_json, player_document, tmp_path):
        code = main(
            ["generate", str(write_json(player_document)),
             "--types", str(tmp_path / "missing.json")]
        )
        assert code == 1

    def test_missing_config_file(self, write_json, player_document, tmp_path):
        code = main(
            ["generate", str(write_json(player_document)),
             "--config", str(tmp_path / "missing.json")]
        )
        assert code == 1


class TestLanguagesCommand:
    """Tests for ``so-creator languages``."""

    def test_lists_csharp(self, capsys):
        assert main(["languages"]) == 0
        assert "csharp" in capsys.readouterr().out


class TestInteractiveCommand:
    """Tests for starting ``so-creator interactive``."""

    def test_missing_config_file(self, tmp_path):
        assert main(["interactive", "--config", str(tmp_path / "missing.json")]) == 1

    def test_quit_immediately(self, monkeypatch):
        monkeypatch.setattr("so_creator.codegen.interactive.Prompt.ask", lambda *a, **k: "q")
        assert main(["interactive"]) == 0
