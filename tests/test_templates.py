"""
Tests for the Jinja2 template engine.
"""

import pytest

from so_creator.codegen.core.templates import (
    TemplateError,
    create_template_engine,
)


class TestTemplateEngine:
    """Tests for built-in, in-memory and directory templates."""

    def test_builtin_class_template(self):
        engine = create_template_engine()
        code = engine.render_template(
            "class.cs.j2",
            {
                "usings": ["UnityEngine", "System"],
                "class_visibility": "internal",
                "class_name": "Spawner",
                "base_clause": " : MonoBehaviour",
                "indent": "\t",
                "members": ["public int count;"],
            },
        )
        assert code == (
            "using UnityEngine;\n"
            "using System;\n"
            "\n"
            "internal class Spawner : MonoBehaviour\n"
            "{\n"
            "\tpublic int count;\n"
            "}\n"
        )

    def test_missing_variable_raises(self):
        with pytest.raises(TemplateError, match="class.cs.j2"):
            create_template_engine().render_template("class.cs.j2", {})

    def test_render_string(self):
        engine = create_template_engine()
        assert engine.render_string("{{ a }}-{{ b }}", {"a": 1, "b": 2}) == "1-2"

    def test_add_template(self):
        engine = create_template_engine()
        assert not engine.template_exists("header.j2")

        engine.add_template("header.j2", "// {{ title }}")
        assert engine.template_exists("header.j2")
        assert engine.render_template("header.j2", {"title": "Generated"}) == "// Generated"

    def test_add_template_leaves_builtins_alone(self):
        create_template_engine().add_template("class.cs.j2", "replaced")
        assert create_template_engine().render_template(
            "class.cs.j2",
            {
                "usings": [],
                "class_visibility": "public",
                "class_name": "A",
                "base_clause": "",
                "indent": "\t",
                "members": [],
            },
        ) == "public class A\n{\n}\n"

    def test_directory_overrides_builtin(self, tmp_path):
        (tmp_path / "class.cs.j2").write_text("class {{ class_name }}", encoding="utf-8")
        engine = create_template_engine(tmp_path)
        assert engine.render_template("class.cs.j2", {"class_name": "B"}) == "class B"

    def test_missing_directory_falls_back(self, tmp_path):
        engine = create_template_engine(tmp_path / "nowhere")
        assert engine.template_exists("class.cs.j2")
