"""
Template engine wrapper for code generation.

Provides a simple interface for Jinja2 template rendering. Built-in templates
live in memory; a template directory, when given, takes precedence so users
can override them by file name.
"""

from typing import Dict, Any, Optional
from pathlib import Path

from jinja2 import (
    ChoiceLoader,
    DictLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateNotFound,
    select_autoescape,
)


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


# Built-in templates. Whitespace matters: trim_blocks drops the newline after
# each block tag and the trailing newline is kept.
CSHARP_CLASS_TEMPLATE = """\
{% for namespace in usings %}
using {{ namespace }};
{% endfor %}
{% if usings %}

{% endif %}
{{ class_visibility }} class {{ class_name }}{{ base_clause }}
{
{% for member in members %}
{{ indent }}{{ member }}
{% endfor %}
}
"""

BUILTIN_TEMPLATES = {
    "class.cs.j2": CSHARP_CLASS_TEMPLATE,
}


class TemplateEngine:
    """Wrapper for Jinja2 template engine with code generation utilities."""

    def __init__(self, template_dir: Optional[Path] = None):
        """
        Initialize template engine.

        Args:
            template_dir: Directory containing template files
        """
        self.template_dir = Path(template_dir) if template_dir else None
        self._memory_loader = DictLoader(dict(BUILTIN_TEMPLATES))
        self._env = None
        self._setup_environment()

    def _setup_environment(self):
        """Setup Jinja2 environment."""
        loaders = []
        if self.template_dir and self.template_dir.exists():
            loaders.append(FileSystemLoader(str(self.template_dir)))
        loaders.append(self._memory_loader)

        self._env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(["html", "xml"], default_for_string=False),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of template file
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except Exception as e:
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e

    def render_string(self, template_string: str, context: Dict[str, Any]) -> str:
        """Render a template string with the given context."""
        try:
            template = self._env.from_string(template_string)
            return template.render(**context)
        except Exception as e:
            raise TemplateError(f"Failed to render template string: {e}") from e

    def add_template(self, name: str, content: str):
        """
        Add an in-memory template.

        Args:
            name: Template name
            content: Template content
        """
        self._memory_loader.mapping[name] = content

    def template_exists(self, template_name: str) -> bool:
        """Check if a template can be loaded."""
        try:
            self._env.get_template(template_name)
            return True
        except TemplateNotFound:
            return False


def create_template_engine(template_dir: Optional[Path] = None) -> TemplateEngine:
    """Create a template engine, optionally backed by a template directory."""
    return TemplateEngine(template_dir)
