"""
C# code generator implementation.

Renders a class declaration with fields and empty-bodied methods, by default
as a Unity script (``using UnityEngine;`` preamble).
"""

from typing import List, Optional

from ...core.config import GeneratorConfig, get_config_manager, load_config
from ...core.generator import CodeGenerator
from ...core.naming import NameSanitizer
from ...core.resolver import TypeResolver
from ...core.schema import (
    ClassSpec,
    FieldSpec,
    MethodSpec,
    ParameterSpec,
    ParameterKeyword,
)
from .types import create_unity_resolver

CLASS_TEMPLATE = "class.cs.j2"


class CSharpGenerator(CodeGenerator):
    """Code generator for C# class declarations."""

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        resolver: Optional[TypeResolver] = None,
        sanitizer: Optional[NameSanitizer] = None,
    ):
        """Initialize C# generator; the resolver defaults to the Unity catalog."""
        if resolver is None:
            resolver = create_unity_resolver()
        super().__init__(config, resolver, sanitizer)

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "csharp"

    @property
    def file_extension(self) -> str:
        """Return C# file extension."""
        return ".cs"

    def generate(self, spec: ClassSpec) -> str:
        """Generate the class declaration for a spec."""
        members = [
            self.field_declaration(field)
            for field in spec.fields
            if self.is_field_valid(field)
        ]
        members.extend(
            self.method_declaration(method)
            for method in spec.methods
            if self.is_method_valid(method)
        )

        template_context = {
            "usings": list(self.config.usings),
            "class_visibility": self.config.class_visibility,
            "class_name": self.sanitizer.sanitize_name(spec.name),
            "base_clause": f" : {self.config.base_class}" if self.config.base_class else "",
            "indent": self.config.indent,
            "members": members,
        }

        return self.render_template(CLASS_TEMPLATE, template_context)

    def field_declaration(self, field: FieldSpec) -> str:
        """Render ``<visibility> <type> <name>;``."""
        name = self.sanitizer.sanitize_name(field.name)
        return f"{field.visibility.value} {field.type_name} {name};"

    def method_declaration(self, method: MethodSpec) -> str:
        """Render ``<visibility> <return type> <name>(<parameters>){ }``."""
        name = self.sanitizer.sanitize_name(method.name)
        parameters = ", ".join(
            self.parameter_declaration(param) for param in method.ordered_parameters()
        )
        return f"{method.visibility.value} {method.return_type_name} {name}({parameters}){{ }}"

    def parameter_declaration(self, parameter: ParameterSpec) -> str:
        """Render one parameter; ``params`` parameters become arrays."""
        name = self.sanitizer.sanitize_name(parameter.name)

        if parameter.keyword == ParameterKeyword.PARAMS:
            return f"params {parameter.type_name}[] {name}"
        if parameter.keyword == ParameterKeyword.NONE:
            return f"{parameter.type_name} {name}"
        return f"{parameter.keyword.value} {parameter.type_name} {name}"

    def validate_spec(self, spec: ClassSpec) -> List[str]:
        """Validate spec and configuration for C# generation."""
        warnings = get_config_manager().validate_config(self.config)
        warnings.extend(super().validate_spec(spec))

        for method in spec.methods:
            if not self.is_method_valid(method):
                continue
            params_count = sum(
                1 for p in method.parameters if p.keyword == ParameterKeyword.PARAMS
            )
            if params_count > 1:
                warnings.append(
                    f"Method '{method.name}' has {params_count} params parameters; "
                    f"C# allows only one"
                )

        if not self.template_exists(CLASS_TEMPLATE):
            warnings.append(f"Template {CLASS_TEMPLATE} not found")

        return warnings

    def format_code(self, code: str) -> str:
        """Strip trailing whitespace and apply the configured line ending."""
        code = super().format_code(code)
        if self.config.line_ending != "\n":
            code = code.replace("\n", self.config.line_ending)
        return code


# Factory functions
def create_csharp_generator(
    config: Optional[GeneratorConfig] = None,
    resolver: Optional[TypeResolver] = None,
) -> CSharpGenerator:
    """Create a C# generator with default (Unity) configuration."""
    return CSharpGenerator(config or load_config("csharp"), resolver)


def create_scriptable_object_generator(
    resolver: Optional[TypeResolver] = None,
) -> CSharpGenerator:
    """Create generator for ScriptableObject subclasses."""
    return CSharpGenerator(load_config("csharp", preset="scriptable_object"), resolver)


def create_plain_class_generator(
    resolver: Optional[TypeResolver] = None,
) -> CSharpGenerator:
    """Create generator for plain C# classes with no preamble."""
    return CSharpGenerator(load_config("csharp", preset="plain"), resolver)
