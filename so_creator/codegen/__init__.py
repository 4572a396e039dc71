"""
so_creator code generation module

Generates class declarations from class specs.
"""

from typing import Any, Dict, Optional, Union
from pathlib import Path

from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    list_all_language_info,
    list_supported_languages,
)
from .core.generator import CodeGenerator, GenerationResult, GeneratorError, generate_code
from .core.schema import (
    ClassSpec,
    FieldSpec,
    MethodSpec,
    ParameterSpec,
    Visibility,
    ParameterKeyword,
    SchemaError,
    convert_spec_document,
)
from .core.resolver import TypeResolver, StaticTypeResolver, TypeHandle
from .core.config import GeneratorConfig, ConfigManager, ConfigError, load_config


def generate_from_spec(
    spec: ClassSpec,
    language: str = "csharp",
    config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
    resolver: Optional[TypeResolver] = None,
) -> GenerationResult:
    """
    Generate code for a class spec.

    Args:
        spec: Class to generate
        language: Target language name or alias
        config: Generator configuration, override dict or config file path
        resolver: Type resolver (language default if omitted)

    Returns:
        GenerationResult with generated code
    """
    generator = get_generator(language, config, resolver)
    return generate_code(generator, spec)


def quick_generate(
    document: Any,
    language: str = "csharp",
    resolver: Optional[TypeResolver] = None,
    **options,
) -> str:
    """
    Quick code generation from a class spec document.

    Args:
        document: Class spec as dict, JSON string or ClassSpec
        language: Target language
        resolver: Type resolver
        **options: Generator configuration overrides

    Returns:
        Generated code string
    """
    if isinstance(document, ClassSpec):
        spec = document
    else:
        if isinstance(document, str):
            import json

            document = json.loads(document)
        spec = convert_spec_document(document)

    result = generate_from_spec(spec, language, options or None, resolver)

    if result.success:
        return result.code
    raise GeneratorError(f"Code generation failed: {result.error_message}")


__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GenerationResult",
    "GeneratorError",
    "generate_code",
    "ClassSpec",
    "FieldSpec",
    "MethodSpec",
    "ParameterSpec",
    "Visibility",
    "ParameterKeyword",
    "SchemaError",
    "convert_spec_document",
    "TypeResolver",
    "StaticTypeResolver",
    "TypeHandle",
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    "generate_from_spec",
    "quick_generate",
    "get_generator",
    "get_language_info",
    "list_all_language_info",
    "list_supported_languages",
]
