"""
Core code generation components.

Provides base classes and utilities used by all language generators.
"""

from .generator import CodeGenerator, GeneratorError, GenerationResult, generate_code
from .schema import (
    ClassSpec,
    FieldSpec,
    MethodSpec,
    ParameterSpec,
    Visibility,
    ParameterKeyword,
    SchemaError,
    convert_spec_document,
)
from .naming import NameSanitizer, sanitize_identifier
from .resolver import (
    PRIMITIVE_KEYWORDS,
    TypeHandle,
    TypeResolver,
    StaticTypeResolver,
    ResolverError,
    is_valid_type,
    load_type_catalog,
)
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "generate_code",
    # Schema system - class descriptions
    "ClassSpec",
    "FieldSpec",
    "MethodSpec",
    "ParameterSpec",
    "Visibility",
    "ParameterKeyword",
    "SchemaError",
    "convert_spec_document",
    # Naming utilities
    "NameSanitizer",
    "sanitize_identifier",
    # Type resolution
    "PRIMITIVE_KEYWORDS",
    "TypeHandle",
    "TypeResolver",
    "StaticTypeResolver",
    "ResolverError",
    "is_valid_type",
    "load_type_catalog",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
