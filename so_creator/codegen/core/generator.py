"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement, the
member validity rules they share, and the result wrapper handed to front ends.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Any, Optional
from pathlib import Path

from so_creator.logging_config import get_logger
from .config import GeneratorConfig
from .naming import NameSanitizer, get_default_sanitizer
from .resolver import TypeResolver, StaticTypeResolver, is_valid_type
from .schema import ClassSpec, FieldSpec, MethodSpec
from .templates import TemplateEngine, create_template_engine

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        resolver: Optional[TypeResolver] = None,
        sanitizer: Optional[NameSanitizer] = None,
    ):
        """
        Initialize generator.

        Args:
            config: Generator configuration (defaults if omitted)
            resolver: Type resolver used to validate member types
            sanitizer: Identifier sanitizer
        """
        self.config = config or GeneratorConfig()
        self.resolver = resolver if resolver is not None else StaticTypeResolver()
        self.sanitizer = sanitizer or get_default_sanitizer()
        self._template_engine = None

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'csharp')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.cs')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return a directory whose templates override the built-in ones.

        Read from the ``template_dir`` language setting; None means built-in
        templates only.
        """
        template_dir = self.config.language_config.get("template_dir")
        return Path(template_dir) if template_dir else None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._template_engine = create_template_engine(self.get_template_directory())
        return self._template_engine

    @abstractmethod
    def generate(self, spec: ClassSpec) -> str:
        """
        Render the class declaration.

        Must be pure: invalid members are skipped, never reported here.

        Args:
            spec: Class to generate

        Returns:
            Generated source text
        """
        pass

    # Member validity

    def is_field_valid(self, field: FieldSpec) -> bool:
        """A field needs a non-empty sanitized name and a known type."""
        return bool(self.sanitizer.sanitize_name(field.name)) and is_valid_type(
            field.type_name, self.resolver
        )

    def is_method_valid(self, method: MethodSpec) -> bool:
        """A method needs a non-empty sanitized name and a known return type."""
        return bool(self.sanitizer.sanitize_name(method.name)) and is_valid_type(
            method.return_type_name, self.resolver
        )

    def _skip_reason(self, name: str, type_name: str) -> Optional[str]:
        if not self.sanitizer.sanitize_name(name):
            return "name is empty after sanitization"
        if not is_valid_type(type_name, self.resolver):
            return f"unknown type '{type_name}'"
        return None

    def validate_spec(self, spec: ClassSpec) -> List[str]:
        """
        Collect diagnostics for a class spec.

        Warnings never change what generate() produces.

        Args:
            spec: Class spec to check

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        if not self.sanitizer.sanitize_name(spec.name):
            warnings.append(f"Class name '{spec.name}' is empty after sanitization")

        if not spec.fields and not spec.methods:
            warnings.append(f"Class '{spec.name}' has no fields or methods")

        if self.config.report_skipped:
            for index, field in enumerate(spec.fields):
                reason = self._skip_reason(field.name, field.type_name)
                if reason:
                    warnings.append(f"Field #{index} '{field.name}' skipped: {reason}")

            for index, method in enumerate(spec.methods):
                reason = self._skip_reason(method.name, method.return_type_name)
                if reason:
                    warnings.append(f"Method #{index} '{method.name}' skipped: {reason}")

        if self.config.detect_duplicates:
            valid_fields = [f.name for f in spec.fields if self.is_field_valid(f)]
            for name in self.sanitizer.find_duplicates(valid_fields):
                warnings.append(f"Duplicate field name: {name}")

            valid_methods = [m.name for m in spec.methods if self.is_method_valid(m)]
            for name in self.sanitizer.find_duplicates(valid_methods):
                warnings.append(f"Duplicate method name: {name}")

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply language-specific formatting to generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code
        """
        lines = code.split("\n")
        return "\n".join(line.rstrip() for line in lines)

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(generator: CodeGenerator, spec: ClassSpec) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Args:
        generator: Code generator instance
        spec: Class spec to generate

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        warnings = generator.validate_spec(spec)

        code = generator.generate(spec)
        formatted_code = generator.format_code(code)

        emitted_fields = sum(1 for f in spec.fields if generator.is_field_valid(f))
        emitted_methods = sum(1 for m in spec.methods if generator.is_method_valid(m))

        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "class_name": generator.sanitizer.sanitize_name(spec.name),
            "field_count": emitted_fields,
            "method_count": emitted_methods,
            "skipped_count": (len(spec.fields) - emitted_fields)
            + (len(spec.methods) - emitted_methods),
        }

        logger.info(
            "Generated %s class %s (%d fields, %d methods, %d skipped)",
            generator.language_name,
            metadata["class_name"],
            emitted_fields,
            emitted_methods,
            metadata["skipped_count"],
        )
        return GenerationResult(formatted_code, warnings, metadata)

    except Exception as e:
        logger.error("Code generation failed: %s", e)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)
