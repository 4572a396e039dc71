"""
Core schema representation for code generation.

Describes the class to generate (name, fields, methods) and converts plain
dict documents, as loaded from JSON, into that representation.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Any
from enum import Enum


class SchemaError(Exception):
    """Exception raised for malformed class spec documents."""

    pass


class Visibility(Enum):
    """Access modifiers for fields and methods."""

    PUBLIC = "public"
    PRIVATE = "private"
    PROTECTED = "protected"


class ParameterKeyword(Enum):
    """Parameter modifiers, in the order parameters are rendered."""

    NONE = "none"
    IN = "in"
    OUT = "out"
    REF = "ref"
    PARAMS = "params"

    @property
    def order(self) -> int:
        """Declaration index used as the parameter sort key."""
        return list(ParameterKeyword).index(self)


@dataclass
class ParameterSpec:
    """A single method parameter."""

    name: str
    type_name: str
    keyword: ParameterKeyword = ParameterKeyword.NONE


@dataclass
class FieldSpec:
    """A field declared on the generated class."""

    name: str
    type_name: str
    visibility: Visibility = Visibility.PUBLIC


@dataclass
class MethodSpec:
    """A method declared on the generated class. Bodies are always empty."""

    name: str
    return_type_name: str
    parameters: List[ParameterSpec] = field(default_factory=list)
    visibility: Visibility = Visibility.PUBLIC

    def ordered_parameters(self) -> List[ParameterSpec]:
        """Parameters stable-sorted by keyword declaration order."""
        return sorted(self.parameters, key=lambda param: param.keyword.order)


@dataclass
class ClassSpec:
    """Complete description of a class to generate."""

    name: str
    fields: List[FieldSpec] = field(default_factory=list)
    methods: List[MethodSpec] = field(default_factory=list)

    def add_field(
        self,
        name: str,
        type_name: str,
        visibility: Visibility = Visibility.PUBLIC,
    ) -> FieldSpec:
        """Append a field and return it."""
        field_spec = FieldSpec(name, type_name, visibility)
        self.fields.append(field_spec)
        return field_spec

    def add_method(
        self,
        name: str,
        return_type_name: str,
        parameters: List[ParameterSpec] = None,
        visibility: Visibility = Visibility.PUBLIC,
    ) -> MethodSpec:
        """Append a method and return it."""
        method_spec = MethodSpec(name, return_type_name, list(parameters or []), visibility)
        self.methods.append(method_spec)
        return method_spec

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON document layout read by convert_spec_document."""
        return {
            "name": self.name,
            "fields": [
                {
                    "name": f.name,
                    "type": f.type_name,
                    "visibility": f.visibility.value,
                }
                for f in self.fields
            ],
            "methods": [
                {
                    "name": m.name,
                    "return_type": m.return_type_name,
                    "visibility": m.visibility.value,
                    "parameters": [
                        {"name": p.name, "type": p.type_name, "keyword": p.keyword.value}
                        for p in m.parameters
                    ],
                }
                for m in self.methods
            ],
        }


def _parse_enum(enum_class, value: Any, default, context: str):
    """Parse an enum member from its value or name, case-insensitively."""
    if value is None:
        return default
    if isinstance(value, enum_class):
        return value
    if not isinstance(value, str):
        raise SchemaError(f"{context}: expected a string, got {type(value).__name__}")

    key = value.strip().lower()
    for member in enum_class:
        if member.value == key or member.name.lower() == key:
            return member

    valid = ", ".join(member.value for member in enum_class)
    raise SchemaError(f"{context}: invalid value '{value}' (expected one of: {valid})")


def _get_text(data: Dict[str, Any], keys: tuple, context: str) -> str:
    """Read the first present key as a string; missing keys give ''."""
    for key in keys:
        if key in data and data[key] is not None:
            value = data[key]
            if not isinstance(value, str):
                raise SchemaError(
                    f"{context}: '{key}' must be a string, got {type(value).__name__}"
                )
            return value
    return ""


def _get_list(data: Dict[str, Any], key: str, context: str) -> List[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise SchemaError(f"{context}: '{key}' must be a list")
    return value


def _require_object(value: Any, context: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise SchemaError(f"{context}: expected an object, got {type(value).__name__}")
    return value


def convert_parameter(data: Dict[str, Any], context: str = "parameter") -> ParameterSpec:
    """Convert a parameter dict into a ParameterSpec."""
    data = _require_object(data, context)
    return ParameterSpec(
        name=_get_text(data, ("name",), context),
        type_name=_get_text(data, ("type", "type_name"), context),
        keyword=_parse_enum(
            ParameterKeyword, data.get("keyword"), ParameterKeyword.NONE, f"{context}.keyword"
        ),
    )


def convert_field(data: Dict[str, Any], context: str = "field") -> FieldSpec:
    """Convert a field dict into a FieldSpec."""
    data = _require_object(data, context)
    return FieldSpec(
        name=_get_text(data, ("name",), context),
        type_name=_get_text(data, ("type", "type_name"), context),
        visibility=_parse_enum(
            Visibility, data.get("visibility"), Visibility.PUBLIC, f"{context}.visibility"
        ),
    )


def convert_method(data: Dict[str, Any], context: str = "method") -> MethodSpec:
    """Convert a method dict into a MethodSpec."""
    data = _require_object(data, context)
    parameters = [
        convert_parameter(param, f"{context}.parameters[{index}]")
        for index, param in enumerate(_get_list(data, "parameters", context))
    ]
    return MethodSpec(
        name=_get_text(data, ("name",), context),
        return_type_name=_get_text(data, ("return_type", "return_type_name"), context),
        parameters=parameters,
        visibility=_parse_enum(
            Visibility, data.get("visibility"), Visibility.PUBLIC, f"{context}.visibility"
        ),
    )


def convert_spec_document(document: Any) -> ClassSpec:
    """
    Convert a JSON document into a ClassSpec.

    Args:
        document: Parsed JSON (must be an object)

    Returns:
        ClassSpec in document order

    Raises:
        SchemaError: If the document structure is invalid
    """
    document = _require_object(document, "class spec")

    fields = [
        convert_field(item, f"fields[{index}]")
        for index, item in enumerate(_get_list(document, "fields", "class spec"))
    ]
    methods = [
        convert_method(item, f"methods[{index}]")
        for index, item in enumerate(_get_list(document, "methods", "class spec"))
    ]

    return ClassSpec(
        name=_get_text(document, ("name",), "class spec"),
        fields=fields,
        methods=methods,
    )
