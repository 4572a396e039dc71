"""
C# code generator module.

Generates C# class declarations (Unity scripts by default) from class specs.
"""

from .generator import (
    CSharpGenerator,
    create_csharp_generator,
    create_scriptable_object_generator,
    create_plain_class_generator,
)
from .types import (
    UNITY_NAMESPACE,
    UNITY_ENGINE_TYPES,
    unity_type_handles,
    create_unity_resolver,
)

__all__ = [
    # Generator
    "CSharpGenerator",
    "create_csharp_generator",
    "create_scriptable_object_generator",
    "create_plain_class_generator",
    # Type catalog
    "UNITY_NAMESPACE",
    "UNITY_ENGINE_TYPES",
    "unity_type_handles",
    "create_unity_resolver",
]
