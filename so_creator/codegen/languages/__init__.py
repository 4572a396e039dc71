"""
Language-specific code generators.

This module contains generators for different programming languages.
"""

from .csharp import (
    CSharpGenerator,
    create_csharp_generator,
    create_scriptable_object_generator,
    create_plain_class_generator,
)

__all__ = [
    "CSharpGenerator",
    "create_csharp_generator",
    "create_scriptable_object_generator",
    "create_plain_class_generator",
]
