"""
Pytest configuration and fixtures for so_creator tests.
"""

import json

import pytest

from so_creator.codegen.core.config import GeneratorConfig
from so_creator.codegen.core.resolver import StaticTypeResolver, TypeHandle
from so_creator.codegen.core.schema import (
    ClassSpec,
    FieldSpec,
    MethodSpec,
    ParameterSpec,
    ParameterKeyword,
    Visibility,
)
from so_creator.codegen.languages.csharp import CSharpGenerator


@pytest.fixture
def game_resolver():
    """Small resolver with a three-level hierarchy and an unrelated type."""
    return StaticTypeResolver(
        [
            TypeHandle("Item", "Game"),
            TypeHandle("Weapon", "Game", base="Item"),
            TypeHandle("Sword", "Game", base="Weapon"),
            TypeHandle("Potion", "Game", base="Item"),
            TypeHandle("Inventory", "Game"),
        ]
    )


@pytest.fixture
def generator(game_resolver):
    """C# generator with default (Unity) configuration."""
    return CSharpGenerator(GeneratorConfig(), game_resolver)


@pytest.fixture
def player_spec():
    """A typical spec with one invalid field."""
    return ClassSpec(
        name="PlayerStats",
        fields=[
            FieldSpec("health", "int"),
            FieldSpec("weapon", "Weapon", Visibility.PRIVATE),
            FieldSpec("ghost", "Bogus123"),
        ],
        methods=[
            MethodSpec(
                "Heal",
                "void",
                [ParameterSpec("amount", "int")],
                Visibility.PROTECTED,
            ),
        ],
    )


@pytest.fixture
def player_document():
    """JSON document form of a class spec."""
    return {
        "name": "PlayerStats",
        "fields": [
            {"name": "health", "type": "int", "visibility": "public"},
            {"name": "speed", "type": "float", "visibility": "Private"},
        ],
        "methods": [
            {
                "name": "Heal",
                "return_type": "void",
                "parameters": [
                    {"name": "amounts", "type": "int", "keyword": "params"},
                    {"name": "source", "type": "string"},
                ],
            }
        ],
    }


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON document to a temp file and return its path."""

    def _write(data, name="document.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
