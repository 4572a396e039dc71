"""
Type resolution for generated declarations.

A generator only needs to know whether a type name exists. The answer comes
from a TypeResolver supplied by the embedding application; the static
implementation here is backed by an in-memory registry that can be filled
from JSON type catalogs.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, List, Optional, Union, Any

from so_creator.logging_config import get_logger
from so_creator.utils import load_document

logger = get_logger(__name__)


# Built-in keywords accepted without any lookup (case-sensitive)
PRIMITIVE_KEYWORDS: FrozenSet[str] = frozenset(
    {
        "void",
        "bool",
        "byte",
        "sbyte",
        "char",
        "decimal",
        "double",
        "float",
        "int",
        "uint",
        "long",
        "ulong",
        "object",
        "short",
        "ushort",
        "string",
    }
)


class ResolverError(Exception):
    """Exception raised for invalid type catalogs."""

    pass


@dataclass(frozen=True)
class TypeHandle:
    """A declared type known to a resolver."""

    name: str
    namespace: str = ""
    base: Optional[str] = None  # Simple name of the base type

    @property
    def full_name(self) -> str:
        """Namespace-qualified name."""
        return f"{self.namespace}.{self.name}" if self.namespace else self.name


class TypeResolver(ABC):
    """Answers type-existence questions for the generators."""

    def is_primitive_keyword(self, name: str) -> bool:
        """Check a name against the fixed primitive keyword list."""
        return name in PRIMITIVE_KEYWORDS

    @abstractmethod
    def resolve_type(self, name: str) -> Optional[TypeHandle]:
        """
        Look up a declared type by simple name.

        Args:
            name: Exact simple type name

        Returns:
            The first matching TypeHandle, or None
        """
        pass

    @abstractmethod
    def list_subtypes(self, handle: TypeHandle) -> List[TypeHandle]:
        """
        List types deriving from a type.

        Args:
            handle: Parent type

        Returns:
            Subtypes sorted by name
        """
        pass


def is_valid_type(name: str, resolver: TypeResolver) -> bool:
    """Return True if ``name`` is a primitive keyword or resolves to a type."""
    return resolver.is_primitive_keyword(name) or resolver.resolve_type(name) is not None


class StaticTypeResolver(TypeResolver):
    """Resolver backed by a fixed registry of TypeHandles.

    Lookups are by exact simple name. When several namespaces declare the
    same simple name, the first registered one wins.
    """

    def __init__(self, types: Optional[Iterable[TypeHandle]] = None):
        self._types: List[TypeHandle] = []
        self._by_name: Dict[str, TypeHandle] = {}
        if types:
            self.register_many(types)

    def register(self, handle: TypeHandle) -> TypeHandle:
        """Add a type. Returns the handle that now answers for its name."""
        if handle in self._types:
            return self._by_name[handle.name]

        self._types.append(handle)
        if handle.name not in self._by_name:
            self._by_name[handle.name] = handle
        else:
            logger.debug(
                "Type %s shadowed by %s",
                handle.full_name,
                self._by_name[handle.name].full_name,
            )
        return self._by_name[handle.name]

    def register_many(self, handles: Iterable[TypeHandle]):
        """Add several types in order."""
        for handle in handles:
            self.register(handle)

    def resolve_type(self, name: str) -> Optional[TypeHandle]:
        handle = self._by_name.get(name)
        if handle is None:
            logger.debug("Type not found: %s", name)
        return handle

    def list_subtypes(self, handle: TypeHandle) -> List[TypeHandle]:
        subtypes = [
            candidate
            for candidate in self._types
            if candidate != handle and self._derives_from(candidate, handle)
        ]
        return sorted(subtypes, key=lambda t: t.name)

    def _derives_from(self, candidate: TypeHandle, parent: TypeHandle) -> bool:
        """Walk the base chain of ``candidate`` looking for ``parent``."""
        seen = set()
        current = candidate
        while current.base and current.base not in seen:
            seen.add(current.base)
            base = self._by_name.get(current.base)
            if base is None:
                return False
            if base == parent:
                return True
            current = base
        return False

    @property
    def types(self) -> List[TypeHandle]:
        """All registered types in registration order."""
        return list(self._types)

    def __len__(self) -> int:
        return len(self._types)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name


def convert_type_catalog(document: Any) -> List[TypeHandle]:
    """
    Convert a catalog document into TypeHandles.

    Accepted layout: {"types": [{"name": ..., "namespace": ..., "base": ...}]}
    or the bare list.

    Raises:
        ResolverError: If the document structure is invalid
    """
    entries = document.get("types") if isinstance(document, dict) else document
    if not isinstance(entries, list):
        raise ResolverError("Type catalog must be a list or an object with a 'types' list")

    handles = []
    for index, entry in enumerate(entries):
        if isinstance(entry, str):
            entry = {"name": entry}
        if not isinstance(entry, dict):
            raise ResolverError(f"types[{index}]: expected an object or a string")

        name = entry.get("name")
        if not name or not isinstance(name, str):
            raise ResolverError(f"types[{index}]: 'name' is required")

        handles.append(
            TypeHandle(
                name=name,
                namespace=entry.get("namespace") or "",
                base=entry.get("base") or None,
            )
        )

    return handles


def load_type_catalog(
    source: Union[str, Path],
    resolver: Optional[StaticTypeResolver] = None,
) -> StaticTypeResolver:
    """
    Load a type catalog from a file or URL into a resolver.

    Args:
        source: Catalog path or URL
        resolver: Resolver to extend (a new empty one if omitted)

    Returns:
        The resolver holding the loaded types
    """
    handles = convert_type_catalog(load_document(source))
    resolver = resolver if resolver is not None else StaticTypeResolver()
    resolver.register_many(handles)
    logger.info("Loaded %d types from %s", len(handles), source)
    return resolver
