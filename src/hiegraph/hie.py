"""Input model: one module's annotated syntax forest and type table.

These types mirror what the compiler writes into its per-module interface
dump. Reading and decoding the dump happens upstream; this module only fixes
the shape the parser consumes.

Nodes are generic in their type payload ``T``. As read from the dump a node
carries raw type-table indices (``HieNode[int]``); after resolution every
index is replaced by the symbols it expands to (``HieNode[tuple[SymbolKey, ...]]``).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from hiegraph.models import SymbolKey

T = TypeVar("T")
U = TypeVar("U")


class NodeAnnotation(str, Enum):
    """Syntactic role tags the grammar matches on.

    The dump's vocabulary is open; anything the grammar does not look at is
    ``UNRECOGNIZED``.
    """

    MODULE = "Module/Module"
    IMPORT_DECL = "ImportDecl/ImportDecl"
    UNRECOGNIZED = "unrecognized"

    @classmethod
    def classify(cls, category: str, subcategory: str) -> NodeAnnotation:
        """Map a raw (category, subcategory) pair onto the closed vocabulary."""
        try:
            return cls(f"{category}/{subcategory}")
        except ValueError:
            return cls.UNRECOGNIZED


class ContextInfo(str, Enum):
    """How an identifier occurs at a node."""

    USE = "use"
    IMPORT = "import"  # module name in an import declaration
    DATA_DECL = "data_decl"
    CON_DECL = "con_decl"
    RECORD_FIELD_DECL = "record_field_decl"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True, slots=True)
class Name:
    """A resolved entity name."""

    key: SymbolKey
    occ: str


@dataclass(frozen=True, slots=True)
class ModuleName:
    """An identifier that names a module rather than an entity."""

    name: str


Identifier = Name | ModuleName


@dataclass(frozen=True, slots=True)
class IdentifierDetails(Generic[T]):
    type: T | None = None
    context: frozenset[ContextInfo] = frozenset()

    def map_type(self, f: Callable[[T], U]) -> IdentifierDetails[U]:
        return IdentifierDetails(
            type=None if self.type is None else f(self.type),
            context=self.context,
        )


@dataclass(frozen=True, slots=True)
class HieNode(Generic[T]):
    annotations: frozenset[NodeAnnotation] = frozenset()
    types: tuple[T, ...] = ()
    identifiers: tuple[tuple[Identifier, IdentifierDetails[T]], ...] = ()
    children: tuple[HieNode[T], ...] = ()

    def map_types(self, f: Callable[[T], U]) -> HieNode[U]:
        """Rebuild the subtree with every type payload passed through ``f``."""
        return HieNode(
            annotations=self.annotations,
            types=tuple(f(t) for t in self.types),
            identifiers=tuple((ident, details.map_type(f)) for ident, details in self.identifiers),
            children=tuple(child.map_types(f) for child in self.children),
        )


@dataclass(frozen=True, slots=True)
class TyVar:
    """Type-table leaf referring to a named entity."""

    name: Name


@dataclass(frozen=True, slots=True)
class TyStruct:
    """Type-table node built from other table entries, in order."""

    refs: tuple[int, ...]


TypeTerm = TyVar | TyStruct


@dataclass(frozen=True, slots=True)
class HieFile:
    module_name: str
    path: str
    asts: tuple[HieNode[int], ...]
    types: tuple[TypeTerm, ...]
