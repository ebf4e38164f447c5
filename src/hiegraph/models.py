"""Declaration graph extracted from one module's interface dump.

Every entity is immutable and owned by the ``Module`` that contains it.
Identities (``SymbolKey``) come from the dump verbatim and are never
synthesised here.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True, slots=True)
class SymbolKey:
    """Opaque identity of a named entity, assigned upstream."""

    unique: int

    def __str__(self) -> str:
        return f"#{self.unique}"


Uses = tuple[SymbolKey, ...]


@dataclass(frozen=True, slots=True)
class RecordField:
    key: SymbolKey
    name: str
    uses: Uses


@dataclass(frozen=True, slots=True)
class RecordBody:
    """Constructor declared with record syntax."""

    fields: tuple[RecordField, ...]


@dataclass(frozen=True, slots=True)
class NakedBody:
    """Positional constructor; uses collected from the whole constructor node."""

    uses: Uses


DataConBody = RecordBody | NakedBody


@dataclass(frozen=True, slots=True)
class DataCon:
    key: SymbolKey
    name: str
    body: DataConBody


@dataclass(frozen=True, slots=True)
class DataType:
    key: SymbolKey
    name: str
    cons: tuple[DataCon, ...]


@dataclass(frozen=True, slots=True)
class Value:
    """Top-level value binding. Not produced by the grammar yet."""

    key: SymbolKey
    name: str
    uses: Uses


@dataclass(frozen=True, slots=True)
class ClassMethod:
    key: SymbolKey
    name: str


@dataclass(frozen=True, slots=True)
class Class:
    """Type class declaration. Not produced by the grammar yet."""

    key: SymbolKey
    name: str
    methods: tuple[ClassMethod, ...]


TopLevelDecl = DataType | Value | Class


@dataclass(frozen=True, slots=True)
class Module:
    name: str
    path: str
    decls: tuple[TopLevelDecl, ...]
    imports: tuple[str, ...]

    @property
    def data_types(self) -> tuple[DataType, ...]:
        return tuple(d for d in self.decls if isinstance(d, DataType))
