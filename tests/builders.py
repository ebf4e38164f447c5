"""Compact constructors for syntax forests used across the tests."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from hiegraph.hie import (
    ContextInfo,
    HieFile,
    HieNode,
    IdentifierDetails,
    ModuleName,
    Name,
    NodeAnnotation,
    TypeTerm,
)
from hiegraph.models import SymbolKey


def key(n: int) -> SymbolKey:
    return SymbolKey(n)


def name(n: int, occ: str | None = None) -> Name:
    return Name(key=SymbolKey(n), occ=occ or f"n{n}")


def node(
    *children: HieNode[Any],
    ann: Iterable[NodeAnnotation] = (),
    types: Iterable[Any] = (),
    ids: Iterable[tuple[Any, IdentifierDetails[Any]]] = (),
) -> HieNode[Any]:
    return HieNode(
        annotations=frozenset(ann),
        types=tuple(types),
        identifiers=tuple(ids),
        children=tuple(children),
    )


def use(n: int, occ: str | None = None, type: Any = None) -> tuple[Name, IdentifierDetails[Any]]:
    return name(n, occ), IdentifierDetails(type=type, context=frozenset({ContextInfo.USE}))


def declares(context: ContextInfo, n: int, occ: str) -> tuple[Name, IdentifierDetails[Any]]:
    return name(n, occ), IdentifierDetails(context=frozenset({context}))


def imports(module: str) -> tuple[ModuleName, IdentifierDetails[Any]]:
    return ModuleName(module), IdentifierDetails(context=frozenset({ContextInfo.IMPORT}))


def import_decl(module: str) -> HieNode[Any]:
    return node(node(ids=[imports(module)]), ann=[NodeAnnotation.IMPORT_DECL])


def data_decl(n: int, occ: str, *cons: HieNode[Any]) -> HieNode[Any]:
    return node(node(ids=[declares(ContextInfo.DATA_DECL, n, occ)]), *cons)


def naked_con(n: int, occ: str, *args: HieNode[Any]) -> HieNode[Any]:
    return node(node(ids=[declares(ContextInfo.CON_DECL, n, occ)]), *args)


def field(n: int, occ: str, *type_nodes: HieNode[Any]) -> HieNode[Any]:
    return node(node(ids=[declares(ContextInfo.RECORD_FIELD_DECL, n, occ)]), *type_nodes)


def record_con(n: int, occ: str, *fields: HieNode[Any]) -> HieNode[Any]:
    return node(node(ids=[declares(ContextInfo.CON_DECL, n, occ)]), node(*fields))


def module_root(*children: HieNode[Any]) -> HieNode[Any]:
    return node(*children, ann=[NodeAnnotation.MODULE])


def hie_file(
    *asts: HieNode[int],
    types: Iterable[TypeTerm] = (),
    module: str = "Data.Tree",
    path: str = "src/Data/Tree.hs",
) -> HieFile:
    return HieFile(module_name=module, path=path, asts=tuple(asts), types=tuple(types))
