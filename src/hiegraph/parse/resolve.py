"""Flatten the module type table into direct symbol lists.

Each table slot is expanded depth first into the ordered concatenation of the
symbols reachable from it. Every root gets its own visited set; a structural
slot already expanded during that root's run contributes nothing the second
time, which both cuts cycles and keeps shared sub-terms from multiplying.
Leaves are never recorded as visited, so a leaf referenced twice from the
same structure appears twice.
"""

from __future__ import annotations

from collections.abc import Sequence

from hiegraph.core.errors import TypeTableError
from hiegraph.hie import TypeTerm, TyVar
from hiegraph.models import SymbolKey

ResolvedTable = tuple[tuple[SymbolKey, ...], ...]


def resolve_types(table: Sequence[TypeTerm]) -> ResolvedTable:
    """Resolve every slot of ``table``.

    Raises:
        TypeTableError: A structural term refers outside the table.
    """
    size = len(table)

    def expand(index: int, visited: set[int], keys: list[SymbolKey]) -> None:
        if not 0 <= index < size:
            raise TypeTableError.index_out_of_range(index, size)
        term = table[index]
        if isinstance(term, TyVar):
            keys.append(term.name.key)
            return
        if index in visited:
            return
        visited.add(index)
        for ref in term.refs:
            expand(ref, visited, keys)

    def resolve_one(index: int) -> tuple[SymbolKey, ...]:
        keys: list[SymbolKey] = []
        expand(index, set(), keys)
        return tuple(keys)

    return tuple(resolve_one(index) for index in range(size))
