"""Declaration grammar over resolved syntax trees.

Productions recognise the module root, its imports and its data declarations.
Each one either matches completely or yields ``None``; there is no partial
declaration. Nodes carry resolved types here: every type payload is the tuple
of symbols the type expands to.
"""

from __future__ import annotations

from collections.abc import Callable

from hiegraph.hie import (
    ContextInfo,
    HieNode,
    Identifier,
    IdentifierDetails,
    ModuleName,
    Name,
    NodeAnnotation,
)
from hiegraph.models import (
    Class,
    DataCon,
    DataConBody,
    DataType,
    Module,
    NakedBody,
    RecordBody,
    RecordField,
    SymbolKey,
    TopLevelDecl,
    Uses,
    Value,
)
from hiegraph.parse.treeparser import (
    TreeParser,
    p_check,
    p_first,
    p_many,
    p_one,
    p_some,
)

Resolved = tuple[SymbolKey, ...]
AstNode = HieNode[Resolved]
IdentifierEntry = tuple[Identifier, IdentifierDetails[Resolved]]


def children(node: AstNode) -> tuple[AstNode, ...]:
    return node.children


def identifiers(node: AstNode) -> tuple[IdentifierEntry, ...]:
    return node.identifiers


def annotation(tag: NodeAnnotation) -> TreeParser[AstNode, bool]:
    return p_check(lambda node: tag in node.annotations)


def no_annotation() -> TreeParser[AstNode, bool]:
    return p_check(lambda node: not node.annotations)


# =============================================================================
# Module
# =============================================================================


def p_module_body(name: str, path: str) -> TreeParser[AstNode, Module]:
    """Module root: imports and declarations among its direct children.

    Children matching neither production are dropped.
    """
    is_root = annotation(NodeAnnotation.MODULE)
    entry = p_first(p_import, p_top_level_decl)

    def parse(node: AstNode) -> Module | None:
        if is_root(node) is None:
            return None
        imports: list[str] = []
        decls: list[TopLevelDecl] = []
        for item in p_many(children, entry)(node):
            if isinstance(item, str):
                imports.append(item)
            else:
                decls.append(item)
        return Module(name=name, path=path, decls=tuple(decls), imports=tuple(imports))

    return parse


def _import_module_name(entry: IdentifierEntry) -> str | None:
    ident, details = entry
    if isinstance(ident, ModuleName) and ContextInfo.IMPORT in details.context:
        return ident.name
    return None


_is_import = annotation(NodeAnnotation.IMPORT_DECL)
_is_untagged = no_annotation()
_import_name = p_one(identifiers, _import_module_name)


def _import_child(child: AstNode) -> str | None:
    if _is_untagged(child) is None:
        return None
    return _import_name(child)


def p_import(node: AstNode) -> str | None:
    """``import M``: yields ``M`` from the single untagged child."""
    if _is_import(node) is None:
        return None
    return p_one(children, _import_child)(node)


def p_value(node: AstNode) -> Value | None:  # noqa: ARG001
    return None


def p_class(node: AstNode) -> Class | None:  # noqa: ARG001
    return None


# =============================================================================
# Data types
# =============================================================================


def p_name(
    context_filter: Callable[[frozenset[ContextInfo]], bool],
) -> TreeParser[AstNode, tuple[SymbolKey, str]]:
    """The single resolved name at this node whose context passes the filter."""

    def match(entry: IdentifierEntry) -> tuple[SymbolKey, str] | None:
        ident, details = entry
        if isinstance(ident, Name) and context_filter(details.context):
            return ident.key, ident.occ
        return None

    return p_one(identifiers, match)


def p_unique_name_child(context: ContextInfo) -> TreeParser[AstNode, tuple[SymbolKey, str]]:
    """Exactly one child declares exactly one name in ``context``."""
    return p_one(children, p_name(lambda ctx: context in ctx))


def p_uses(node: AstNode) -> Uses:
    """Every symbol this subtree depends on, in pre-order.

    At each node: symbols of the node's types, then each identifier in a use
    context followed by the symbols of its type, then the children.
    """
    keys: list[SymbolKey] = []

    def visit(current: AstNode) -> None:
        for resolved in current.types:
            keys.extend(resolved)
        for ident, details in current.identifiers:
            if isinstance(ident, Name) and ContextInfo.USE in details.context:
                keys.append(ident.key)
                if details.type is not None:
                    keys.extend(details.type)
        for child in current.children:
            visit(child)

    visit(node)
    return tuple(keys)


def p_record_field(node: AstNode) -> RecordField | None:
    name = p_unique_name_child(ContextInfo.RECORD_FIELD_DECL)(node)
    if name is None:
        return None
    key, occ = name
    return RecordField(key=key, name=occ, uses=p_uses(node))


_record_fields = p_some(children, p_record_field)


def p_record_body(node: AstNode) -> RecordBody | None:
    fields = p_one(children, _record_fields)(node)
    if fields is None:
        return None
    return RecordBody(fields=tuple(fields))


def p_naked_body(node: AstNode) -> NakedBody:
    return NakedBody(uses=p_uses(node))


_con_body: TreeParser[AstNode, DataConBody] = p_first(p_record_body, p_naked_body)


def p_data_con(node: AstNode) -> DataCon | None:
    name = p_unique_name_child(ContextInfo.CON_DECL)(node)
    if name is None:
        return None
    body = _con_body(node)
    if body is None:
        return None
    key, occ = name
    return DataCon(key=key, name=occ, body=body)


def p_data(node: AstNode) -> DataType | None:
    name = p_unique_name_child(ContextInfo.DATA_DECL)(node)
    if name is None:
        return None
    key, occ = name
    cons = p_many(children, p_data_con)(node)
    return DataType(key=key, name=occ, cons=tuple(cons))


p_top_level_decl: TreeParser[AstNode, TopLevelDecl] = p_first(p_data, p_value, p_class)
