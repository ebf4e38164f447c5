"""Debug rendering of parsed modules.

Produces a rich tree per module::

    Data.Tree (src/Data/Tree.hs)
    ├── imports
    │   └── Data.List
    └── data Tree #1
        ├── Leaf #2
        └── Node #3 {record}
            └── val #4 -> #7
"""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from hiegraph.models import (
    Class,
    DataCon,
    DataType,
    Module,
    NakedBody,
    SymbolKey,
    TopLevelDecl,
    Value,
)

_console = Console(stderr=True)


def format_key(key: SymbolKey) -> str:
    return str(key)


def format_uses(uses: Iterable[SymbolKey]) -> str:
    rendered = ", ".join(format_key(k) for k in uses)
    return rendered or "-"


def _add_con(parent: Tree, con: DataCon) -> None:
    if isinstance(con.body, NakedBody):
        parent.add(f"{escape(con.name)} {format_key(con.key)} -> {format_uses(con.body.uses)}")
        return
    branch = parent.add(f"{escape(con.name)} {format_key(con.key)} {{record}}")
    for fld in con.body.fields:
        branch.add(f"{escape(fld.name)} {format_key(fld.key)} -> {format_uses(fld.uses)}")


def _add_decl(parent: Tree, decl: TopLevelDecl) -> None:
    if isinstance(decl, DataType):
        branch = parent.add(f"[bold]data[/bold] {escape(decl.name)} {format_key(decl.key)}")
        for con in decl.cons:
            _add_con(branch, con)
    elif isinstance(decl, Value):
        parent.add(f"[bold]value[/bold] {escape(decl.name)} {format_key(decl.key)}")
    elif isinstance(decl, Class):
        branch = parent.add(f"[bold]class[/bold] {escape(decl.name)} {format_key(decl.key)}")
        for method in decl.methods:
            branch.add(f"{escape(method.name)} {format_key(method.key)}")


def render_module(module: Module) -> Tree:
    tree = Tree(f"[cyan]{escape(module.name)}[/cyan] ({escape(module.path)})")
    if module.imports:
        imports = tree.add("imports")
        for name in module.imports:
            imports.add(escape(name))
    for decl in module.decls:
        _add_decl(tree, decl)
    return tree


def dump_modules(modules: Iterable[Module], console: Console | None = None) -> None:
    """Print every module's tree, stderr by default."""
    out = console or _console
    for module in modules:
        out.print(render_module(module))
