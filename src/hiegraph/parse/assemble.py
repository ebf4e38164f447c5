"""Turn interface dumps into ``Module`` values.

``parse_hie_file`` is the pure per-module entry point. ``parse_hie_files``
drives a batch: it logs per-module outcomes, optionally stops on the first
module that fails to parse, and emits the debug dump when configured.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from hiegraph.core.errors import ModuleParseError, TypeTableError
from hiegraph.core.logging import get_logger
from hiegraph.hie import HieFile
from hiegraph.models import DataType, Module, SymbolKey
from hiegraph.parse.grammar import AstNode, p_module_body
from hiegraph.parse.resolve import resolve_types
from hiegraph.parse.treeparser import p_one, run_parser

if TYPE_CHECKING:
    from hiegraph.config.models import HieGraphConfig

log = get_logger(__name__)


def resolved_forest(hie: HieFile) -> tuple[AstNode, ...]:
    """The module's root forest with every type index replaced by its symbols."""
    table = resolve_types(hie.types)

    def lookup(index: int) -> tuple[SymbolKey, ...]:
        if not 0 <= index < len(table):
            raise TypeTableError.index_out_of_range(index, len(table))
        return table[index]

    return tuple(root.map_types(lookup) for root in hie.asts)


def parse_hie_file(hie: HieFile) -> Module | None:
    """Parse one module; ``None`` unless exactly one root matches."""
    forest = resolved_forest(hie)
    production = p_one(lambda roots: roots, p_module_body(hie.module_name, hie.path))
    return run_parser(production, forest)


@dataclass
class ParseRun:
    """Outcome of parsing a batch of modules."""

    modules: list[Module] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


def parse_hie_files(
    files: Iterable[HieFile],
    config: HieGraphConfig | None = None,
) -> ParseRun:
    """Parse every module in ``files``.

    Raises:
        ModuleParseError: In strict mode, for the first module that does not parse.
        TypeTableError: A module's type table refers outside itself.
    """
    from hiegraph.config.models import HieGraphConfig

    config = config or HieGraphConfig()
    run = ParseRun()

    for hie in files:
        module = parse_hie_file(hie)
        if module is None:
            if config.parse.strict:
                log.error("module_parse_failed", module=hie.module_name, path=hie.path)
                raise ModuleParseError.no_match(hie.module_name, hie.path)
            log.warning("module_skipped", module=hie.module_name, path=hie.path)
            run.failed.append(hie.module_name)
            continue
        log.debug(
            "module_parsed",
            module=module.name,
            imports=len(module.imports),
            decls=len(module.decls),
            constructors=sum(len(d.cons) for d in module.decls if isinstance(d, DataType)),
        )
        run.modules.append(module)

    log.info("parse_complete", parsed=len(run.modules), skipped=len(run.failed))

    if config.debug.dump_parsed:
        from hiegraph.render import dump_modules

        dump_modules(run.modules)

    return run
