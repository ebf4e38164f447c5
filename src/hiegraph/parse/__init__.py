"""Declaration extraction from interface dumps."""

from hiegraph.parse.assemble import ParseRun, parse_hie_file, parse_hie_files, resolved_forest
from hiegraph.parse.resolve import resolve_types

__all__ = [
    "ParseRun",
    "parse_hie_file",
    "parse_hie_files",
    "resolve_types",
    "resolved_forest",
]
