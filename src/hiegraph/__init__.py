"""hiegraph - declaration and use graphs from compiler interface dumps."""

from hiegraph.models import (
    Class,
    DataCon,
    DataType,
    Module,
    NakedBody,
    RecordBody,
    RecordField,
    SymbolKey,
    Value,
)
from hiegraph.parse import ParseRun, parse_hie_file, parse_hie_files

__version__ = "0.1.0"

__all__ = [
    "Class",
    "DataCon",
    "DataType",
    "Module",
    "NakedBody",
    "ParseRun",
    "RecordBody",
    "RecordField",
    "SymbolKey",
    "Value",
    "parse_hie_file",
    "parse_hie_files",
]
