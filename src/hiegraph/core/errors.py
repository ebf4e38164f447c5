"""hiegraph error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Parse

A parser that does not match is not an error; it yields ``None``. These types
cover the surrounding layers: configuration, malformed type tables and
batch runs that were asked to stop on the first unmatched module.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_FILE_NOT_FOUND = 2004

    # Parse (3xxx)
    PARSE_MODULE_NO_MATCH = 3001
    PARSE_TYPE_INDEX_OUT_OF_RANGE = 3002


@dataclass(frozen=True, slots=True)
class HieGraphError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'CONFIG_PARSE_ERROR')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(HieGraphError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


class ModuleParseError(HieGraphError):
    """A module's dump did not match the module production."""

    @classmethod
    def no_match(cls, module: str, path: str) -> "ModuleParseError":
        return cls(
            code=ErrorCode.PARSE_MODULE_NO_MATCH,
            message=f"Could not parse module {module} ({path})",
            details={"module": module, "path": path},
        )


class TypeTableError(HieGraphError):
    """Structural type term refers outside its own table."""

    @classmethod
    def index_out_of_range(cls, index: int, size: int) -> "TypeTableError":
        return cls(
            code=ErrorCode.PARSE_TYPE_INDEX_OUT_OF_RANGE,
            message=f"Type index {index} outside table of size {size}",
            details={"index": index, "size": size},
        )
