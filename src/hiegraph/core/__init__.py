"""Core module exports."""

from hiegraph.core.errors import (
    ConfigError,
    ErrorCode,
    HieGraphError,
    ModuleParseError,
    TypeTableError,
)
from hiegraph.core.logging import (
    clear_run_id,
    configure_logging,
    get_logger,
    get_run_id,
    set_run_id,
)

__all__ = [
    # Errors
    "ConfigError",
    "ErrorCode",
    "HieGraphError",
    "ModuleParseError",
    "TypeTableError",
    # Logging
    "clear_run_id",
    "configure_logging",
    "get_logger",
    "get_run_id",
    "set_run_id",
]
