"""Config module exports."""

from hiegraph.config.loader import HieGraphSettings, load_config
from hiegraph.config.models import (
    DebugConfig,
    HieGraphConfig,
    LoggingConfig,
    LogOutputConfig,
    ParseConfig,
)

__all__ = [
    "load_config",
    "HieGraphConfig",
    "HieGraphSettings",
    "DebugConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "ParseConfig",
]
