"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (HIEGRAPH__SECTION__KEY)
3. YAML config file passed to load_config()
4. Built-in defaults (this file)

Environment Variable Format:
    HIEGRAPH__<SECTION>__<KEY>=<VALUE>

Examples:
    HIEGRAPH__LOGGING__LEVEL=DEBUG
    HIEGRAPH__PARSE__STRICT=true
    HIEGRAPH__DEBUG__DUMP_PARSED=true
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        HIEGRAPH__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs one event per parsed module.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class ParseConfig(BaseModel):
    """Batch parsing behaviour.

    Env vars:
        HIEGRAPH__PARSE__STRICT: Abort the batch on the first unmatched module
    """

    strict: bool = Field(
        default=False,
        description="Raise ModuleParseError for the first module whose dump does not "
        "match the module production. When false the module is skipped and reported.",
    )


class DebugConfig(BaseModel):
    """Debug dump configuration.

    Env vars:
        HIEGRAPH__DEBUG__DUMP_PARSED: Print every parsed module to stderr
    """

    dump_parsed: bool = Field(
        default=False,
        description="Render the parsed modules as a tree on stderr after each batch.",
    )


class HieGraphConfig(BaseModel):
    """Root configuration for hiegraph."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    parse: ParseConfig = Field(default_factory=ParseConfig)
    debug: DebugConfig = Field(default_factory=DebugConfig)
