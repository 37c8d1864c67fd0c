"""JSON-file backed configuration with type checking against defaults."""

from .config_store import ConfigStore
from .exceptions import (
    ConfigParseError,
    ConfigurationError,
    TypeMismatchError,
    ValidationError,
)
from .log_setup import configure_logging
from .repair import RepairResult, fix_json

__all__ = [
    "ConfigStore",
    "ConfigParseError",
    "ConfigurationError",
    "TypeMismatchError",
    "ValidationError",
    "RepairResult",
    "configure_logging",
    "fix_json",
]
