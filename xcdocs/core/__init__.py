"""Core errors, constants, and process helpers."""

from xcdocs.core.encoding import ENCODING, ENCODING_ERRORS, configure_stdio
from xcdocs.core.errors import (
    ConfigError,
    LoadError,
    ProcessTimeoutError,
    ProviderError,
    SymbolGraphError,
    XcdocsError,
)
from xcdocs.core.process import CommandResult, run_command, terminate_process_tree

__all__ = [
    "ENCODING",
    "ENCODING_ERRORS",
    "configure_stdio",
    "XcdocsError",
    "ConfigError",
    "LoadError",
    "ProviderError",
    "ProcessTimeoutError",
    "SymbolGraphError",
    "CommandResult",
    "run_command",
    "terminate_process_tree",
]
