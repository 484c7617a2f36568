"""Typed exception hierarchy for xcdocs."""

from __future__ import annotations


class XcdocsError(Exception):
    """Base class for all xcdocs errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigError(XcdocsError):
    """Raised for configuration issues (missing file, invalid JSON, validation failure)."""


class LoadError(XcdocsError):
    """Raised when a JSON file cannot be found, read, or parsed."""


class ProviderError(XcdocsError):
    """Raised when an external collaborator (mdfind, grep, xcrun) fails."""


class ProcessTimeoutError(ProviderError):
    """Raised when an external command exceeds the configured timeout."""

    def __init__(self, command: str, timeout: float) -> None:
        self.command = command
        self.timeout = timeout
        super().__init__(f"{command} timed out after {timeout:g}s")


class SymbolGraphError(ProviderError):
    """Raised when swift-symbolgraph-extract fails or produces no usable graph.

    Attributes:
        module: The module whose extraction failed.
        returncode: Exit status of the extractor, or None if it never ran.
    """

    def __init__(self, module: str, message: str, returncode: int | None = None) -> None:
        self.module = module
        self.returncode = returncode
        super().__init__(message)
