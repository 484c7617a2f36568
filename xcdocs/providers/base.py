"""Collaborator interfaces (protocols) for the documentation tools.

The tool engines never spawn processes themselves: they talk to these
protocols, which the providers in this package implement on top of mdfind,
grep, and xcrun. Tests substitute in-memory stubs.
"""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class SymbolRecord:
    """One symbol from a module's symbol graph.

    Attributes:
        title: Symbol name as displayed (e.g. "URL", "init(string:)").
        kind_identifier: Symbol-graph kind id (e.g. "swift.struct").
        kind_display_name: Human-readable kind (e.g. "Structure").
        declaration: Concatenated declaration fragment spellings, if the graph has them.
        documentation: Doc comment lines joined with newlines, if present.
    """

    title: str
    kind_identifier: str = ""
    kind_display_name: str = ""
    declaration: str | None = None
    documentation: str | None = None


class ContentSearchProvider(Protocol):
    """File/content search (Spotlight)."""

    async def discover_paths(self, expression: str, roots: list[str]) -> list[str]:
        """Return candidate file paths matching a query expression.

        Args:
            expression: Provider-specific query expression.
            roots: Directories to scope the search to. Empty means unscoped.
        """
        ...


class HeaderSearchProvider(Protocol):
    """Text search over header files."""

    async def find_files(self, query: str, root: str, max_results: int) -> list[str]:
        """Return up to max_results header paths under root containing query (any case)."""
        ...

    async def search_context(self, symbol: str, root: str) -> str:
        """Return grep-style context blocks for symbol under root, or "" if none."""
        ...


class SymbolGraphProvider(Protocol):
    """Symbol graph extraction."""

    async def extract(self, module: str, sdk_root: str) -> list[SymbolRecord]:
        """Return the public symbols of a module.

        Raises:
            SymbolGraphError: If the module cannot be introspected.
        """
        ...


class SdkResolver(Protocol):
    """Locates the active SDK."""

    async def resolve(self) -> str:
        """Return the SDK root path."""
        ...


class DirectoryLister(Protocol):
    """Directory listing."""

    async def list_entries(self, path: str) -> list[str]:
        """Return entry names in path.

        Raises:
            ProviderError: If the directory cannot be read.
        """
        ...
