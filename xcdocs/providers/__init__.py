"""Collaborators behind the documentation tools.

build_providers() wires the real implementations (mdfind, grep, xcrun, and
the local filesystem) from a Config. Tests build a Providers with stubs.
"""

from dataclasses import dataclass

from xcdocs.config.schema import Config
from xcdocs.providers.base import (
    ContentSearchProvider,
    DirectoryLister,
    HeaderSearchProvider,
    SdkResolver,
    SymbolGraphProvider,
    SymbolRecord,
)
from xcdocs.providers.headers import GrepHeaderSearch
from xcdocs.providers.sdk import LocalDirectoryLister, XcrunSdkResolver
from xcdocs.providers.spotlight import SpotlightSearch, build_query_expression, existing_roots
from xcdocs.providers.symbolgraph import SymbolGraphExtractor, parse_symbol_graph


@dataclass
class Providers:
    """The set of collaborators a ToolDispatcher works against."""

    content_search: ContentSearchProvider
    header_search: HeaderSearchProvider
    symbol_graphs: SymbolGraphProvider
    sdk: SdkResolver
    directories: DirectoryLister


def build_providers(config: Config) -> Providers:
    timeout = config.process.timeout_seconds
    return Providers(
        content_search=SpotlightSearch(config.search.mdfind, timeout=timeout),
        header_search=GrepHeaderSearch(config.search.grep, timeout=timeout),
        symbol_graphs=SymbolGraphExtractor(
            xcrun=config.sdk.xcrun,
            target=config.sdk.target,
            minimum_access_level=config.sdk.minimum_access_level,
            timeout=timeout,
        ),
        sdk=XcrunSdkResolver(config.sdk.xcrun, config.sdk.fallback_path, timeout=timeout),
        directories=LocalDirectoryLister(),
    )


__all__ = [
    "ContentSearchProvider",
    "DirectoryLister",
    "HeaderSearchProvider",
    "SdkResolver",
    "SymbolGraphProvider",
    "SymbolRecord",
    "GrepHeaderSearch",
    "LocalDirectoryLister",
    "XcrunSdkResolver",
    "SpotlightSearch",
    "SymbolGraphExtractor",
    "Providers",
    "build_providers",
    "build_query_expression",
    "existing_roots",
    "parse_symbol_graph",
]
