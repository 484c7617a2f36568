"""search_documentation: multi-strategy discovery and result merging.

Discovery is a funnel of three stages, each gated on how much the earlier
stages found:

1. Spotlight over the documentation roots (always runs)
2. grep over SDK headers (only while Spotlight found fewer than `limit` paths)
3. symbol-graph title search across common frameworks (only while Spotlight
   found fewer than 5 paths)

run_discovery() walks the stages in order; merge_results() turns what they
found into the final text and never touches a provider.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

from xcdocs.config.schema import SearchConfig
from xcdocs.core.constants import framework_dir, frameworks_dir
from xcdocs.core.errors import ProviderError
from xcdocs.providers import Providers
from xcdocs.providers.spotlight import build_query_expression, existing_roots
from xcdocs.tools.ranking import format_header_files, format_primary_results, relevance_score

logger = logging.getLogger(__name__)

# Spotlight result counts below which the later stages run
SYMBOL_SEARCH_THRESHOLD = 5
SYMBOL_LISTING_THRESHOLD = 3


@dataclass(frozen=True)
class RankedPath:
    path: str
    score: int


@dataclass(frozen=True)
class SymbolMatch:
    """A symbol whose title contains the query, found by the symbol-graph stage."""

    framework: str
    symbol: str
    kind: str


@dataclass
class DiscoveryResults:
    """Everything the discovery stages found for one query.

    Attributes:
        primary: Scored Spotlight paths, in discovery order.
        header_text: Formatted header-file listing, or None if the stage
            did not run or found nothing.
        symbol_matches: Matches from the symbol-graph stage.
    """

    primary: list[RankedPath] = field(default_factory=list)
    header_text: str | None = None
    symbol_matches: list[SymbolMatch] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.primary and self.header_text is None and not self.symbol_matches


@dataclass(frozen=True)
class DiscoveryStage:
    """One discovery strategy.

    Attributes:
        name: Stage name, for logging.
        should_run: Sufficiency gate, given the results so far.
        run: Coroutine function that adds its findings to the results.
    """

    name: str
    should_run: Callable[[DiscoveryResults], bool]
    run: Callable[[DiscoveryResults], Awaitable[None]]


async def run_discovery(stages: list[DiscoveryStage]) -> DiscoveryResults:
    """Run stages strictly in order, skipping any whose gate says enough was found."""
    results = DiscoveryResults()
    for stage in stages:
        if not stage.should_run(results):
            logger.debug("Skipping discovery stage %s", stage.name)
            continue
        logger.debug("Running discovery stage %s", stage.name)
        await stage.run(results)
    return results


def _sorted_primary(primary: list[RankedPath], limit: int) -> list[str]:
    # sorted() is stable, so equal scores keep discovery order
    ranked = sorted(primary, key=lambda r: r.score, reverse=True)
    return [r.path for r in ranked[:limit]]


def format_not_found(query: str) -> str:
    return (
        f"No documentation found for '{query}'.\n\n"
        "Suggestions:\n"
        "- Try searching for a more specific symbol name\n"
        "- Use get_symbol_info if you know the framework (e.g., Foundation, SwiftUI)\n"
        "- Use list_frameworks to see available frameworks"
    )


def format_symbol_matches(matches: list[SymbolMatch], query: str) -> str:
    lines = [f"Found {len(matches)} symbol(s) matching '{query}' across frameworks:", ""]
    for index, match in enumerate(matches, start=1):
        lines.append(f"{index}. {match.symbol}")
        lines.append(f"   Framework: {match.framework} - Kind: {match.kind}")
        lines.append("")
    lines.append(
        "Tip: Use get_symbol_info with the module and symbol name for detailed information."
    )
    return "\n".join(lines)


def format_combined(primary: list[RankedPath], header_text: str, query: str, limit: int) -> str:
    lines = [f"Documentation search results for '{query}':", ""]
    if primary:
        lines.append("## Spotlight Results")
        lines.append("")
        lines.append(format_primary_results(_sorted_primary(primary, limit), query))
    lines.append("")
    lines.append("## SDK Header Results")
    lines.append("")
    lines.append(header_text)
    return "\n".join(lines)


def merge_results(results: DiscoveryResults, query: str, limit: int) -> str:
    """Pick the output for a search from what discovery found.

    In order of precedence:

    1. Nothing found anywhere: a not-found message with suggestions.
    2. Symbol matches, fewer than 3 Spotlight paths, and no header hits:
       the symbol listing.
    3. Header hits: Spotlight results (if any) followed by the header listing.
    4. Otherwise the Spotlight results alone.
    """
    if results.is_empty():
        return format_not_found(query)

    if (
        results.symbol_matches
        and len(results.primary) < SYMBOL_LISTING_THRESHOLD
        and results.header_text is None
    ):
        return format_symbol_matches(results.symbol_matches, query)

    if results.header_text is not None:
        return format_combined(results.primary, results.header_text, query, limit)

    return format_primary_results(_sorted_primary(results.primary, limit), query)


class DocumentationSearch:
    """Runs the discovery funnel for search_documentation."""

    def __init__(self, providers: Providers, config: SearchConfig) -> None:
        self._providers = providers
        self._config = config

    async def search(self, query: str, limit: int) -> str:
        sdk_root = await self._providers.sdk.resolve()

        async def primary(results: DiscoveryResults) -> None:
            results.primary = await self.find_primary(query)

        async def headers(results: DiscoveryResults) -> None:
            results.header_text = await self.find_headers(query, limit, sdk_root)

        async def symbols(results: DiscoveryResults) -> None:
            results.symbol_matches = await self.find_symbols(query, sdk_root)

        stages = [
            DiscoveryStage("spotlight", lambda r: True, primary),
            DiscoveryStage("headers", lambda r: len(r.primary) < limit, headers),
            DiscoveryStage(
                "symbols", lambda r: len(r.primary) < SYMBOL_SEARCH_THRESHOLD, symbols
            ),
        ]
        results = await run_discovery(stages)
        return merge_results(results, query, limit)

    async def find_primary(self, query: str) -> list[RankedPath]:
        roots = await asyncio.to_thread(existing_roots, self._config.documentation_roots)
        try:
            paths = await self._providers.content_search.discover_paths(
                build_query_expression(query), roots
            )
        except ProviderError as e:
            logger.warning("Spotlight search failed: %s", e)
            return []
        return [RankedPath(path, relevance_score(path, query)) for path in paths]

    async def find_headers(self, query: str, limit: int, sdk_root: str) -> str | None:
        root = self._config.header_search_root or str(frameworks_dir(sdk_root))
        try:
            paths = await self._providers.header_search.find_files(query, root, limit)
        except ProviderError as e:
            logger.warning("Header search failed: %s", e)
            return None
        if not paths:
            return None
        return format_header_files(paths, query)

    async def find_symbols(self, query: str, sdk_root: str) -> list[SymbolMatch]:
        cap = self._config.symbol_match_cap
        q = query.lower()
        matches: list[SymbolMatch] = []

        for framework in self._config.common_frameworks:
            if len(matches) >= cap:
                break
            if not await asyncio.to_thread(framework_dir(sdk_root, framework).exists):
                continue
            try:
                records = await self._providers.symbol_graphs.extract(framework, sdk_root)
            except ProviderError as e:
                logger.debug("Skipping %s in symbol search: %s", framework, e)
                continue

            for record in records:
                if q in record.title.lower() and record.kind_display_name:
                    matches.append(SymbolMatch(framework, record.title, record.kind_display_name))
                    if len(matches) >= cap:
                        break

        return matches
