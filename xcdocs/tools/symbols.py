"""get_symbol_info: resolve a symbol against a module's symbol graph and headers.

Resolution order:

1. If the framework ships a Swift module, search its symbol graph. An exact
   title match (either case) is returned at once.
2. If the framework has Objective-C headers, grep them. A hit is returned in
   preference to anything non-exact from step 1.
3. Fall back to the step 1 result, or report the module as missing.
"""

import asyncio
import logging
from dataclasses import dataclass

from xcdocs.config.schema import SearchConfig
from xcdocs.core.constants import headers_dir, swift_module_dir
from xcdocs.core.errors import ProviderError, SymbolGraphError
from xcdocs.providers import Providers
from xcdocs.providers.base import SymbolRecord

logger = logging.getLogger(__name__)

SIMILAR_PREFIX_LENGTH = 3
MAX_SIMILAR = 10


@dataclass(frozen=True)
class SymbolLookup:
    """Outcome of a symbol-graph lookup.

    Attributes:
        text: Formatted answer for the user.
        exact: True only when a title matched the symbol exactly.
    """

    text: str
    exact: bool = False


def find_symbol(records: list[SymbolRecord], symbol: str) -> tuple[SymbolRecord | None, bool]:
    """Find the best record for symbol.

    Returns the first title equal to symbol (ignoring case) with exact=True,
    else the first title containing it (ignoring case) with exact=False,
    else (None, False).
    """
    wanted = symbol.lower()
    partial: SymbolRecord | None = None
    for record in records:
        if record.title == symbol or record.title.lower() == wanted:
            return record, True
        if partial is None and wanted in record.title.lower():
            partial = record
    return partial, False


def format_symbol(record: SymbolRecord) -> str:
    parts = [f"# {record.title}"]
    if record.kind_display_name:
        parts.append(f"**Kind:** {record.kind_display_name}")
    if record.declaration is not None:
        parts.append(f"\n**Declaration:**\n```swift\n{record.declaration}\n```")
    if record.documentation is not None:
        parts.append(f"\n**Documentation:**\n{record.documentation}")
    return "\n".join(parts)


def similar_titles(records: list[SymbolRecord], symbol: str) -> list[str]:
    """Titles sharing the first three characters of symbol, at most ten."""
    prefix = symbol[:SIMILAR_PREFIX_LENGTH].lower()
    return [r.title for r in records if prefix in r.title.lower()][:MAX_SIMILAR]


def format_header_hit(symbol: str, module: str, output: str, limit: int) -> str:
    truncated = output[:limit]
    suffix = "\n... (truncated)" if len(output) > limit else ""
    return f"Found '{symbol}' in {module} headers:\n\n```objc\n{truncated}{suffix}\n```"


class SymbolResolver:
    """Resolves (module, symbol) pairs for get_symbol_info."""

    def __init__(self, providers: Providers, config: SearchConfig) -> None:
        self._providers = providers
        self._config = config

    async def get_symbol_info(self, module: str, symbol: str) -> str:
        sdk_root = await self._providers.sdk.resolve()

        swift_result: SymbolLookup | None = None
        if await asyncio.to_thread(swift_module_dir(sdk_root, module).exists):
            swift_result = await self.lookup_in_symbol_graph(module, symbol, sdk_root)
            if swift_result.exact:
                return swift_result.text

        headers = headers_dir(sdk_root, module)
        if await asyncio.to_thread(headers.exists):
            header_text = await self.search_headers(module, symbol, str(headers))
            if header_text is not None:
                return header_text

        if swift_result is not None:
            return swift_result.text

        return f"Module '{module}' not found in SDK. Use list_frameworks to see available modules."

    async def lookup_in_symbol_graph(self, module: str, symbol: str, sdk_root: str) -> SymbolLookup:
        try:
            records = await self._providers.symbol_graphs.extract(module, sdk_root)
        except SymbolGraphError as e:
            logger.info("Symbol graph unavailable for %s, using headers: %s", module, e)
            # Header search runs right after this when the Headers directory exists
            return SymbolLookup(f"Symbol '{symbol}' not found in {module} headers.")
        except ProviderError as e:
            logger.warning("Symbol graph extraction failed for %s: %s", module, e)
            return SymbolLookup(f"Error extracting symbol info: {e}")

        record, exact = find_symbol(records, symbol)
        if record is not None:
            return SymbolLookup(format_symbol(record), exact=exact)

        similar = similar_titles(records, symbol)
        if similar:
            listing = "\n".join(f"  - {title}" for title in similar)
            return SymbolLookup(
                f"Symbol '{symbol}' not found in {module}. Did you mean one of these?\n{listing}"
            )
        return SymbolLookup(f"Symbol '{symbol}' not found in module '{module}'.")

    async def search_headers(self, module: str, symbol: str, root: str) -> str | None:
        """Return the formatted header hit for symbol, or None if there is none."""
        try:
            output = await self._providers.header_search.search_context(symbol, root)
        except ProviderError as e:
            logger.warning("Header search failed for %s: %s", module, e)
            return None
        if not output:
            return None
        return format_header_hit(symbol, module, output, self._config.header_output_limit)
