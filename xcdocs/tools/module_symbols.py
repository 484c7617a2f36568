"""extract_module_symbols: public symbols of a module, grouped by kind."""

import logging

from xcdocs.core.errors import ProviderError, SymbolGraphError
from xcdocs.providers import Providers
from xcdocs.providers.base import SymbolRecord

logger = logging.getLogger(__name__)

KIND_ORDER = ("protocol", "class", "struct", "enum", "typealias", "func", "var", "other")
MAX_PER_KIND = 50

# Checked in order against the symbol-graph kind identifier
_KIND_PATTERNS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("struct", ("struct",)),
    ("class", ("class",)),
    ("enum", ("enum",)),
    ("protocol", ("protocol",)),
    ("func", ("func", "method")),
    ("var", ("var", "property")),
    ("typealias", ("typealias",)),
)


def simple_kind(kind_identifier: str) -> str:
    """Map an identifier such as `swift.type.property` to a short kind name."""
    for kind, patterns in _KIND_PATTERNS:
        if any(p in kind_identifier for p in patterns):
            return kind
    return "other"


def group_symbols(records: list[SymbolRecord], kind: str = "all") -> dict[str, list[str]]:
    grouped: dict[str, list[str]] = {}
    for record in records:
        short = simple_kind(record.kind_identifier)
        if kind != "all" and short != kind:
            continue
        grouped.setdefault(short, []).append(record.title)
    return grouped


def format_module_symbols(module: str, grouped: dict[str, list[str]]) -> str:
    lines = [f"# Symbols in {module}"]
    for kind in KIND_ORDER:
        titles = grouped.get(kind)
        if not titles:
            continue
        lines.append(f"\n## {kind.capitalize()}s ({len(titles)})")
        lines.append("\n".join(f"  - {title}" for title in sorted(titles)[:MAX_PER_KIND]))
        if len(titles) > MAX_PER_KIND:
            lines.append(f"  ... and {len(titles) - MAX_PER_KIND} more")
    return "\n".join(lines)


async def extract_module_symbols(providers: Providers, module: str, kind: str = "all") -> str:
    sdk_root = await providers.sdk.resolve()
    try:
        records = await providers.symbol_graphs.extract(module, sdk_root)
    except SymbolGraphError as e:
        logger.info("No symbol graph for %s: %s", module, e)
        return (
            f"Could not extract symbols from '{module}'. It may be an Objective-C only "
            "framework. Use get_symbol_info to search headers directly."
        )
    except ProviderError as e:
        logger.warning("Symbol extraction failed for %s: %s", module, e)
        return f"Error extracting module symbols: {e}"

    grouped = group_symbols(records, kind)
    if not grouped:
        return f"No symbols found in '{module}' matching kind '{kind}'."
    return format_module_symbols(module, grouped)
