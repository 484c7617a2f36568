"""The four documentation tools and their dispatcher."""

from xcdocs.tools.dispatch import InvalidParamsError, ToolDispatcher
from xcdocs.tools.frameworks import list_frameworks
from xcdocs.tools.module_symbols import extract_module_symbols
from xcdocs.tools.search import DocumentationSearch, merge_results, run_discovery
from xcdocs.tools.symbols import SymbolLookup, SymbolResolver

__all__ = [
    "InvalidParamsError",
    "ToolDispatcher",
    "DocumentationSearch",
    "SymbolLookup",
    "SymbolResolver",
    "extract_module_symbols",
    "list_frameworks",
    "merge_results",
    "run_discovery",
]
