"""xcdocs: Apple SDK documentation lookup over the Model Context Protocol.

Runs as a stdio MCP server exposing four tools backed by Spotlight (mdfind),
grep over SDK headers, and swift-symbolgraph-extract:

    search_documentation    ranked documentation/header search
    get_symbol_info         declaration and docs for one symbol
    list_frameworks         frameworks available in the active SDK
    extract_module_symbols  public symbols of a module, grouped by kind

Usage:
    python -m xcdocs
"""

__version__ = "1.0.0"
