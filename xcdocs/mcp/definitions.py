"""Tool descriptors and result helpers for the xcdocs MCP server."""

from typing import Any

from xcdocs.config.schema import ServerConfig

# =============================================================================
# TOOLS
# =============================================================================

TOOLS = [
    {
        "name": "search_documentation",
        "description": (
            "Search Apple's developer documentation using Spotlight. Returns matching "
            "documentation entries for frameworks, classes, methods, and other symbols."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Search query (e.g., 'NSWindow', 'SwiftUI View', 'URLSession')",
                },
                "limit": {
                    "type": "integer",
                    "description": "Maximum number of results to return (default: 20)",
                    "default": 20,
                },
            },
            "required": ["query"],
        },
    },
    {
        "name": "get_symbol_info",
        "description": (
            "Get detailed information about a specific symbol from the SDK using "
            "swift-symbolgraph-extract. Returns the symbol's declaration, documentation, "
            "and relationships."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "module": {
                    "type": "string",
                    "description": "The module/framework name (e.g., 'Foundation', 'SwiftUI', 'AppKit')",
                },
                "symbol": {
                    "type": "string",
                    "description": "The symbol name to look up (e.g., 'URL', 'View', 'NSWindow')",
                },
            },
            "required": ["module", "symbol"],
        },
    },
    {
        "name": "list_frameworks",
        "description": "List available Apple frameworks/modules in the macOS SDK.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "filter": {
                    "type": "string",
                    "description": "Optional filter to match framework names (case-insensitive)",
                },
            },
        },
    },
    {
        "name": "extract_module_symbols",
        "description": (
            "Extract all public symbols from a module/framework. Useful for discovering "
            "available types, functions, and properties."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "module": {
                    "type": "string",
                    "description": "The module/framework name (e.g., 'Foundation', 'SwiftUI')",
                },
                "kind": {
                    "type": "string",
                    "description": (
                        "Filter by symbol kind: 'struct', 'class', 'enum', 'protocol', "
                        "'func', 'var', or 'all' (default: 'all')"
                    ),
                    "default": "all",
                },
            },
            "required": ["module"],
        },
    },
]


# =============================================================================
# HELPERS
# =============================================================================


def make_tool_result(text: str) -> dict[str, Any]:
    """Wrap tool output in the tools/call result envelope."""
    return {"content": [{"type": "text", "text": text}], "isError": False}


def get_capabilities() -> dict[str, Any]:
    """Server capabilities: tools only, with a fixed list."""
    return {"tools": {"listChanged": False}}


def get_server_info(config: ServerConfig) -> dict[str, Any]:
    return {"name": config.name, "version": config.version}


def negotiate_protocol_version(requested: str | None, config: ServerConfig) -> str:
    """Echo the client's protocol version if we support it, else our default."""
    if requested is not None and requested in config.supported_protocol_versions:
        return requested
    return config.protocol_version
