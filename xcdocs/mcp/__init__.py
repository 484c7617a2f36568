"""MCP (Model Context Protocol) server for Xcode documentation.

Usage:
    from xcdocs.mcp.bootstrap import build_server
    from xcdocs.mcp.server import run_stdio

    server = build_server(load_config())
    await run_stdio(server)

Submodules are imported directly; this package does not re-export them
because xcdocs.tools imports the tool definitions from here.
"""
