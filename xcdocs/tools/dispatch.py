"""tools/call dispatch.

ToolDispatcher validates the call parameters and tool arguments, runs the
tool, and wraps its text in the tool-call envelope. Every invocation error
is raised as InvalidParamsError before any provider runs; tool bodies report
provider failures as text instead of raising.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Coroutine
from typing import Any

from xcdocs.config.schema import Config
from xcdocs.core.errors import XcdocsError
from xcdocs.mcp.definitions import make_tool_result
from xcdocs.providers import Providers
from xcdocs.rpc.values import JsonObject, JsonValue
from xcdocs.tools.frameworks import list_frameworks
from xcdocs.tools.module_symbols import extract_module_symbols
from xcdocs.tools.search import DocumentationSearch
from xcdocs.tools.symbols import SymbolResolver

logger = logging.getLogger(__name__)

# Type alias for tool handlers: validated arguments in, text out
ToolHandler = Callable[[JsonObject], Coroutine[Any, Any, str]]


class InvalidParamsError(XcdocsError):
    """Raised when tools/call parameters or tool arguments are invalid."""


def _required_str(arguments: JsonObject, name: str) -> str:
    value = arguments.get_str(name)
    if not value:
        raise InvalidParamsError(f"Missing required parameter: {name}")
    return value


class ToolDispatcher:
    """Routes tools/call requests to the four documentation tools."""

    def __init__(self, providers: Providers, config: Config) -> None:
        self._providers = providers
        self._config = config
        self._search = DocumentationSearch(providers, config.search)
        self._resolver = SymbolResolver(providers, config.search)
        self._handlers: dict[str, ToolHandler] = {
            "search_documentation": self._search_documentation,
            "get_symbol_info": self._get_symbol_info,
            "list_frameworks": self._list_frameworks,
            "extract_module_symbols": self._extract_module_symbols,
        }

    async def call(self, params: JsonValue | None) -> dict[str, Any]:
        """Run a tool from tools/call params and return the tool-call envelope.

        Raises:
            InvalidParamsError: If params is malformed, the tool is unknown,
                or a required argument is missing.
        """
        if not isinstance(params, JsonObject):
            raise InvalidParamsError("Invalid params")
        name = params.get_str("name")
        arguments = params.get_object("arguments")
        if name is None or arguments is None:
            raise InvalidParamsError("Invalid params")

        handler = self._handlers.get(name)
        if handler is None:
            raise InvalidParamsError(f"Unknown tool: {name}")

        logger.debug("Calling tool %s", name)
        text = await handler(arguments)
        return make_tool_result(text)

    async def _search_documentation(self, arguments: JsonObject) -> str:
        query = _required_str(arguments, "query")
        limit = arguments.get_int("limit")
        if limit is None:
            limit = self._config.search.default_limit
        return await self._search.search(query, max(limit, 1))

    async def _get_symbol_info(self, arguments: JsonObject) -> str:
        module = _required_str(arguments, "module")
        symbol = _required_str(arguments, "symbol")
        return await self._resolver.get_symbol_info(module, symbol)

    async def _list_frameworks(self, arguments: JsonObject) -> str:
        return await list_frameworks(self._providers, arguments.get_str("filter"))

    async def _extract_module_symbols(self, arguments: JsonObject) -> str:
        module = _required_str(arguments, "module")
        kind = arguments.get_str("kind") or "all"
        return await extract_module_symbols(self._providers, module, kind)
