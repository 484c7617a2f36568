"""xcdocs MCP server (stdio transport).

Reads newline-delimited JSON-RPC 2.0 from stdin and writes one line per
response (or batch of responses) to stdout. Lines are handled strictly one
at a time: each line's output is written and flushed before the next line
is read.

Methods:
- initialize, ping
- tools/list, tools/call
- notifications/* and initialized (never answered)
"""

from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Callable, Coroutine
from enum import Enum
from typing import Any, TextIO

from xcdocs.config.schema import Config
from xcdocs.mcp.definitions import (
    TOOLS,
    get_capabilities,
    get_server_info,
    negotiate_protocol_version,
)
from xcdocs.rpc.protocol import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    InvalidRequestError,
    ParseError,
    decode_request,
    make_error_response,
    make_success_response,
    parse_message,
    serialize_response,
)
from xcdocs.rpc.types import Request, Response
from xcdocs.rpc.values import JsonArray, JsonObject, JsonValue
from xcdocs.tools.dispatch import InvalidParamsError, ToolDispatcher

logger = logging.getLogger(__name__)

NOTIFICATION_PREFIX = "notifications/"

# Type alias for method handlers: params in, plain result data out
MethodHandler = Callable[[JsonValue | None], Coroutine[Any, Any, Any]]


class SessionState(Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"
    SERVING = "serving"


def is_notification_method(method: str) -> bool:
    return method.startswith(NOTIFICATION_PREFIX) or method == "initialized"


class MCPServer:
    """Protocol engine: turns input lines into responses.

    Holds no per-request state; the only thing that changes over a session
    is the lifecycle state.
    """

    def __init__(self, config: Config, dispatcher: ToolDispatcher) -> None:
        self._config = config
        self._dispatcher = dispatcher
        self._state = SessionState.UNINITIALIZED
        self._handlers: dict[str, MethodHandler] = {
            "initialize": self._handle_initialize,
            "ping": self._handle_ping,
            "tools/list": self._handle_tools_list,
            "tools/call": self._dispatcher.call,
        }

    @property
    def state(self) -> SessionState:
        return self._state

    async def process_line(self, line: str | bytes) -> Response | list[Response] | None:
        """Handle one input line.

        Returns:
            A single Response, a non-empty list of Responses for a batch, or
            None when nothing should be written.
        """
        try:
            message = parse_message(line)
        except ParseError as e:
            logger.debug("Unparseable line: %s", e)
            return make_error_response(None, PARSE_ERROR, f"Parse error: {e.message}")

        if isinstance(message, JsonArray):
            if not message.items:
                return make_error_response(None, INVALID_REQUEST, "Invalid Request")
            return await self._process_batch(message)

        return await self._process_single(message)

    async def _process_batch(self, batch: JsonArray) -> list[Response] | None:
        responses: list[Response] = []
        for element in batch.items:
            response = await self._process_single(element)
            if response is not None:
                responses.append(response)
        return responses or None

    async def _process_single(self, message: JsonValue) -> Response | None:
        try:
            request = decode_request(message)
        except InvalidRequestError as e:
            logger.debug("Invalid request: %s", e)
            return make_error_response(None, INVALID_REQUEST, "Invalid Request")
        return await self.handle_request(request)

    async def handle_request(self, request: Request) -> Response | None:
        """Dispatch a decoded request.

        Notifications (no id) are dispatched too, but never answered.
        """
        response = await self._dispatch(request)
        if request.is_notification:
            return None
        return response

    async def _dispatch(self, request: Request) -> Response | None:
        if is_notification_method(request.method):
            self._handle_notification(request.method)
            return None

        handler = self._handlers.get(request.method)
        if handler is None:
            return make_error_response(
                request.id, METHOD_NOT_FOUND, f"Method not found: {request.method}"
            )

        try:
            result = await handler(request.params)
        except InvalidParamsError as e:
            return make_error_response(request.id, INVALID_PARAMS, e.message)
        except Exception as e:
            logger.error(
                "Unexpected error handling '%s': %s", request.method, e, exc_info=True
            )
            return make_error_response(request.id, INTERNAL_ERROR, "Internal error")

        return make_success_response(request.id, result)

    def _handle_notification(self, method: str) -> None:
        if method in ("initialized", "notifications/initialized"):
            if self._state is SessionState.INITIALIZED:
                self._state = SessionState.SERVING
                logger.info("Client initialized, serving")
        else:
            logger.debug("Ignoring notification %s", method)

    async def _handle_initialize(self, params: JsonValue | None) -> dict[str, Any]:
        requested = params.get_str("protocolVersion") if isinstance(params, JsonObject) else None
        version = negotiate_protocol_version(requested, self._config.server)

        if self._state is SessionState.UNINITIALIZED:
            self._state = SessionState.INITIALIZED
        logger.info("Initialize: protocol version %s", version)

        return {
            "protocolVersion": version,
            "capabilities": get_capabilities(),
            "serverInfo": get_server_info(self._config.server),
        }

    async def _handle_ping(self, params: JsonValue | None) -> dict[str, Any]:
        return {}

    async def _handle_tools_list(self, params: JsonValue | None) -> dict[str, Any]:
        return {"tools": TOOLS}


async def run_stdio(
    server: MCPServer,
    reader: TextIO | None = None,
    writer: TextIO | None = None,
) -> None:
    """Main server loop - read lines from reader, write responses to writer.

    Defaults to stdin/stdout. Returns at EOF.
    """
    if reader is None:
        reader = sys.stdin
    if writer is None:
        writer = sys.stdout

    while True:
        # Read line (blocking, run in thread)
        line = await asyncio.to_thread(reader.readline)
        if not line:
            break
        if not line.strip():
            continue

        output = await server.process_line(line)
        if output is not None:
            writer.write(serialize_response(output) + "\n")
            writer.flush()

    logger.info("stdin closed, shutting down")
