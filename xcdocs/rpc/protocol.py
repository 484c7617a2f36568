"""JSON-RPC 2.0 protocol parsing and serialization."""

from __future__ import annotations

import json
from typing import Any

from xcdocs.core.errors import XcdocsError
from xcdocs.rpc.types import (
    JSONRPC_VERSION,
    NULL_ID,
    ErrorObject,
    IntId,
    Request,
    RequestId,
    Response,
    StringId,
)
from xcdocs.rpc.values import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
    decode_value,
    encode_value,
    parse_json,
)


class ParseError(XcdocsError):
    """Raised when an input line is not valid JSON."""


class InvalidRequestError(XcdocsError):
    """Raised when valid JSON is not a well-formed JSON-RPC message."""


# JSON-RPC 2.0 error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


def parse_message(line: str | bytes) -> JsonValue:
    """Parse one input line into a JsonValue.

    Raises:
        ParseError: If the line is not valid JSON, or nests too deeply to decode.
    """
    try:
        return parse_json(line)
    except ValueError as e:
        raise ParseError(f"Invalid JSON: {e}") from e
    except RecursionError:
        raise ParseError("Invalid JSON: nesting too deep") from None


def decode_request_id(value: JsonValue) -> RequestId:
    """Decode a request id: integer, string, or null.

    Raises:
        InvalidRequestError: For any other JSON type (bool, float, array, object).
    """
    if isinstance(value, JsonNumber) and isinstance(value.value, int):
        return IntId(value.value)
    if isinstance(value, JsonString):
        return StringId(value.value)
    if isinstance(value, JsonNull):
        return NULL_ID
    raise InvalidRequestError(
        f"id must be string, integer, or null, got: {type(value).__name__}"
    )


def encode_request_id(request_id: RequestId) -> str | int | None:
    if isinstance(request_id, (StringId, IntId)):
        return request_id.value
    return None


def decode_request(value: JsonValue) -> Request:
    """Decode a single JSON-RPC 2.0 request object.

    Args:
        value: A decoded JSON value (one message, or one batch element).

    Returns:
        A Request. Its id is None when the message carries no "id" member.

    Raises:
        InvalidRequestError: If the value is not a well-formed request object.
    """
    if not isinstance(value, JsonObject):
        raise InvalidRequestError("Request must be a JSON object")

    jsonrpc = value.get_str("jsonrpc")
    if jsonrpc != JSONRPC_VERSION:
        raise InvalidRequestError(f"jsonrpc must be '2.0', got: {jsonrpc!r}")

    method = value.get_str("method")
    if method is None:
        raise InvalidRequestError("method must be a string")

    request_id: RequestId | None = None
    if "id" in value:
        request_id = decode_request_id(value.members["id"])

    return Request(
        jsonrpc=jsonrpc,
        method=method,
        params=value.get("params"),
        id=request_id,
    )


def encode_response(response: Response) -> dict[str, Any]:
    """Convert a Response into plain data ready for json.dumps."""
    data: dict[str, Any] = {
        "jsonrpc": response.jsonrpc,
        "id": encode_request_id(response.id),
    }

    if response.error is not None:
        error: dict[str, Any] = {
            "code": response.error.code,
            "message": response.error.message,
        }
        if response.error.data is not None:
            error["data"] = encode_value(response.error.data)
        data["error"] = error
    else:
        data["result"] = encode_value(response.result) if response.result is not None else None

    return data


def serialize_response(response: Response | list[Response]) -> str:
    """Serialize a Response, or a batch of them, to a single JSON line.

    Returns:
        A single line of JSON text (no trailing newline).
    """
    if isinstance(response, list):
        payload: Any = [encode_response(r) for r in response]
    else:
        payload = encode_response(response)
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def make_error_response(
    request_id: RequestId | None,
    code: int,
    message: str,
    data: Any = None,
) -> Response:
    """Create an error response.

    Args:
        request_id: The id from the original request (None is sent as null).
        code: JSON-RPC error code.
        message: Human-readable error message.
        data: Optional additional error data (plain Python or JsonValue).

    Returns:
        A Response with the error field populated.
    """
    error_data: JsonValue | None = None
    if data is not None:
        error_data = data if _is_json_value(data) else decode_value(data)

    return Response(
        jsonrpc=JSONRPC_VERSION,
        id=request_id if request_id is not None else NULL_ID,
        error=ErrorObject(code=code, message=message, data=error_data),
    )


def make_success_response(request_id: RequestId | None, result: Any) -> Response:
    """Create a success response.

    Args:
        request_id: The id from the original request.
        result: The result of the method call (plain Python or JsonValue).

    Returns:
        A Response with the result field populated.
    """
    return Response(
        jsonrpc=JSONRPC_VERSION,
        id=request_id if request_id is not None else NULL_ID,
        result=result if _is_json_value(result) else decode_value(result),
    )


def _is_json_value(value: Any) -> bool:
    return isinstance(value, (JsonNull, JsonBool, JsonNumber, JsonString, JsonArray, JsonObject))
