"""JSON-RPC 2.0 support for the xcdocs stdio server.

Provides the dynamic JSON value union, request ids, message types, and the
codec used by the MCP server to read newline-delimited requests from stdin
and write responses to stdout.
"""

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
from xcdocs.rpc.types import (
    NULL_ID,
    ErrorObject,
    IntId,
    NullId,
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
)

__all__ = [
    # Protocol
    "PARSE_ERROR",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "INVALID_PARAMS",
    "INTERNAL_ERROR",
    "ParseError",
    "InvalidRequestError",
    "parse_message",
    "decode_request",
    "make_error_response",
    "make_success_response",
    "serialize_response",
    # Types
    "NULL_ID",
    "ErrorObject",
    "IntId",
    "NullId",
    "Request",
    "RequestId",
    "Response",
    "StringId",
    # Values
    "JsonArray",
    "JsonBool",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonString",
    "JsonValue",
    "decode_value",
    "encode_value",
]
