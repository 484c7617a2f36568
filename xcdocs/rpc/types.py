"""JSON-RPC 2.0 message types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from xcdocs.rpc.values import JsonValue

JSONRPC_VERSION = "2.0"


@dataclass(frozen=True)
class StringId:
    value: str


@dataclass(frozen=True)
class IntId:
    value: int


@dataclass(frozen=True)
class NullId:
    """An explicit `"id": null`. Distinct from an absent id (a notification)."""


RequestId = Union[StringId, IntId, NullId]

NULL_ID = NullId()


@dataclass(frozen=True)
class ErrorObject:
    """JSON-RPC 2.0 error object.

    Attributes:
        code: Error code (see rpc.protocol for the reserved codes).
        message: Human-readable error message.
        data: Optional additional error data.
    """

    code: int
    message: str
    data: JsonValue | None = None


@dataclass(frozen=True)
class Request:
    """JSON-RPC 2.0 request.

    Attributes:
        jsonrpc: Protocol version, must be "2.0".
        method: Name of the method to invoke.
        params: Optional parameters for the method.
        id: Request identifier. None means the id was absent: a notification.
    """

    jsonrpc: str
    method: str
    params: JsonValue | None = None
    id: RequestId | None = None

    @property
    def is_notification(self) -> bool:
        return self.id is None


@dataclass(frozen=True)
class Response:
    """JSON-RPC 2.0 response.

    Attributes:
        jsonrpc: Protocol version, always "2.0".
        id: Request identifier from the original request (NullId if unknown).
        result: Result of the method call (mutually exclusive with error).
        error: Error object if the call failed (mutually exclusive with result).
    """

    jsonrpc: str
    id: RequestId
    result: JsonValue | None = None
    error: ErrorObject | None = None
