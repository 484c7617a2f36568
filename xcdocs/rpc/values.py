"""Dynamic JSON values.

Any JSON value is represented as one of six frozen variants:

    JsonNull | JsonBool | JsonNumber | JsonString | JsonArray | JsonObject

decode_value() turns the output of json.loads into this union, trying the
variants in a fixed order (bool, integer, float, string, array, map) so that
`true` is never taken for the number 1. encode_value() is its inverse:
encode_value(decode_value(x)) == x for every JSON value x.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Union

from xcdocs.core.errors import XcdocsError


class ValueDecodeError(XcdocsError):
    """Raised when a native value has no JSON representation."""


@dataclass(frozen=True)
class JsonNull:
    """JSON null."""


@dataclass(frozen=True)
class JsonBool:
    value: bool


@dataclass(frozen=True)
class JsonNumber:
    """JSON number. Integers stay `int` and floats stay `float`."""

    value: int | float


@dataclass(frozen=True)
class JsonString:
    value: str


@dataclass(frozen=True)
class JsonArray:
    items: tuple[JsonValue, ...] = ()

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class JsonObject:
    """JSON object. Key order carries no meaning."""

    members: dict[str, JsonValue] = field(default_factory=dict)

    def get(self, key: str) -> JsonValue | None:
        """Return the member value, or None if the key is absent."""
        return self.members.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self.members

    def get_str(self, key: str) -> str | None:
        """Return the member as a str, or None if absent or not a string."""
        value = self.members.get(key)
        return value.value if isinstance(value, JsonString) else None

    def get_int(self, key: str) -> int | None:
        """Return the member as an int, or None if absent or not an integer."""
        value = self.members.get(key)
        if isinstance(value, JsonNumber) and isinstance(value.value, int):
            return value.value
        return None

    def get_object(self, key: str) -> JsonObject | None:
        """Return the member as a JsonObject, or None if absent or not an object."""
        value = self.members.get(key)
        return value if isinstance(value, JsonObject) else None


JsonValue = Union[JsonNull, JsonBool, JsonNumber, JsonString, JsonArray, JsonObject]

JSON_NULL = JsonNull()


def decode_value(raw: Any) -> JsonValue:
    """Convert a native value (as produced by json.loads) into a JsonValue.

    Raises:
        ValueDecodeError: If raw (or anything nested in it) is not a JSON type.
    """
    if raw is None:
        return JSON_NULL
    # bool is checked before int: in Python, bool is a subclass of int
    if isinstance(raw, bool):
        return JsonBool(raw)
    if isinstance(raw, int):
        return JsonNumber(raw)
    if isinstance(raw, float):
        return JsonNumber(raw)
    if isinstance(raw, str):
        return JsonString(raw)
    if isinstance(raw, (list, tuple)):
        return JsonArray(tuple(decode_value(item) for item in raw))
    if isinstance(raw, dict):
        members: dict[str, JsonValue] = {}
        for key, item in raw.items():
            if not isinstance(key, str):
                raise ValueDecodeError(f"object keys must be strings, got: {type(key).__name__}")
            members[key] = decode_value(item)
        return JsonObject(members)
    raise ValueDecodeError(f"not a JSON value: {type(raw).__name__}")


def encode_value(value: JsonValue) -> Any:
    """Convert a JsonValue back into plain Python data for json.dumps."""
    if isinstance(value, JsonNull):
        return None
    if isinstance(value, (JsonBool, JsonNumber, JsonString)):
        return value.value
    if isinstance(value, JsonArray):
        return [encode_value(item) for item in value.items]
    if isinstance(value, JsonObject):
        return {key: encode_value(item) for key, item in value.members.items()}
    raise ValueDecodeError(f"not a JsonValue: {type(value).__name__}")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse_json(text: str | bytes) -> JsonValue:
    """Parse JSON text into a JsonValue.

    NaN and Infinity, which json.loads accepts by default, are rejected.

    Raises:
        ValueError: If the text is not valid JSON (json.JSONDecodeError is a ValueError).
    """
    return decode_value(json.loads(text, parse_constant=_reject_constant))
