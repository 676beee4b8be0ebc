"""Tagged-variant view of JSON values and the Address type.

Python's ``json`` module already maps JSON onto plain ``dict``/``list``/scalar
values.  This module classifies those values into an explicit ``JsonKind`` so
the classifier and patcher can branch on a closed set of cases instead of
probing types ad hoc.

Addresses are tuples of segments: ``str`` for object keys, non-negative ``int``
for array indices.  The empty tuple is the document root.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum, auto
from typing import Any

from json_node_patch.errors import InvalidAddressError

__all__ = [
    "CONTAINER_KINDS",
    "PRIMITIVE_KINDS",
    "Address",
    "JsonKind",
    "JsonValue",
    "Segment",
    "as_address",
    "is_container",
    "kind_of",
]

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None

Segment = str | int
Address = tuple[Segment, ...]


class JsonKind(StrEnum):
    """The six JSON value kinds.

    - NULL    -> "null"
    - BOOL    -> "bool"
    - NUMBER  -> "number"  : int or float (never bool)
    - STRING  -> "string"
    - ARRAY   -> "array"   : Python list
    - OBJECT  -> "object"  : Python dict
    """

    NULL = auto()
    BOOL = auto()
    NUMBER = auto()
    STRING = auto()
    ARRAY = auto()
    OBJECT = auto()


PRIMITIVE_KINDS = frozenset(
    {JsonKind.NULL, JsonKind.BOOL, JsonKind.NUMBER, JsonKind.STRING}
)
CONTAINER_KINDS = frozenset({JsonKind.ARRAY, JsonKind.OBJECT})


def kind_of(value: Any) -> JsonKind:
    """Return the ``JsonKind`` of a parsed JSON value.

    Raises:
        TypeError: If ``value`` is not something ``json.loads`` can produce.
    """
    # bool MUST be checked before int: bool subclasses int
    if isinstance(value, bool):
        return JsonKind.BOOL
    if value is None:
        return JsonKind.NULL
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, list):
        return JsonKind.ARRAY
    if isinstance(value, dict):
        return JsonKind.OBJECT
    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


def is_container(value: Any) -> bool:
    return isinstance(value, (dict, list))


def as_address(segments: Sequence[Segment]) -> Address:
    """Validate ``segments`` and return them as an ``Address`` tuple.

    Raises:
        InvalidAddressError: If a segment is a bool, a negative int, or not a
            str/int at all, or if ``segments`` is a bare string.
    """
    if isinstance(segments, (str, bytes)):
        msg = f"address must be a sequence of segments, got {segments!r}"
        raise InvalidAddressError(msg)
    address = tuple(segments)
    for position, segment in enumerate(address):
        if isinstance(segment, bool) or not isinstance(segment, (str, int)):
            msg = f"segment {position} must be str or int, got {segment!r}"
            raise InvalidAddressError(msg)
        if isinstance(segment, int) and segment < 0:
            msg = f"segment {position} must be a non-negative index, got {segment}"
            raise InvalidAddressError(msg)
    return address
