"""EditedTextInterpreter: turn user-entered text into a JSON value.

``interpret`` tries a strict JSON parse and falls back to the raw text, so
``42`` becomes the number 42 while ``hello`` (unquoted) stays the string
``"hello"``.  ``to_display`` goes the other way for filling edit widgets.
"""

from __future__ import annotations

import json
import math
from typing import Any

from json_node_patch.resolver import MISSING
from json_node_patch.values import JsonKind, kind_of

__all__ = ["interpret", "loads", "to_display", "to_field_text"]


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"non-standard JSON constant: {name}")


def _finite_float(literal: str) -> float:
    number = float(literal)
    if math.isinf(number):
        raise ValueError(f"number out of range: {literal}")
    return number


def loads(text: str) -> Any:
    """Standards-compliant ``json.loads``.

    Rejects ``NaN``/``Infinity`` and float literals that overflow to infinity,
    so everything it returns can be serialized again.

    Raises:
        ValueError: If ``text`` is not valid JSON.  ``json.JSONDecodeError``
            is a ``ValueError`` subclass.  Text nested deeper than the
            decoder's recursion limit is reported the same way.
    """
    try:
        return json.loads(
            text, parse_constant=_reject_constant, parse_float=_finite_float
        )
    except RecursionError as exc:
        msg = "document is nested too deeply"
        raise ValueError(msg) from exc


def interpret(text: str) -> Any:
    """Return ``text`` parsed as JSON, or ``text`` itself if it does not parse.

    Never raises: a parse failure is the normal "unquoted string" path.

    Examples::

        interpret("42")       # 42
        interpret("true")     # True
        interpret('"foo"')    # "foo"
        interpret("[1,2]")    # [1, 2]
        interpret("hello")    # "hello"
    """
    try:
        return loads(text)
    except ValueError:
        return text


def to_display(value: Any, indent: int | None = 2) -> str:
    """Render a resolved value for the free-text (Scalar) editing surface.

    Strings are shown verbatim, containers as indented JSON, other primitives
    as their JSON text.  ``null`` and ``MISSING`` render as the empty string.
    """
    if value is MISSING or value is None:
        return ""
    kind = kind_of(value)
    if kind is JsonKind.STRING:
        return value
    if kind in (JsonKind.OBJECT, JsonKind.ARRAY):
        return json.dumps(value, indent=indent, ensure_ascii=False)
    return json.dumps(value)


def to_field_text(value: Any) -> str:
    """Render one object field for the StructuredFields editing surface.

    Unlike ``to_display``, ``null`` renders as ``"null"`` so saving an
    untouched field writes ``null`` back.  Only ``MISSING`` is empty.
    """
    if value is MISSING:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)
