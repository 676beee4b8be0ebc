"""Read-only text renderings: address labels and node-row fallbacks."""

from __future__ import annotations

import json
from collections.abc import Sequence

from json_node_patch.interpreter import to_field_text
from json_node_patch.tree.nodes import NodeRow
from json_node_patch.values import PRIMITIVE_KINDS, Segment

__all__ = ["format_address", "node_display"]


def format_address(address: Sequence[Segment] | None) -> str:
    """Render an address in JSONPath bracket notation.

    ``()`` or None gives ``$``; ``("customer", 0)`` gives ``$["customer"][0]``.
    Keys are JSON-quoted so quotes and backslashes inside them stay readable.
    """
    if not address:
        return "$"
    parts = [
        str(segment) if isinstance(segment, int) else json.dumps(segment, ensure_ascii=False)
        for segment in address
    ]
    return "$[" + "][".join(parts) + "]"


def node_display(rows: Sequence[NodeRow] | None, indent: int | None = 2) -> str:
    """Summarize a graph node from its rows alone.

    Used when the document itself cannot be consulted.  Nested object/array
    rows are dropped, so the result only shows the node's own primitives:

    - no rows                 -> ``{}``
    - a single row, no key    -> that value as text (an empty key counts as none)
    - anything else           -> JSON object of the keyed primitive rows
    """
    if not rows:
        return "{}"
    if len(rows) == 1 and not rows[0].key:
        return to_field_text(rows[0].value)

    obj = {
        row.key: row.value
        for row in rows
        if row.key and row.kind in PRIMITIVE_KINDS
    }
    return json.dumps(obj, indent=indent, ensure_ascii=False)
