"""GraphNode and NodeRow dataclasses for the node-link view of a document.

A GraphNode stands for one JSON value that the view draws as a box.  Its rows
are the lines inside the box: one per primitive field, plus one per nested
container recording the container's kind and size.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from json_node_patch.values import Address, JsonKind


@dataclass(frozen=True, slots=True)
class NodeRow:
    """A single line inside a graph node.

    Attributes:
        key:   Object key for fields; None for a bare primitive (array element
               or scalar root).
        value: The primitive value, or the child count for OBJECT/ARRAY rows.
        kind:  JsonKind of the value the row describes.
    """

    key: str | None
    value: Any
    kind: JsonKind


@dataclass(slots=True)
class GraphNode:
    """A node in the node-link view.

    Attributes:
        id:       Stable-per-build identifier ("1", "2", ...), in visit order.
        address:  Address of the JSON value this node displays.
        rows:     Lines drawn inside the node.  Must use
                  field(default_factory=list) so instances never share a list.
    """

    id: str
    address: Address
    rows: list[NodeRow] = field(default_factory=list)
