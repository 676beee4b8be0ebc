"""NodeBuilder: flattens a JSON document into GraphNode objects.

Traversal is depth-first in document order:
- An object becomes one node whose rows are its fields.  Primitive fields are
  shown as-is; object/array fields get a summary row (kind + child count) and
  are expanded into their own child nodes.
- An array becomes an empty node, followed by one node per element.
- A primitive at the root or inside an array becomes a node with a single
  keyless row.

Node addresses are built during traversal: the root is ``()`` and each level
appends the key or index.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from json_node_patch.tree.nodes import GraphNode, NodeRow
from json_node_patch.values import CONTAINER_KINDS, Address, JsonKind, kind_of


@dataclass
class NodeBuilder:
    """Converts any valid JSON value into a flat list of GraphNodes.

    Example::

        builder = NodeBuilder()
        nodes = builder.build({"name": "Ada", "langs": ["en", "fr"]})
        # nodes[0]: address=(),            rows=[name="Ada", langs=<array 2>]
        # nodes[1]: address=("langs",),    rows=[]
        # nodes[2]: address=("langs", 0),  rows=["en"]
        # nodes[3]: address=("langs", 1),  rows=["fr"]
    """

    def build(self, value: Any) -> list[GraphNode]:
        """Return the nodes for ``value`` in depth-first document order.

        Raises:
            TypeError: If ``value`` contains something that is not JSON.
        """
        nodes: list[GraphNode] = []
        self._visit(value, (), nodes)
        return nodes

    def _new_node(self, address: Address, nodes: list[GraphNode]) -> GraphNode:
        node = GraphNode(id=str(len(nodes) + 1), address=address)
        nodes.append(node)
        return node

    def _visit(self, value: Any, address: Address, nodes: list[GraphNode]) -> None:
        kind = kind_of(value)

        if kind is JsonKind.OBJECT:
            self._visit_object(value, address, nodes)
            return

        if kind is JsonKind.ARRAY:
            self._new_node(address, nodes)
            for index, item in enumerate(value):
                self._visit(item, (*address, index), nodes)
            return

        node = self._new_node(address, nodes)
        node.rows.append(NodeRow(key=None, value=value, kind=kind))

    def _visit_object(
        self, obj: dict[str, Any], address: Address, nodes: list[GraphNode]
    ) -> None:
        node = self._new_node(address, nodes)
        nested: list[tuple[str, Any]] = []

        for key, item in obj.items():
            item_kind = kind_of(item)
            if item_kind in CONTAINER_KINDS:
                node.rows.append(NodeRow(key=key, value=len(item), kind=item_kind))
                nested.append((key, item))
            else:
                node.rows.append(NodeRow(key=key, value=item, kind=item_kind))

        # Children follow their parent so ids read top-down
        for key, item in nested:
            self._visit(item, (*address, key), nodes)
