"""Tree subpackage: a reference graph model for json-node-patch.

Re-exports the public API for the tree module:
- NodeRow: one key/value line shown inside a graph node
- GraphNode: dataclass for a node of the node-link view, carrying its Address
- NodeBuilder: flattens a JSON document into GraphNode objects
- GraphView: in-memory GraphModel that regenerates on every store write
"""

from json_node_patch.tree.builder import NodeBuilder
from json_node_patch.tree.graph import GraphView
from json_node_patch.tree.nodes import GraphNode, NodeRow

__all__ = ["GraphNode", "GraphView", "NodeBuilder", "NodeRow"]
