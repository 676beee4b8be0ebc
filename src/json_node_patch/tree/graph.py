"""GraphView: an in-memory GraphModel.

Holds the node list derived from the latest document text and the currently
selected node.  ``attach`` subscribes it to a MemoryStore so every
``set_document`` regenerates the nodes before the write returns.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from json_node_patch.interpreter import loads
from json_node_patch.rebinder import rebind
from json_node_patch.tree.builder import NodeBuilder
from json_node_patch.tree.nodes import GraphNode
from json_node_patch.values import Address, Segment

if TYPE_CHECKING:
    from json_node_patch.store import MemoryStore

__all__ = ["GraphView"]

logger = logging.getLogger(__name__)


class GraphView:
    """Node list plus selection, satisfying the GraphModel protocol.

    Regeneration replaces every node object, so a node reference held from
    before a write is stale afterwards.  Selection is NOT carried across a
    regeneration here; restoring it is NodeEditor's job.

    Args:
        builder: NodeBuilder used to flatten documents.  Defaults to a new one.
    """

    def __init__(self, builder: NodeBuilder | None = None) -> None:
        self._builder = builder if builder is not None else NodeBuilder()
        self._nodes: list[GraphNode] = []
        self._active: GraphNode | None = None

    @classmethod
    def from_store(cls, store: MemoryStore) -> GraphView:
        view = cls()
        view.attach(store)
        return view

    def attach(self, store: MemoryStore) -> None:
        """Regenerate now and after every write to ``store``."""
        store.subscribe(self.regenerate)
        self.regenerate(store.get_document())

    def regenerate(self, text: str) -> None:
        """Rebuild the node list from ``text``; invalid JSON yields no nodes."""
        try:
            self._nodes = self._builder.build(loads(text))
        except (ValueError, RecursionError):
            logger.debug("document is not valid JSON or too deep; graph cleared")
            self._nodes = []
        self._active = None

    # ------------------------------------------------------------------
    # GraphModel protocol surface
    # ------------------------------------------------------------------

    def list_nodes(self) -> Sequence[GraphNode]:
        return tuple(self._nodes)

    def get_active_address(self) -> Address | None:
        if self._active is None:
            return None
        return self._active.address

    def set_active_node(self, node: GraphNode | None) -> None:
        self._active = node

    # ------------------------------------------------------------------
    # Convenience
    # ------------------------------------------------------------------

    @property
    def active_node(self) -> GraphNode | None:
        return self._active

    def select(self, address: Sequence[Segment]) -> GraphNode | None:
        """Select the node at ``address``; returns it, or None if absent."""
        node = rebind(self._nodes, address)
        self._active = node
        return node
