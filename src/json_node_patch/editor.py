"""NodeEditor: wires the pure patch core to a store, a graph and a sink.

This is the stateful layer between the pure ``apply_edit``/``describe``
functions and the application that owns the document.

Save sequence:
1. Read the active address from the graph and the document from the store.
2. ``apply_edit`` the edit.  On failure, stop: the store is never written.
3. Commit the new text with a single ``store.set_document`` call (which
   regenerates the graph).
4. Mirror the text into the buffer sink, retried via ``tenacity``.  A sink
   failure is reported in the outcome, never rolled back.
5. Re-select the node with the same address in the regenerated graph, or
   clear the selection when there is none.
6. Re-describe the edit surface from the new document.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from tenacity import retry, stop_after_attempt, wait_fixed

from json_node_patch.api import apply_edit, describe
from json_node_patch.cache import DocumentCache
from json_node_patch.classifier import EditMode
from json_node_patch.config import PatcherConfig
from json_node_patch.display import node_display
from json_node_patch.patcher import Edit
from json_node_patch.protocols import BufferSink, DocumentStore, GraphModel
from json_node_patch.rebinder import rebind
from json_node_patch.result import (
    Description,
    FailureKind,
    PatchFailure,
    SaveOutcome,
)
from json_node_patch.values import Segment

__all__ = ["NodeEditor"]

logger = logging.getLogger(__name__)


class NodeEditor:
    """Edit session for the graph's currently selected node.

    Each NodeEditor owns its own DocumentCache; two editors never share
    parsed documents.

    Example::

        from json_node_patch import FieldsEdit, NodeEditor
        from json_node_patch.store import MemoryStore
        from json_node_patch.tree import GraphView

        store = MemoryStore('{"user": {"name": "Ada", "age": 36}}')
        graph = GraphView.from_store(store)
        graph.select(["user"])

        editor = NodeEditor(store, graph)
        editor.describe().fields          # {"name": "Ada", "age": "36"}
        outcome = editor.apply_edit(FieldsEdit({"age": "37"}))
        outcome.ok                        # True
    """

    def __init__(
        self,
        store: DocumentStore,
        graph: GraphModel,
        sink: BufferSink | None = None,
        config: PatcherConfig | None = None,
    ) -> None:
        """Initialise the editor.

        Args:
            store:  Owner of the serialized document.
            graph:  Node-link model providing and receiving the selection.
            sink:   Optional buffer to mirror every saved document into.
            config: Serialization, FieldSet and retry settings.  Defaults to
                    ``PatcherConfig()``.
        """
        self._config: PatcherConfig = config if config is not None else PatcherConfig()
        self._store = store
        self._graph = graph
        self._sink = sink
        self._cache = DocumentCache(max_size=self._config.cache_size)

        _retry = retry(
            stop=stop_after_attempt(self._config.sink_attempts),
            wait=wait_fixed(self._config.sink_retry_wait),
            reraise=True,
        )
        self._write_sink = _retry(self._raw_write)

    @property
    def config(self) -> PatcherConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def describe(self) -> Description:
        """Describe the edit surface for the graph's active node.

        With no selection the surface is an empty, unresolved SCALAR editor.
        """
        address = self._graph.get_active_address()
        if address is None:
            return Description(mode=EditMode.SCALAR, display="", resolved=False)
        return self._describe(address)

    def apply_edit(self, edit: Edit) -> SaveOutcome:
        """Apply ``edit`` to the active node and commit the result.

        Returns:
            A SaveOutcome.  When ``ok`` is False the store, the sink and the
            selection were left untouched.
        """
        address = self._graph.get_active_address()
        if address is None:
            failure = PatchFailure(
                kind=FailureKind.NO_SELECTION, message="no node is selected"
            )
            logger.warning("edit rejected: %s", failure.message)
            return SaveOutcome(result=failure)

        result = apply_edit(
            self._store.get_document(),
            address,
            edit,
            config=self._config,
            cache=self._cache,
        )
        if not result.ok:
            return SaveOutcome(result=result)

        self._store.set_document(result.document)
        sink_error = self._mirror(result.document)

        node = rebind(self._graph.list_nodes(), address)
        self._graph.set_active_node(node)
        if node is None:
            logger.info("address %r not found after save; selection cleared", address)

        return SaveOutcome(
            result=result,
            description=self._describe(address),
            rebound_node=node,
            sink_error=sink_error,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _describe(self, address: Sequence[Segment]) -> Description:
        return describe(
            self._store.get_document(),
            address,
            declared_keys=self._config.declared_keys,
            fallback=self._fallback_display(address),
            cache=self._cache,
            indent=self._config.indent,
        )

    def _fallback_display(self, address: Sequence[Segment]) -> str:
        node: Any = rebind(self._graph.list_nodes(), address)
        return node_display(getattr(node, "rows", None), indent=self._config.indent)

    def _raw_write(self, sink: BufferSink, text: str) -> None:
        sink.write(text)

    def _mirror(self, text: str) -> BaseException | None:
        """Write ``text`` to the sink; return the final error instead of raising."""
        if self._sink is None:
            return None
        try:
            self._write_sink(self._sink, text)
        except Exception as exc:
            logger.warning(
                "buffer sink failed after %d attempt(s): %s",
                self._config.sink_attempts,
                exc,
            )
            return exc
        return None
