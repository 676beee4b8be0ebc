"""Collaborator Protocols consumed by NodeEditor.

Any object with conformant methods satisfies these protocols at runtime; no
inheritance is required.

Example::

    from json_node_patch.protocols import BufferSink

    class FileSink:
        def __init__(self, path):
            self.path = path

        def write(self, text: str) -> None:
            self.path.write_text(text)

    assert isinstance(FileSink(path), BufferSink)  # structural conformance
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from json_node_patch.values import Address, Segment

__all__ = ["AddressedNode", "BufferSink", "DocumentStore", "GraphModel"]


@runtime_checkable
class AddressedNode(Protocol):
    """Any graph node carrying the address of the value it displays."""

    @property
    def address(self) -> Sequence[Segment]: ...


@runtime_checkable
class DocumentStore(Protocol):
    """Owner of the canonical serialized document."""

    def get_document(self) -> str: ...

    def set_document(self, text: str) -> None: ...


@runtime_checkable
class GraphModel(Protocol):
    """Node-link view derived from the document.

    ``list_nodes`` must reflect the latest ``DocumentStore.set_document`` by
    the time that call returns.
    """

    def get_active_address(self) -> Address | None: ...

    def set_active_node(self, node: AddressedNode | None) -> None: ...

    def list_nodes(self) -> Sequence[AddressedNode]: ...


@runtime_checkable
class BufferSink(Protocol):
    """Best-effort mirror of the document into an editor buffer or file."""

    def write(self, text: str) -> None: ...
