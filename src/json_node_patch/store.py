"""MemoryStore: an observable in-memory DocumentStore."""

from __future__ import annotations

from collections.abc import Callable

__all__ = ["MemoryStore"]


class MemoryStore:
    """Holds the canonical document text and notifies subscribers on writes.

    Subscribers run synchronously inside ``set_document``, in subscription
    order, so anything derived from the document is fresh once the call
    returns.
    """

    def __init__(self, text: str = "{}") -> None:
        self._text = text
        self._listeners: list[Callable[[str], None]] = []
        self.writes = 0

    def get_document(self) -> str:
        return self._text

    def set_document(self, text: str) -> None:
        self._text = text
        self.writes += 1
        for listener in list(self._listeners):
            listener(text)

    def subscribe(self, listener: Callable[[str], None]) -> None:
        self._listeners.append(listener)
