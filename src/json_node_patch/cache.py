"""DocumentCache: LRU cache of parsed documents keyed by their text.

Every describe/save cycle starts by parsing the store's document text, and
the same text is typically parsed several times in a row (describe on
selection, save, describe again after the save).  ``DocumentCache`` keeps the
most recent parses in memory.  LRU eviction is silent.

Each ``DocumentCache`` instance owns its own ``LRUCache``; there is no
class-level shared state.

Example::

    from json_node_patch.cache import DocumentCache

    cache = DocumentCache(max_size=8)
    value = cache.load('{"a": 1}')        # parsed, cached
    again = cache.load('{"a": 1}')        # served from memory, same object
    mine = cache.load_copy('{"a": 1}')    # deep copy, safe to mutate
"""

from __future__ import annotations

import copy
import logging
from typing import Any

from cachetools import LRUCache

from json_node_patch.errors import MalformedDocumentError
from json_node_patch.interpreter import loads

__all__ = ["DocumentCache"]

logger = logging.getLogger(__name__)


class DocumentCache:
    """LRU-backed store of parsed JSON documents.

    Values returned by ``load`` are shared with the cache and must be treated
    as read-only.  Use ``load_copy`` when the value is going to be mutated.

    Args:
        max_size: Maximum number of parsed documents to hold.  Defaults to 16.
    """

    def __init__(self, max_size: int = 16) -> None:
        self._cache: LRUCache[str, Any] = LRUCache(maxsize=max_size)
        self.hits = 0
        self.misses = 0

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self, text: str) -> Any:
        """Return the parsed value of ``text`` (shared, read-only).

        Raises:
            MalformedDocumentError: If ``text`` is not valid JSON.  Failed
                parses are not cached.
        """
        try:
            value = self._cache[text]
        except KeyError:
            pass
        else:
            self.hits += 1
            return value

        self.misses += 1
        try:
            value = loads(text)
        except ValueError as exc:
            raise MalformedDocumentError(f"document is not valid JSON: {exc}") from exc
        self._cache[text] = value
        logger.debug("cached parsed document (%d chars)", len(text))
        return value

    def load_copy(self, text: str) -> Any:
        """Return a private deep copy of the parsed value of ``text``.

        Raises:
            MalformedDocumentError: If ``text`` is not valid JSON, or the
                parsed value is nested too deeply to copy.
        """
        value = self.load(text)
        try:
            return copy.deepcopy(value)
        except RecursionError as exc:
            msg = "document is nested too deeply to copy"
            raise MalformedDocumentError(msg) from exc

    def clear(self) -> None:
        self._cache.clear()
