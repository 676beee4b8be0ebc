"""PathResolver: locate the value (or its parent) at an Address.

Resolution never raises for a missing path.  Any step that indexes a
non-container, a missing key, or an out-of-range index yields ``MISSING``.
``None`` cannot be used for that purpose because JSON ``null`` parses to it.

Segment coercion:
- Objects accept ``int`` segments as their decimal string key.
- Arrays accept ``str`` segments spelled as a canonical decimal integer
  (``"0"``, ``"12"``; not ``"01"`` or ``"-1"``).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Final, Literal

from json_node_patch.values import Address, Segment, is_container

__all__ = ["MISSING", "Missing", "ResolvedParent", "resolve", "resolve_parent"]

_CANONICAL_INDEX = re.compile(r"(?:0|[1-9][0-9]*)")


class Missing(Enum):
    """Sentinel type for "no value at this address"."""

    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> Literal[False]:
        return False


MISSING: Final = Missing.MISSING


@dataclass(frozen=True, slots=True)
class ResolvedParent:
    """A writable handle on the container that holds the addressed value.

    Attributes:
        container: The parent ``dict`` or ``list`` (shared, not a copy).
        segment:   The final address segment, already coerced to the key type
                   the container uses (``str`` for dicts, ``int`` for lists).
    """

    container: dict[str, Any] | list[Any]
    segment: Segment


def object_key(segment: Segment) -> str:
    return segment if isinstance(segment, str) else str(segment)


def array_index(segment: Segment) -> int | None:
    """Return ``segment`` as a list index, or None if it cannot be one."""
    if isinstance(segment, bool):
        return None
    if isinstance(segment, int):
        return segment if segment >= 0 else None
    if _CANONICAL_INDEX.fullmatch(segment):
        return int(segment)
    return None


def _step(current: Any, segment: Segment) -> Any:
    if isinstance(current, dict):
        return current.get(object_key(segment), MISSING)
    if isinstance(current, list):
        index = array_index(segment)
        if index is None or index >= len(current):
            return MISSING
        return current[index]
    return MISSING


def resolve(document: Any, address: Address) -> Any:
    """Return the value at ``address`` inside ``document``, or ``MISSING``.

    Args:
        document: A parsed JSON value.
        address:  Segments to walk, left to right.  ``()`` is the root.

    Returns:
        The sub-value (shared with ``document``, not copied) or ``MISSING``.
    """
    current = document
    for segment in address:
        current = _step(current, segment)
        if current is MISSING:
            return MISSING
    return current


def resolve_parent(document: Any, address: Address) -> ResolvedParent | Missing:
    """Return the parent container and final segment for ``address``.

    Only the first ``len(address) - 1`` segments must exist; the final segment
    may name a key that is not there yet, or the index one past the end of an
    array (an append).  The root has no parent, so an empty address yields
    ``MISSING``.  A final segment that cannot index the parent at all (a
    non-numeric key, or an index beyond the end of a list) also yields
    ``MISSING``.
    """
    if not address:
        return MISSING

    container = resolve(document, address[:-1])
    if not is_container(container):
        return MISSING

    last = address[-1]
    if isinstance(container, dict):
        return ResolvedParent(container=container, segment=object_key(last))
    index = array_index(last)
    if index is None or index > len(container):
        return MISSING
    return ResolvedParent(container=container, segment=index)
