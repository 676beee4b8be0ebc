"""SelectionRebinder: find the regenerated node for a previous address."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TypeVar

from json_node_patch.protocols import AddressedNode
from json_node_patch.values import Segment

__all__ = ["addresses_equal", "rebind"]

N = TypeVar("N", bound=AddressedNode)


def addresses_equal(a: Sequence[Segment], b: Sequence[Segment]) -> bool:
    """Segment-wise equality that also compares segment types.

    ``1`` and ``"1"`` differ, and ``True`` never equals ``1``.
    """
    if len(a) != len(b):
        return False
    return all(
        type(x) is type(y) and x == y for x, y in zip(a, b, strict=True)
    )


def rebind(nodes: Iterable[N], previous_address: Sequence[Segment]) -> N | None:
    """Return the first node whose address equals ``previous_address``.

    Returns None when no node matches (the address was removed or its
    container changed shape); the caller decides what "no selection" means.
    """
    for node in nodes:
        if addresses_equal(node.address, previous_address):
            return node
    return None
