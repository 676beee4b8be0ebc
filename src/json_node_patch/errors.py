"""Exception types raised inside the patch pipeline.

All of them derive from ``NodePatchError`` (a ``ValueError``).  The public
``apply_edit`` entry point catches them and reports a ``PatchFailure`` instead
of raising.
"""

from __future__ import annotations

__all__ = [
    "InvalidAddressError",
    "MalformedDocumentError",
    "NodePatchError",
    "UnresolvedAddressError",
]


class NodePatchError(ValueError):
    """Base class for every error raised by json-node-patch."""


class MalformedDocumentError(NodePatchError):
    """The stored document text is not valid JSON."""


class UnresolvedAddressError(NodePatchError):
    """A non-root address whose parent container cannot be reached."""

    def __init__(self, address: tuple[object, ...]) -> None:
        self.address = address
        super().__init__(f"cannot resolve parent of address {list(address)!r}")


class InvalidAddressError(NodePatchError):
    """An address contains a segment that is neither a key nor an index."""
