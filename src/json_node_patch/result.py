"""Result types returned by apply_edit, describe and NodeEditor.

Failures are reported as values, never raised: callers branch on ``ok``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

from json_node_patch.classifier import EditMode, FieldSet

__all__ = [
    "Description",
    "FailureKind",
    "PatchFailure",
    "PatchResult",
    "PatchSuccess",
    "SaveOutcome",
]


class FailureKind(StrEnum):
    """Why an edit was rejected.

    - MALFORMED_DOCUMENT -> the stored text is not valid JSON
    - UNRESOLVED_ADDRESS -> a non-root address whose parent does not exist
    - INVALID_ADDRESS    -> a segment that is neither a key nor an index
    - NO_SELECTION       -> NodeEditor had no active address to edit
    """

    MALFORMED_DOCUMENT = auto()
    UNRESOLVED_ADDRESS = auto()
    INVALID_ADDRESS = auto()
    NO_SELECTION = auto()


@dataclass(frozen=True, slots=True)
class PatchSuccess:
    """A fully applied edit.

    Attributes:
        document: Serialized text of the new document.
        value:    The new document as a parsed JSON value.
    """

    document: str
    value: Any

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class PatchFailure:
    """A rejected edit.  The original document is unchanged."""

    kind: FailureKind
    message: str

    @property
    def ok(self) -> bool:
        return False


PatchResult = PatchSuccess | PatchFailure


@dataclass(frozen=True, slots=True)
class Description:
    """What the edit surface should show for one address.

    Attributes:
        mode:     SCALAR or STRUCTURED_FIELDS.
        display:  Text for the free-text editor (or the read-only view).
        fields:   FieldSet for STRUCTURED_FIELDS mode, None for SCALAR.
        resolved: False when the document could not be parsed or the address
                  did not resolve and ``display`` is a fallback.
    """

    mode: EditMode
    display: str
    fields: FieldSet | None = None
    resolved: bool = True


@dataclass(frozen=True, slots=True)
class SaveOutcome:
    """Result of NodeEditor.apply_edit.

    Attributes:
        result:        The PatchSuccess or PatchFailure from the core.
        description:   Edit surface re-derived from the new document, or None
                       when the edit failed.
        rebound_node:  Graph node re-selected after regeneration, or None.
        sink_error:    Exception raised by the buffer sink after every retry,
                       or None.  The store update stands either way.
    """

    result: PatchResult
    description: Description | None = None
    rebound_node: Any = None
    sink_error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.result.ok

    @property
    def document_updated(self) -> bool:
        return self.result.ok

    @property
    def sink_updated(self) -> bool:
        return self.result.ok and self.sink_error is None
