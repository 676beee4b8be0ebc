"""Public API functions for json-node-patch.

This module provides the two pure entry points: ``apply_edit`` and
``describe``.  Both take the document text explicitly and return a value;
neither touches a store.  Committing the new document is the caller's job
(see ``NodeEditor`` for a ready-made wiring).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from json_node_patch.classifier import EditMode, classify, extract_fields
from json_node_patch.config import PatcherConfig
from json_node_patch.errors import (
    InvalidAddressError,
    MalformedDocumentError,
    NodePatchError,
    UnresolvedAddressError,
)
from json_node_patch.interpreter import loads, to_display
from json_node_patch.patcher import Edit, patch
from json_node_patch.resolver import MISSING, resolve
from json_node_patch.result import (
    Description,
    FailureKind,
    PatchFailure,
    PatchResult,
    PatchSuccess,
)
from json_node_patch.values import Segment, as_address

if TYPE_CHECKING:
    from json_node_patch.cache import DocumentCache

__all__ = ["apply_edit", "describe"]

logger = logging.getLogger(__name__)

_FAILURE_KINDS: dict[type[NodePatchError], FailureKind] = {
    MalformedDocumentError: FailureKind.MALFORMED_DOCUMENT,
    UnresolvedAddressError: FailureKind.UNRESOLVED_ADDRESS,
    InvalidAddressError: FailureKind.INVALID_ADDRESS,
}


def apply_edit(
    document: str,
    address: Sequence[Segment],
    edit: Edit,
    config: PatcherConfig | None = None,
    cache: DocumentCache | None = None,
) -> PatchResult:
    """Apply one edit to a serialized document.

    The edit is all-or-nothing: on failure ``document`` is simply not
    replaced and nothing is raised.

    Args:
        document: Serialized JSON text of the whole document.
        address:  Where to apply the edit.  ``[]`` targets the root.
        edit:     ``ScalarEdit(text)`` or ``FieldsEdit(fields)``.
        config:   Serialization settings.  Defaults to ``PatcherConfig()``.
        cache:    Optional DocumentCache to parse through.

    Returns:
        ``PatchSuccess(document, value)`` or ``PatchFailure(kind, message)``.
    """
    config = config if config is not None else PatcherConfig()
    try:
        target = as_address(address)
        value, text = patch(document, target, edit, indent=config.indent, cache=cache)
    except NodePatchError as exc:
        kind = _FAILURE_KINDS[type(exc)]
        logger.warning("edit rejected (%s): %s", kind, exc)
        return PatchFailure(kind=kind, message=str(exc))

    logger.debug("edit applied at %r (%s)", list(target), type(edit).__name__)
    return PatchSuccess(document=text, value=value)


def describe(
    document: str,
    address: Sequence[Segment],
    declared_keys: Sequence[str] | None = None,
    fallback: str | None = None,
    cache: DocumentCache | None = None,
    indent: int | None = 2,
) -> Description:
    """Describe the edit surface for the value at ``address``.

    Args:
        document:      Serialized JSON text of the whole document.
        address:       Address of the value being edited.
        declared_keys: Fixed FieldSet keys for object values (e.g.
                       ``NAME_COLOR_KEYS``); None collects every primitive key.
        fallback:      Display text to use when the document cannot be parsed.
        cache:         Optional DocumentCache to parse through.
        indent:        Indentation for container displays.

    Returns:
        A Description.  Unparseable documents and unresolved addresses give a
        SCALAR description with ``resolved=False``.
    """
    try:
        target = as_address(address)
        value: Any = cache.load(document) if cache is not None else loads(document)
    except ValueError:
        # covers MalformedDocumentError and InvalidAddressError
        logger.debug("describe fell back for address %r", address)
        return _unresolved(fallback)

    current = resolve(value, target)
    mode = classify(current)
    try:
        display = to_display(current, indent=indent)
    except RecursionError:
        logger.debug("value at %r is nested too deeply to display", list(target))
        return _unresolved(fallback)

    if mode is EditMode.STRUCTURED_FIELDS:
        return Description(
            mode=mode,
            display=display,
            fields=extract_fields(current, declared_keys),
        )
    return Description(mode=mode, display=display, resolved=current is not MISSING)


def _unresolved(fallback: str | None) -> Description:
    return Description(
        mode=EditMode.SCALAR,
        display=fallback if fallback is not None else "",
        resolved=False,
    )
