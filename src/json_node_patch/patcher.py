"""DocumentPatcher: replace or merge the value at an Address.

Two edit shapes are supported:

- ``ScalarEdit(text)``: the whole value at the address becomes
  ``interpret(text)``, whatever it was before.
- ``FieldsEdit(fields)``: each ``(key, text)`` pair is written into the object
  at the address as ``interpret(text)``.  Keys not in ``fields`` (including
  nested objects and arrays) are left alone.  If the current value is not an
  object it is replaced by a fresh object holding only ``fields``.

The patcher never mutates its input.  ``patch`` parses the document text
itself (or takes a private copy from a ``DocumentCache``), so a failure part
way through cannot leak a half-applied edit.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from json_node_patch.errors import MalformedDocumentError, UnresolvedAddressError
from json_node_patch.interpreter import interpret, loads
from json_node_patch.resolver import MISSING, resolve_parent
from json_node_patch.values import Address, JsonKind, kind_of

if TYPE_CHECKING:
    from json_node_patch.cache import DocumentCache

__all__ = ["Edit", "FieldsEdit", "ScalarEdit", "apply_to_value", "patch", "serialize"]


@dataclass(frozen=True, slots=True)
class ScalarEdit:
    """Replace the addressed value with ``interpret(text)``."""

    text: str


@dataclass(frozen=True, slots=True)
class FieldsEdit:
    """Overwrite the named fields of the addressed object.

    Attributes:
        fields: Field name to edited text.  Each text goes through
                ``interpret`` before it is written.
    """

    fields: Mapping[str, str] = field(default_factory=dict)


Edit = ScalarEdit | FieldsEdit


def _merge_fields(target: Any, fields: Mapping[str, str]) -> dict[str, Any]:
    """Write ``fields`` into ``target`` if it is an object, else build a new one."""
    if kind_of(target) is not JsonKind.OBJECT:
        target = {}
    for key, text in fields.items():
        target[key] = interpret(text)
    return target


def _edited_value(current: Any, edit: Edit) -> Any:
    if isinstance(edit, ScalarEdit):
        return interpret(edit.text)
    if isinstance(edit, FieldsEdit):
        return _merge_fields(None if current is MISSING else current, edit.fields)
    raise TypeError(f"Unsupported edit type: {type(edit)!r}")


def apply_to_value(document: Any, address: Address, edit: Edit) -> Any:
    """Apply ``edit`` at ``address`` inside ``document`` and return the new root.

    ``document`` is modified in place (for non-root addresses) so callers must
    pass a value they own.

    Raises:
        UnresolvedAddressError: If ``address`` is non-empty and its parent
            container cannot be reached, or its final index lies more than
            one past the end of an array.
        TypeError: If ``edit`` is neither a ScalarEdit nor a FieldsEdit.
    """
    if not address:
        return _edited_value(document, edit)

    parent = resolve_parent(document, address)
    if parent is MISSING:
        raise UnresolvedAddressError(address)

    container, segment = parent.container, parent.segment
    if isinstance(container, dict):
        container[segment] = _edited_value(container.get(segment, MISSING), edit)
        return document

    index = segment
    if index < len(container):
        container[index] = _edited_value(container[index], edit)
    else:
        # resolve_parent only admits the index one past the end
        container.append(_edited_value(MISSING, edit))
    return document


def serialize(value: Any, indent: int | None = 2) -> str:
    """Serialize a JSON value, keeping insertion order of object keys."""
    return json.dumps(value, indent=indent, ensure_ascii=False, allow_nan=False)


def patch(
    document: str,
    address: Address,
    edit: Edit,
    *,
    indent: int | None = 2,
    cache: DocumentCache | None = None,
) -> tuple[Any, str]:
    """Parse ``document``, apply ``edit`` at ``address`` and serialize the result.

    Args:
        document: Serialized JSON text of the whole document.
        address:  Where to apply the edit.  ``()`` targets the root.
        edit:     A ScalarEdit or FieldsEdit.
        indent:   Indentation passed to ``json.dumps``.
        cache:    Optional parsed-document cache; a private copy is taken
                  from it so cached values are never mutated.

    Returns:
        ``(new_value, new_text)``.

    Raises:
        MalformedDocumentError: If ``document`` is not valid JSON, or the
            patched value is nested too deeply to copy or serialize.
        UnresolvedAddressError: If a non-root parent cannot be reached.
    """
    if cache is not None:
        value = cache.load_copy(document)
    else:
        try:
            value = loads(document)
        except ValueError as exc:
            raise MalformedDocumentError(f"document is not valid JSON: {exc}") from exc

    new_value = apply_to_value(value, address, edit)
    try:
        text = serialize(new_value, indent=indent)
    except RecursionError as exc:
        msg = "document is nested too deeply to serialize"
        raise MalformedDocumentError(msg) from exc
    return new_value, text
