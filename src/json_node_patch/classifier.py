"""ValueClassifier: decide the editing mode and extract editable fields."""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum, auto
from typing import Any

from json_node_patch.interpreter import to_field_text
from json_node_patch.resolver import MISSING
from json_node_patch.values import PRIMITIVE_KINDS, JsonKind, kind_of

__all__ = ["NAME_COLOR_KEYS", "EditMode", "FieldSet", "classify", "extract_fields"]

FieldSet = dict[str, str]

# Fixed field layout used by graph nodes that carry a label and a colour
NAME_COLOR_KEYS: tuple[str, ...] = ("name", "color")


class EditMode(StrEnum):
    """Which editing surface applies to a resolved value.

    - SCALAR            -> "scalar"            : free-text replacement
    - STRUCTURED_FIELDS -> "structured_fields" : per-field object edit
    """

    SCALAR = auto()
    STRUCTURED_FIELDS = auto()


def classify(value: Any) -> EditMode:
    """Return STRUCTURED_FIELDS for JSON objects and SCALAR for anything else.

    Arrays, primitives, ``null`` and ``MISSING`` are all SCALAR.
    """
    if value is MISSING:
        return EditMode.SCALAR
    if kind_of(value) is JsonKind.OBJECT:
        return EditMode.STRUCTURED_FIELDS
    return EditMode.SCALAR


def extract_fields(
    value: dict[str, Any],
    declared_keys: Sequence[str] | None = None,
) -> FieldSet:
    """Build the FieldSet for an object value.

    Args:
        value:         The resolved JSON object.
        declared_keys: When given, the FieldSet holds exactly these keys: a
                       missing key becomes ``""`` and a non-string value its
                       JSON text.  When None, every own key whose value is
                       null, a string, a number or a boolean is included and
                       object/array keys are left out.

    Returns:
        Mapping of field name to editable text, in declared or insertion order.
    """
    if declared_keys is not None:
        return {key: to_field_text(value.get(key, MISSING)) for key in declared_keys}

    return {
        key: to_field_text(item)
        for key, item in value.items()
        if kind_of(item) in PRIMITIVE_KINDS
    }
