"""JSON node patch - path-addressed JSON document editing with re-selection."""

from __future__ import annotations

from json_node_patch.api import apply_edit, describe
from json_node_patch.classifier import (
    NAME_COLOR_KEYS,
    EditMode,
    classify,
    extract_fields,
)
from json_node_patch.config import PatcherConfig
from json_node_patch.display import format_address
from json_node_patch.editor import NodeEditor
from json_node_patch.interpreter import interpret
from json_node_patch.patcher import FieldsEdit, ScalarEdit
from json_node_patch.rebinder import rebind
from json_node_patch.resolver import MISSING, resolve, resolve_parent
from json_node_patch.result import (
    Description,
    FailureKind,
    PatchFailure,
    PatchSuccess,
    SaveOutcome,
)

__version__: str = "0.1.0"
__all__: list[str] = [
    "MISSING",
    "NAME_COLOR_KEYS",
    "Description",
    "EditMode",
    "FailureKind",
    "FieldsEdit",
    "NodeEditor",
    "PatchFailure",
    "PatchSuccess",
    "PatcherConfig",
    "SaveOutcome",
    "ScalarEdit",
    "apply_edit",
    "classify",
    "describe",
    "extract_fields",
    "format_address",
    "interpret",
    "rebind",
    "resolve",
    "resolve_parent",
]
