"""Unit tests for the public API functions: apply_edit and describe."""

from __future__ import annotations

import json
import logging

import pytest

from json_node_patch import (
    NAME_COLOR_KEYS,
    Description,
    EditMode,
    FailureKind,
    FieldsEdit,
    PatcherConfig,
    PatchFailure,
    PatchSuccess,
    ScalarEdit,
    apply_edit,
    describe,
)
from json_node_patch.cache import DocumentCache

# ---------------------------------------------------------------------------
# apply_edit
# ---------------------------------------------------------------------------


class TestApplyEdit:
    def test_success_carries_text_and_value(self) -> None:
        result = apply_edit('{"a": {"x": 1, "y": [1, 2]}}', ["a"], FieldsEdit({"x": "5"}))
        assert isinstance(result, PatchSuccess)
        assert result.ok
        assert result.value == {"a": {"x": 5, "y": [1, 2]}}
        assert json.loads(result.document) == result.value

    def test_default_indent_is_two(self) -> None:
        result = apply_edit('{"a": 1}', ["a"], ScalarEdit("2"))
        assert isinstance(result, PatchSuccess)
        assert result.document == '{\n  "a": 2\n}'

    def test_config_indent(self) -> None:
        result = apply_edit(
            '{"a": 1}', ["a"], ScalarEdit("2"), config=PatcherConfig(indent=None)
        )
        assert isinstance(result, PatchSuccess)
        assert result.document == '{"a": 2}'

    def test_root_scalar(self) -> None:
        result = apply_edit('{"a": 1}', [], ScalarEdit("hello"))
        assert isinstance(result, PatchSuccess)
        assert result.document == '"hello"'

    def test_through_cache(self) -> None:
        cache = DocumentCache()
        text = '{"a": 1}'
        apply_edit(text, ["a"], ScalarEdit("2"), cache=cache)
        result = apply_edit(text, ["a"], ScalarEdit("3"), cache=cache)
        assert isinstance(result, PatchSuccess)
        assert result.value == {"a": 3}
        assert cache.hits == 1


class TestApplyEditFailures:
    def test_malformed_document(self) -> None:
        result = apply_edit("{not json", ["a"], ScalarEdit("1"))
        assert isinstance(result, PatchFailure)
        assert not result.ok
        assert result.kind is FailureKind.MALFORMED_DOCUMENT

    def test_unresolved_address(self) -> None:
        result = apply_edit('{"a": {}}', ["a", "b", "c"], ScalarEdit("1"))
        assert isinstance(result, PatchFailure)
        assert result.kind is FailureKind.UNRESOLVED_ADDRESS
        assert "['a', 'b', 'c']" in result.message

    def test_invalid_address(self) -> None:
        result = apply_edit('{"a": 1}', ["a", -2], ScalarEdit("1"))
        assert isinstance(result, PatchFailure)
        assert result.kind is FailureKind.INVALID_ADDRESS

    def test_failure_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="json_node_patch"):
            apply_edit("[", [], ScalarEdit("1"))
        assert "edit rejected" in caplog.text

    def test_never_raises_for_bad_text(self) -> None:
        result = apply_edit('{"a": 1}', ["a"], ScalarEdit("{unterminated"))
        assert isinstance(result, PatchSuccess)
        assert result.value == {"a": "{unterminated"}

    def test_deeply_nested_edit_text_is_kept_as_string(self) -> None:
        text = "[" * 100_000
        result = apply_edit('{"a": 1}', ["a"], ScalarEdit(text))
        assert isinstance(result, PatchSuccess)
        assert result.value == {"a": text}

    def test_deeply_nested_document(self) -> None:
        deep = "[" * 100_000 + "]" * 100_000
        result = apply_edit(deep, [0], ScalarEdit("1"))
        assert isinstance(result, PatchFailure)
        assert result.kind is FailureKind.MALFORMED_DOCUMENT

    def test_deeply_nested_document_through_cache(self) -> None:
        deep = "[" * 100_000 + "]" * 100_000
        result = apply_edit(deep, [0], ScalarEdit("1"), cache=DocumentCache())
        assert isinstance(result, PatchFailure)
        assert result.kind is FailureKind.MALFORMED_DOCUMENT

    def test_serialize_overflow_is_malformed(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def overflow(value: object, indent: int | None = 2) -> str:
            raise RecursionError("maximum recursion depth exceeded")

        monkeypatch.setattr("json_node_patch.patcher.serialize", overflow)
        result = apply_edit('{"a": 1}', ["a"], ScalarEdit("2"))
        assert isinstance(result, PatchFailure)
        assert result.kind is FailureKind.MALFORMED_DOCUMENT

    def test_huge_array_index_is_unresolved(self) -> None:
        result = apply_edit('{"l": [1]}', ["l", 10**12], ScalarEdit("1"))
        assert isinstance(result, PatchFailure)
        assert result.kind is FailureKind.UNRESOLVED_ADDRESS


# ---------------------------------------------------------------------------
# describe
# ---------------------------------------------------------------------------


class TestDescribe:
    def test_object_is_structured(self) -> None:
        desc = describe('{"a": {"name": "x", "n": 2, "sub": [1]}}', ["a"])
        assert desc.mode is EditMode.STRUCTURED_FIELDS
        assert desc.fields == {"name": "x", "n": "2"}
        assert desc.resolved
        assert json.loads(desc.display) == {"name": "x", "n": 2, "sub": [1]}

    def test_declared_keys(self) -> None:
        desc = describe('{"a": {"name": "x", "n": 2}}', ["a"], NAME_COLOR_KEYS)
        assert desc.fields == {"name": "x", "color": ""}

    def test_string_scalar(self) -> None:
        desc = describe('{"a": "hi"}', ["a"])
        assert desc == Description(mode=EditMode.SCALAR, display="hi")

    def test_array_scalar_display(self) -> None:
        desc = describe('{"a": [1]}', ["a"])
        assert desc.mode is EditMode.SCALAR
        assert desc.fields is None
        assert desc.display == "[\n  1\n]"

    def test_null_displays_empty(self) -> None:
        desc = describe('{"a": null}', ["a"])
        assert desc.display == ""
        assert desc.resolved

    def test_root(self) -> None:
        assert describe("5", []).display == "5"

    def test_unresolved_address(self) -> None:
        desc = describe('{"a": 1}', ["b"])
        assert desc.mode is EditMode.SCALAR
        assert desc.display == ""
        assert not desc.resolved

    def test_malformed_uses_fallback(self) -> None:
        desc = describe("{", ["a"], fallback='{"name": "x"}')
        assert desc.display == '{"name": "x"}'
        assert not desc.resolved

    def test_malformed_without_fallback(self) -> None:
        assert describe("{", ["a"]).display == ""

    def test_deeply_nested_document_uses_fallback(self) -> None:
        deep = "[" * 100_000 + "]" * 100_000
        desc = describe(deep, [0], fallback="f")
        assert desc.mode is EditMode.SCALAR
        assert desc.display == "f"
        assert not desc.resolved

    def test_display_overflow_uses_fallback(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def overflow(value: object, indent: int | None = 2) -> str:
            raise RecursionError("maximum recursion depth exceeded")

        monkeypatch.setattr("json_node_patch.api.to_display", overflow)
        desc = describe('{"a": {"b": 1}}', ["a"], fallback="f")
        assert desc.mode is EditMode.SCALAR
        assert desc.display == "f"
        assert not desc.resolved

    def test_invalid_address_uses_fallback(self) -> None:
        desc = describe('{"a": 1}', [True], fallback="f")  # type: ignore[list-item]
        assert desc.display == "f"
        assert not desc.resolved

    def test_through_cache_does_not_mutate(self) -> None:
        cache = DocumentCache()
        text = '{"a": {"k": 1}}'
        describe(text, ["a"], cache=cache)
        describe(text, ["a"], cache=cache)
        assert cache.hits == 1
        assert cache.load(text) == {"a": {"k": 1}}

    def test_describe_after_apply_reflects_new_document(self) -> None:
        result = apply_edit('{"a": "str"}', ["a"], FieldsEdit({"name": "Bob"}))
        assert isinstance(result, PatchSuccess)
        desc = describe(result.document, ["a"])
        assert desc.mode is EditMode.STRUCTURED_FIELDS
        assert desc.fields == {"name": "Bob"}
