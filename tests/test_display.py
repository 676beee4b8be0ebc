"""Tests for format_address and node_display."""

from __future__ import annotations

from json_node_patch.display import format_address, node_display
from json_node_patch.tree import NodeRow
from json_node_patch.values import JsonKind


class TestFormatAddress:
    def test_root(self) -> None:
        assert format_address(()) == "$"

    def test_none(self) -> None:
        assert format_address(None) == "$"

    def test_single_key(self) -> None:
        assert format_address(["customer"]) == '$["customer"]'

    def test_keys_and_indices(self) -> None:
        assert format_address(["orders", 0, "id"]) == '$["orders"][0]["id"]'

    def test_quote_in_key_is_escaped(self) -> None:
        assert format_address(['say "hi"']) == '$["say \\"hi\\""]'


class TestNodeDisplay:
    def test_no_rows(self) -> None:
        assert node_display([]) == "{}"
        assert node_display(None) == "{}"

    def test_single_keyless_row(self) -> None:
        assert node_display([NodeRow(None, 42, JsonKind.NUMBER)]) == "42"

    def test_single_keyless_string(self) -> None:
        assert node_display([NodeRow(None, "hi", JsonKind.STRING)]) == "hi"

    def test_single_empty_key_row_is_keyless(self) -> None:
        assert node_display([NodeRow("", 5, JsonKind.NUMBER)]) == "5"

    def test_container_rows_dropped(self) -> None:
        rows = [
            NodeRow("name", "Ada", JsonKind.STRING),
            NodeRow("tags", 2, JsonKind.ARRAY),
            NodeRow("meta", 1, JsonKind.OBJECT),
            NodeRow("age", 36, JsonKind.NUMBER),
        ]
        assert node_display(rows) == '{\n  "name": "Ada",\n  "age": 36\n}'

    def test_only_container_rows(self) -> None:
        assert node_display([NodeRow("a", 0, JsonKind.OBJECT)]) == "{}"

    def test_compact(self) -> None:
        rows = [NodeRow("a", True, JsonKind.BOOL), NodeRow("b", None, JsonKind.NULL)]
        assert node_display(rows, indent=None) == '{"a": true, "b": null}'
