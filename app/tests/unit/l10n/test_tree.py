"""Tests for y10n.l10n.tree module."""

import datetime

from y10n.l10n import TreeKind, kind_of, lookup_path
from y10n.l10n.tree import contains_cycle, copy_tree


class TestKindOf:
    """Tests for kind_of()."""

    def test_mapping(self):
        assert kind_of({"a": 1}) is TreeKind.MAPPING

    def test_sequence(self):
        assert kind_of([1, 2]) is TreeKind.SEQUENCE
        assert kind_of((1, 2)) is TreeKind.SEQUENCE

    def test_scalars(self):
        """Strings, numbers, booleans, None and dates are scalars."""
        for value in ["text", b"bytes", 1, 1.5, True, None, datetime.date(2024, 1, 1)]:
            assert kind_of(value) is TreeKind.SCALAR


class TestLookupPath:
    """Tests for lookup_path()."""

    def test_top_level_key(self):
        assert lookup_path({"greeting": "hello"}, "greeting") == "hello"

    def test_nested_key(self):
        tree = {"errors": {"not_found": "Not found"}}
        assert lookup_path(tree, "errors.not_found") == "Not found"

    def test_sequence_index(self):
        tree = {"steps": ["one", "two"]}
        assert lookup_path(tree, "steps.1") == "two"
        assert lookup_path(tree, "steps.-1") == "two"

    def test_missing_key_returns_default(self):
        assert lookup_path({"a": {}}, "a.b") is None
        assert lookup_path({"a": {}}, "a.b", default="?") == "?"

    def test_index_out_of_range(self):
        assert lookup_path({"steps": ["one"]}, "steps.5") is None

    def test_non_integer_index(self):
        assert lookup_path({"steps": ["one"]}, "steps.first") is None

    def test_descend_into_scalar(self):
        assert lookup_path({"a": "text"}, "a.b") is None

    def test_returns_subtree(self):
        tree = {"errors": {"not_found": "Not found"}}
        assert lookup_path(tree, "errors") == {"not_found": "Not found"}

    def test_present_none_value(self):
        assert lookup_path({"a": None}, "a", default="?") is None


class TestCopyTree:
    """Tests for copy_tree()."""

    def test_copy_is_independent(self):
        tree = {"a": {"b": [1, 2]}}
        copied = copy_tree(tree)
        copied["a"]["b"].append(3)
        assert tree == {"a": {"b": [1, 2]}}

    def test_keeps_tuples(self):
        """Tuples are copied as tuples so the copy equals the source."""
        tree = {"steps": ("one", ["two"])}
        copied = copy_tree(tree)
        assert copied == tree
        assert isinstance(copied["steps"], tuple)


class TestContainsCycle:
    """Tests for contains_cycle()."""

    def test_plain_tree(self):
        assert not contains_cycle({"a": {"b": [1, {"c": None}]}})

    def test_shared_child_is_not_a_cycle(self):
        """The same child under two keys is not a cycle."""
        shared = {"x": 1}
        assert not contains_cycle({"a": shared, "b": [shared, shared]})

    def test_mapping_refers_to_itself(self):
        tree = {"a": {}}
        tree["a"]["b"] = tree["a"]
        assert contains_cycle(tree)

    def test_sequence_refers_to_itself(self):
        items = ["x"]
        items.append(items)
        assert contains_cycle({"items": items})

    def test_scalar(self):
        assert not contains_cycle("text")
