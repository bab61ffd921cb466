"""Tests for y10n.l10n.merger module."""

import copy

import pytest

from y10n.l10n import SequencePolicy, TreeMerger, merge, merge_all


class TestMerge:
    """Tests for TreeMerger.merge()."""

    def test_right_bias_at_leaves(self):
        """Override scalar wins over base scalar."""
        assert merge({"k": "a"}, {"k": "b"}) == {"k": "b"}

    def test_union_of_keys(self):
        """Keys from both sides are kept."""
        assert merge({"a": 1}, {"b": 2}) == {"a": 1, "b": 2}

    def test_recursive_override(self):
        """Nested mappings merge key by key."""
        result = merge({"a": {"x": 1, "y": 2}}, {"a": {"y": 3}})
        assert result == {"a": {"x": 1, "y": 3}}

    def test_deeply_nested(self):
        """Merging recurses through several levels."""
        base = {"a": {"b": {"c": 1, "d": 2}, "e": 3}}
        override = {"a": {"b": {"d": 20, "f": 30}}}
        assert merge(base, override) == {"a": {"b": {"c": 1, "d": 20, "f": 30}, "e": 3}}

    def test_absent_key_inherits_base(self):
        """A key missing from the override keeps the base value."""
        assert merge({"a": 1}, {}) == {"a": 1}

    def test_present_none_overrides(self):
        """A key present with None overrides the base value."""
        assert merge({"a": 1}, {"a": None}) == {"a": None}

    def test_present_empty_mapping_keeps_base_children(self):
        """An empty mapping merges into a base mapping without removing keys."""
        assert merge({"a": {"x": 1}}, {"a": {}}) == {"a": {"x": 1}}

    def test_sequences_are_atomic(self):
        """Override sequence replaces base sequence wholesale."""
        assert merge({"a": [1, 2, 3]}, {"a": [9]}) == {"a": [9]}

    def test_mapping_replaced_by_scalar(self):
        """Incompatible shapes resolve to the override value."""
        assert merge({"a": {"x": 1}}, {"a": "flat"}) == {"a": "flat"}

    def test_scalar_replaced_by_mapping(self):
        """A mapping override replaces a scalar base."""
        assert merge({"a": "flat"}, {"a": {"x": 1}}) == {"a": {"x": 1}}

    def test_sequence_replaced_by_mapping(self):
        """A mapping override replaces a sequence base."""
        assert merge({"a": [1]}, {"a": {"x": 1}}) == {"a": {"x": 1}}

    def test_top_level_scalars(self):
        """Non-mapping roots resolve to the override."""
        assert merge("base", "override") == "override"
        assert merge({"a": 1}, ["x"]) == ["x"]

    def test_inputs_not_mutated(self):
        """merge() leaves both inputs untouched."""
        base = {"a": {"x": 1}, "list": [1]}
        override = {"a": {"y": 2}, "list": [2]}
        base_before = copy.deepcopy(base)
        override_before = copy.deepcopy(override)

        merge(base, override)

        assert base == base_before
        assert override == override_before

    def test_result_does_not_share_structure(self):
        """Mutating the result does not touch the inputs."""
        base = {"a": {"x": 1}}
        override = {"b": {"y": [1]}}

        result = merge(base, override)
        result["a"]["x"] = 100
        result["b"]["y"].append(2)

        assert base == {"a": {"x": 1}}
        assert override == {"b": {"y": [1]}}

    def test_independent_of_key_order(self):
        """Result does not depend on mapping iteration order."""
        base_one = {"a": 1, "b": {"x": 1, "y": 2}}
        base_two = {"b": {"y": 2, "x": 1}, "a": 1}
        override = {"b": {"y": 3}, "c": 4}
        assert merge(base_one, override) == merge(base_two, override)


class TestSequencePolicy:
    """Tests for TreeMerger sequence policies."""

    def test_default_policy_is_replace(self):
        """TreeMerger treats sequences as atomic by default."""
        assert TreeMerger().sequence_policy is SequencePolicy.REPLACE

    def test_append_policy_concatenates(self):
        """APPEND puts base items before override items."""
        merger = TreeMerger(sequence_policy=SequencePolicy.APPEND)
        result = merger.merge({"a": [1, 2]}, {"a": [3]})
        assert result == {"a": [1, 2, 3]}

    def test_append_policy_from_string(self):
        """TreeMerger accepts the policy value as a string."""
        merger = TreeMerger(sequence_policy="append")
        assert merger.sequence_policy is SequencePolicy.APPEND

    def test_append_policy_only_for_two_sequences(self):
        """APPEND still lets an override scalar replace a sequence."""
        merger = TreeMerger(sequence_policy=SequencePolicy.APPEND)
        assert merger.merge({"a": [1]}, {"a": "x"}) == {"a": "x"}

    def test_append_policy_mixed_sequence_types(self):
        """APPEND concatenates a tuple and a list into a list."""
        merger = TreeMerger(sequence_policy=SequencePolicy.APPEND)
        assert merger.merge({"a": ("x",)}, {"a": ["y"]}) == {"a": ["x", "y"]}

    def test_invalid_policy(self):
        """TreeMerger rejects unknown policies."""
        with pytest.raises(ValueError):
            TreeMerger(sequence_policy="zip")


class TestMergeAll:
    """Tests for TreeMerger.merge_all()."""

    def test_empty_sequence_yields_empty_mapping(self):
        """merge_all([]) returns {}."""
        assert merge_all([]) == {}

    @pytest.mark.parametrize(
        "tree",
        [
            {"a": {"b": [1, {"c": None}]}},
            {},
            ["x", "y"],
            ("x", "y"),
            {"a": ("x", {"b": 1})},
            "scalar",
            None,
        ],
    )
    def test_identity(self, tree):
        """merge_all([T]) == T."""
        assert merge_all([tree]) == tree

    def test_folds_left_to_right(self):
        """Later trees override earlier ones."""
        result = merge_all(
            [
                {"a": 1, "b": 1, "c": 1},
                {"b": 2, "c": 2},
                {"c": 3},
            ]
        )
        assert result == {"a": 1, "b": 2, "c": 3}

    def test_accepts_generator(self):
        """merge_all() consumes any iterable."""
        result = merge_all(tree for tree in [{"a": 1}, {"b": 2}])
        assert result == {"a": 1, "b": 2}

    def test_single_tree_is_copied(self):
        """merge_all() of one tree returns an independent copy."""
        tree = {"a": {"b": 1}}
        result = merge_all([tree])
        result["a"]["b"] = 2
        assert tree == {"a": {"b": 1}}
