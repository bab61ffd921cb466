"""Deep merge of translation trees.

Mappings are merged key by key; everything else is atomic and the override
value replaces the base value outright. A key that is absent from the
override inherits the base value, while a key that is present with a None
value overrides the base with None.
"""

from enum import Enum
from typing import Any, Iterable

from y10n.l10n.tree import TreeKind, copy_tree, kind_of


class SequencePolicy(str, Enum):
    """How two sequences at the same path combine.

    REPLACE: the override sequence wins wholesale (default).
    APPEND: base items followed by override items.
    """

    REPLACE = "replace"
    APPEND = "append"


class TreeMerger:
    """Merges tree values with right-biased precedence.

    Inputs are never mutated; every result is a fresh tree owned by the
    caller.

    Attributes:
        sequence_policy: How sequences on both sides combine.
    """

    def __init__(self, sequence_policy: SequencePolicy = SequencePolicy.REPLACE):
        self.sequence_policy = SequencePolicy(sequence_policy)

    def merge(self, base: Any, override: Any) -> Any:
        """Merge `override` on top of `base`.

        Args:
            base: Lower-priority tree.
            override: Higher-priority tree.

        Returns:
            New merged tree.
        """
        base_kind = kind_of(base)
        override_kind = kind_of(override)

        match (base_kind, override_kind):
            case (TreeKind.MAPPING, TreeKind.MAPPING):
                merged = {key: copy_tree(value) for key, value in base.items()}
                for key, value in override.items():
                    if key in merged:
                        merged[key] = self.merge(base[key], value)
                    else:
                        merged[key] = copy_tree(value)
                return merged
            case (TreeKind.SEQUENCE, TreeKind.SEQUENCE) if (
                self.sequence_policy is SequencePolicy.APPEND
            ):
                return [*copy_tree(base), *copy_tree(override)]
            case _:
                return copy_tree(override)

    def merge_all(self, trees: Iterable[Any]) -> Any:
        """Fold trees left to right, each one overriding the accumulated result.

        Args:
            trees: Trees ordered from lowest to highest priority.

        Returns:
            Merged tree; an empty mapping for no input, a copy of the only
            tree for a single input.
        """
        iterator = iter(trees)
        try:
            result = copy_tree(next(iterator))
        except StopIteration:
            return {}

        for tree in iterator:
            result = self.merge(result, tree)
        return result


_default_merger = TreeMerger()


def merge(base: Any, override: Any) -> Any:
    """Merge two trees with the default (atomic sequence) policy."""
    return _default_merger.merge(base, override)


def merge_all(trees: Iterable[Any]) -> Any:
    """Fold trees with the default (atomic sequence) policy."""
    return _default_merger.merge_all(trees)
