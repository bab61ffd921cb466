"""Tree values as produced by YAML/JSON parsers.

A tree is a plain Python value: a mapping with string keys, a sequence, or a
scalar (str, number, bool, None, date). TreeKind classifies a value so the
merge and lookup code can dispatch on every shape explicitly.
"""

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

PATH_SEPARATOR = "."


class TreeKind(str, Enum):
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    SCALAR = "scalar"


def kind_of(value: Any) -> TreeKind:
    """Classify a tree value.

    Strings and bytes are scalars even though they are sequences in Python.
    """
    if isinstance(value, Mapping):
        return TreeKind.MAPPING
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return TreeKind.SEQUENCE
    return TreeKind.SCALAR


def copy_tree(value: Any) -> Any:
    """Return a deep copy of a tree.

    Mappings come back as dicts. Tuples stay tuples and every other sequence
    becomes a list, so a copy always compares equal to its source.
    """
    match kind_of(value):
        case TreeKind.MAPPING:
            return {key: copy_tree(child) for key, child in value.items()}
        case TreeKind.SEQUENCE:
            items = [copy_tree(item) for item in value]
            return tuple(items) if isinstance(value, tuple) else items
        case TreeKind.SCALAR:
            return value


def contains_cycle(value: Any) -> bool:
    """Check whether a tree contains itself.

    YAML aliases can make a node refer back to one of its ancestors. Such a
    tree cannot be copied or merged. Aliases that are merely shared between
    siblings are fine.

    Raises:
        RecursionError: If the tree is nested deeper than the interpreter's
            recursion limit allows.
    """
    return _contains_cycle(value, set())


def _contains_cycle(value: Any, ancestors: set) -> bool:
    kind = kind_of(value)
    if kind is TreeKind.SCALAR:
        return False
    if id(value) in ancestors:
        return True

    ancestors.add(id(value))
    children = value.values() if kind is TreeKind.MAPPING else value
    found = any(_contains_cycle(child, ancestors) for child in children)
    ancestors.discard(id(value))
    return found


_MISSING = object()


def lookup_path(tree: Any, path: str, default: Any = None) -> Any:
    """Walk a dot-separated key path through a tree.

    Mapping segments match keys; sequence segments must be integer indexes.

    Args:
        tree: Tree value to search.
        path: Dot-separated path (e.g., "errors.not_found", "steps.0").
        default: Value returned when the path is absent.

    Returns:
        The value at the path, or default.

    Example:
        >>> lookup_path({"a": {"b": ["x", "y"]}}, "a.b.1")
        'y'
    """
    node = tree
    for segment in path.split(PATH_SEPARATOR):
        node = _child(node, segment)
        if node is _MISSING:
            return default
    return node


def _child(node: Any, segment: str) -> Any:
    match kind_of(node):
        case TreeKind.MAPPING:
            return node.get(segment, _MISSING)
        case TreeKind.SEQUENCE:
            if not segment.lstrip("-").isdigit():
                return _MISSING
            index = int(segment)
            if -len(node) <= index < len(node):
                return node[index]
            return _MISSING
        case TreeKind.SCALAR:
            return _MISSING
