"""Structural checks for radix trees."""

from __future__ import annotations

from collections.abc import Iterable

from .base import BaseRadixTree

__all__ = [
    "InvariantError",
    "check_invariants",
    "count_nodes",
    "iter_violations",
]


class InvariantError(ValueError):
    """An error thrown when a tree is not well-formed."""

    def __init__(self, violations: list[str]):
        """Initialize the error."""
        self.violations = violations

    def __str__(self) -> str:
        return f"tree has {len(self.violations)} broken invariant(s): " + "; ".join(
            self.violations
        )


def iter_violations(tree: BaseRadixTree) -> Iterable[str]:
    """Describe every place where the tree isn't well-formed.

    A well-formed tree has no empty labels, files each edge under its label's
    first character, never marks the root as terminal, keeps no value on a
    non-terminal node, and has no node other than the root that is neither
    terminal nor a branch point of at least two edges.
    """
    if tree.root.terminal:
        yield "root is terminal"
    stack = [("", tree.root)]
    while stack:
        word, node = stack.pop()
        if not node.terminal and node.value is not None:
            yield f"non-terminal node at {word!r} holds {node.value!r}"
        children = list(tree.iter_children(node))
        if node is not tree.root and not node.terminal and len(children) < 2:
            yield f"non-terminal node at {word!r} has {len(children)} edge(s)"
        for character, label, child in children:
            if not label:
                yield f"empty label below {word!r}"
            elif character != label[0]:
                yield f"label {label!r} below {word!r} is filed under {character!r}"
            stack.append((word + label, child))


def check_invariants(tree: BaseRadixTree) -> None:
    """Raise an :class:`InvariantError` if the tree isn't well-formed."""
    violations = list(iter_violations(tree))
    if violations:
        raise InvariantError(violations)


def count_nodes(tree: BaseRadixTree) -> int:
    """Count all nodes in the tree, including the root."""
    rv = 0
    stack = [tree.root]
    while stack:
        node = stack.pop()
        rv += 1
        stack.extend(child for _, _, child in tree.iter_children(node))
    return rv
