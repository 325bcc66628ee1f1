"""A radix tree whose nodes are linked by explicit, labelled edges."""

from __future__ import annotations

import logging
from typing import Any

from .base import BaseRadixTree, Matched
from .utils import _first_mismatch, _is_key

__all__ = [
    "Edge",
    "Node",
    "RadixTree",
]

logger = logging.getLogger(__name__)


class Edge:
    """A labelled transition to a child node, which the edge owns exclusively."""

    __slots__ = ("label", "target")

    label: str
    target: Node

    def __init__(self, label: str, target: Node) -> None:
        """Initialize the edge."""
        self.label = label
        self.target = target

    def __repr__(self) -> str:
        return f"Edge({self.label!r})"


class Node:
    """Radix tree node class."""

    __slots__ = ("edges", "terminal", "value")

    edges: dict[str, Edge]
    terminal: bool
    value: Any

    def __init__(self, terminal: bool = False, value: Any = None) -> None:
        """Initialize the node."""
        # keyed by the first character of each label, in attachment order
        self.edges = {}
        self.terminal = terminal
        self.value = value

    def attach(self, edge: Edge) -> None:
        """Add an outgoing edge after all existing ones."""
        self.edges[edge.label[0]] = edge

    def detach(self, character: str) -> Edge:
        """Remove the outgoing edge whose label starts with the character."""
        return self.edges.pop(character)


class RadixTree(BaseRadixTree[Node, Edge]):
    """A radix tree built from :class:`Node` and :class:`Edge` objects.

    >>> tree = RadixTree()
    >>> tree.put("water", 1)
    >>> tree.put("waste", 2)
    >>> tree.lookup("waste")
    2
    >>> tree.lookup("wa") is None
    True
    >>> tree.get_keys_with_prefix("wat")
    ['water']
    """

    def _new_root(self) -> Node:
        return Node()

    def _outgoing(self, node: Node) -> dict[str, Edge]:
        return node.edges

    def _label(self, edge: Edge) -> str:
        return edge.label

    def _target(self, edge: Edge) -> Node:
        return edge.target

    def put(self, key: str, value: Any) -> None:
        """Store the value under the key, overwriting any previous value.

        :param key: A non-empty string. Anything else is ignored.
        :param value: The value to store

        Where the key leaves an existing edge partway through its label,
        the edge is split so the key's path gets its own node.
        """
        if not _is_key(key):
            return
        node = self.root
        index = 0
        while index < len(key):
            remainder = key[index:]
            edge = node.edges.get(remainder[0])
            if edge is None:
                node.attach(Edge(remainder, Node(terminal=True, value=value)))
                return

            split = _first_mismatch(remainder, edge.label)
            if split is not None:
                logger.debug("splitting %r at %d to branch off %r", edge.label, split, key)
                branch = Node()
                branch.attach(Edge(edge.label[split:], edge.target))
                branch.attach(Edge(remainder[split:], Node(terminal=True, value=value)))
                edge.label = edge.label[:split]
                edge.target = branch
                return

            if len(remainder) == len(edge.label):
                edge.target.terminal = True
                edge.target.value = value
                return

            if len(remainder) < len(edge.label):
                logger.debug("splitting %r to end %r on it", edge.label, key)
                middle = Node(terminal=True, value=value)
                middle.attach(Edge(edge.label[len(remainder) :], edge.target))
                edge.label = remainder
                edge.target = middle
                return

            node = edge.target
            index += len(edge.label)

    def remove(self, key: str) -> None:
        """Delete the key and its value.

        :param key: A non-empty string. Anything else, as well as keys
            that aren't stored, is ignored.

        After the key's node is unmarked, the path back to the root is
        repaired: childless non-terminal nodes are pruned and a non-terminal
        node left with a single child is merged into its parent edge.
        """
        if not _is_key(key):
            return
        result = self._walk(key)
        if not isinstance(result, Matched) or not result.node.terminal:
            return
        result.node.terminal = False
        result.node.value = None

        for parent, edge in reversed(result.path):
            node = edge.target
            if node.terminal or len(node.edges) > 1:
                break
            if node.edges:
                (tail,) = node.edges.values()
                logger.debug("merging %r with %r", edge.label, tail.label)
                parent.detach(edge.label[0])
                parent.attach(Edge(edge.label + tail.label, tail.target))
                # the parent keeps the same number of edges, so nothing above changes
                break
            logger.debug("pruning %r", edge.label)
            parent.detach(edge.label[0])
