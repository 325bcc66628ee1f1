"""A radix tree without edge objects, where each node carries its incoming label."""

from __future__ import annotations

import logging
from typing import Any

from .base import BaseRadixTree, Matched
from .utils import _first_mismatch, _is_key

__all__ = [
    "CompactRadixTree",
    "LabeledNode",
]

logger = logging.getLogger(__name__)


class LabeledNode:
    """A node that doubles as the edge leading into it."""

    __slots__ = ("children", "label", "terminal", "value")

    label: str
    children: dict[str, LabeledNode]
    terminal: bool
    value: Any

    def __init__(self, label: str, terminal: bool = False, value: Any = None) -> None:
        """Initialize the node."""
        self.label = label
        self.children = {}
        self.terminal = terminal
        self.value = value

    def adopt(self, child: LabeledNode) -> None:
        """Add a child after all existing ones."""
        self.children[child.label[0]] = child

    def __repr__(self) -> str:
        return f"LabeledNode({self.label!r})"


class CompactRadixTree(BaseRadixTree[LabeledNode, LabeledNode]):
    """A radix tree built only from :class:`LabeledNode` objects.

    It behaves exactly like :class:`radixtree.RadixTree`, down to the order
    of its children, but allocates one object per branch instead of two.
    """

    def _new_root(self) -> LabeledNode:
        return LabeledNode("")

    def _outgoing(self, node: LabeledNode) -> dict[str, LabeledNode]:
        return node.children

    def _label(self, edge: LabeledNode) -> str:
        return edge.label

    def _target(self, edge: LabeledNode) -> LabeledNode:
        return edge

    def put(self, key: str, value: Any) -> None:
        """Store the value under the key, overwriting any previous value."""
        if not _is_key(key):
            return
        node = self.root
        index = 0
        while index < len(key):
            remainder = key[index:]
            child = node.children.get(remainder[0])
            if child is None:
                node.adopt(LabeledNode(remainder, terminal=True, value=value))
                return

            split = _first_mismatch(remainder, child.label)
            if split is not None:
                logger.debug("splitting %r at %d to branch off %r", child.label, split, key)
                branch = LabeledNode(remainder[:split])
                child.label = child.label[split:]
                branch.adopt(child)
                branch.adopt(LabeledNode(remainder[split:], terminal=True, value=value))
                # replacing the value keeps the branch at the child's position
                node.children[remainder[0]] = branch
                return

            if len(remainder) == len(child.label):
                child.terminal = True
                child.value = value
                return

            if len(remainder) < len(child.label):
                logger.debug("splitting %r to end %r on it", child.label, key)
                middle = LabeledNode(remainder, terminal=True, value=value)
                child.label = child.label[len(remainder) :]
                middle.adopt(child)
                node.children[remainder[0]] = middle
                return

            node = child
            index += len(child.label)

    def remove(self, key: str) -> None:
        """Delete the key and its value, then re-compress the path above it."""
        if not _is_key(key):
            return
        result = self._walk(key)
        if not isinstance(result, Matched) or not result.node.terminal:
            return
        result.node.terminal = False
        result.node.value = None

        for parent, node in reversed(result.path):
            if node.terminal or len(node.children) > 1:
                break
            del parent.children[node.label[0]]
            if node.children:
                (grandchild,) = node.children.values()
                logger.debug("merging %r with %r", node.label, grandchild.label)
                grandchild.label = node.label + grandchild.label
                parent.adopt(grandchild)
                break
            logger.debug("pruning %r", node.label)
