"""Render a tree as text, one line per edge.

.. code-block::

    root
    ├── wa
    │   ├── ter (water:1)
    │   └── ste (waste:2)
    └── slow (slow:3)
        └── er (slower:4)
"""

from __future__ import annotations

from typing import Any

from .base import BaseRadixTree

__all__ = [
    "pretty_print",
]

BRANCH = "├── "
LAST_BRANCH = "└── "
INDENT = "│   "
LAST_INDENT = "    "


def pretty_print(tree: Any) -> str:
    """Draw the tree's edges with box-drawing characters.

    :param tree: A radix tree. Anything else gives an empty string.
    :returns: A multi-line string whose first line is ``root``. Each edge
        gets a line with its label, followed by ``(key:value)`` when the
        edge ends on a terminal node. Children appear in edge order.
    """
    if not isinstance(tree, BaseRadixTree):
        return ""
    lines = []
    stack: list[tuple[str, str, str, Any]] = [("root", "", "", tree.root)]
    while stack:
        line, word, indent, node = stack.pop()
        if node is not tree.root and node.terminal:
            line += f" ({word}:{node.value})"
        lines.append(line)
        children = list(tree.iter_children(node))
        last = len(children) - 1
        for i in range(last, -1, -1):
            _, label, child = children[i]
            branch, child_indent = (LAST_BRANCH, LAST_INDENT) if i == last else (BRANCH, INDENT)
            stack.append((indent + branch + label, word + label, indent + child_indent, child))
    return "\n".join(lines)
