"""The walk primitive, queries, and traversals shared by all tree encodings."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Generic, NamedTuple, TypeVar, Union

from typing_extensions import TypeAlias

from .utils import _is_key, _same_value

__all__ = [
    "BaseRadixTree",
    "EdgeDiverges",
    "Entry",
    "Matched",
    "NoEdge",
    "PrefixExtendsIntoEdge",
    "WalkResult",
]

N = TypeVar("N")
E = TypeVar("E")

#: A pair of a full key and its stored value
Entry: TypeAlias = tuple[str, Any]


class Matched(NamedTuple):
    """The walk consumed the whole string and ended exactly on a node."""

    node: Any
    word: str
    #: The ``(parent, edge)`` steps taken from the root
    path: tuple[tuple[Any, Any], ...]


class NoEdge(NamedTuple):
    """No outgoing edge starts with the next unconsumed character."""

    remainder: str


class EdgeDiverges(NamedTuple):
    """An edge was selected, but its label and the remaining string disagree partway."""

    remainder: str
    label: str


class PrefixExtendsIntoEdge(NamedTuple):
    """The remaining string ends in the middle of an edge's label.

    The ``node`` is the edge's target and ``word`` is the full label string
    up to that node, which is longer than the string that was walked.
    """

    node: Any
    word: str


WalkResult: TypeAlias = Union[Matched, NoEdge, EdgeDiverges, PrefixExtendsIntoEdge]


class BaseRadixTree(ABC, Generic[N, E]):
    """A radix tree mapping non-empty strings to arbitrary values.

    Subclasses decide how nodes and edges are represented and implement the
    mutating operations :meth:`put` and :meth:`remove`, which have to keep the
    tree fully compressed. Everything else is done by walking the structure
    through :meth:`_outgoing`, :meth:`_label`, and :meth:`_target`.

    All operations are permissive: keys and prefixes that aren't strings are
    treated as absent, so mutators do nothing and queries return an empty
    result instead of raising an exception.
    """

    root: N

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        """Create a new tree, optionally filled with the items from a mapping."""
        self.root = self._new_root()
        if data is not None:
            for key, value in data.items():
                self.put(key, value)

    @abstractmethod
    def _new_root(self) -> N:
        """Create an empty, non-terminal root node."""
        raise NotImplementedError

    @abstractmethod
    def _outgoing(self, node: N) -> Mapping[str, E]:
        """Get the node's outgoing edges, keyed by the first character of their labels."""
        raise NotImplementedError

    @abstractmethod
    def _label(self, edge: E) -> str:
        raise NotImplementedError

    @abstractmethod
    def _target(self, edge: E) -> N:
        raise NotImplementedError

    @abstractmethod
    def put(self, key: str, value: Any) -> None:
        """Store the value under the key, overwriting any previous value."""
        raise NotImplementedError

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete the key and its value, merging any node made redundant."""
        raise NotImplementedError

    def iter_children(self, node: N) -> Iterator[tuple[str, str, N]]:
        """Iterate over the ``(character, label, child)`` triples leaving a node, in edge order."""
        for character, edge in self._outgoing(node).items():
            yield character, self._label(edge), self._target(edge)

    def _walk(self, string: str) -> WalkResult:
        """Follow the edges spelling out the string, starting from the root."""
        node = self.root
        word = ""
        path: list[tuple[N, E]] = []
        index = 0
        while index < len(string):
            remainder = string[index:]
            edge = self._outgoing(node).get(remainder[0])
            if edge is None:
                return NoEdge(remainder)
            label = self._label(edge)
            if not remainder.startswith(label):
                if label.startswith(remainder):
                    return PrefixExtendsIntoEdge(self._target(edge), word + label)
                return EdgeDiverges(remainder, label)
            path.append((node, edge))
            node = self._target(edge)
            word += label
            index += len(label)
        return Matched(node, word, tuple(path))

    def _collect(self, node: N, word: str) -> list[Entry]:
        """Get the entries of all terminal nodes at or below the given node."""
        rv = []
        stack = [(word, node)]
        while stack:
            word, node = stack.pop()
            if node.terminal:  # type:ignore[attr-defined]
                rv.append((word, node.value))  # type:ignore[attr-defined]
            for _, label, child in self.iter_children(node):
                stack.append((word + label, child))
        return rv

    def lookup(self, key: str) -> Any:
        """Get the value stored under the key, or None if it's absent."""
        if not _is_key(key):
            return None
        result = self._walk(key)
        if isinstance(result, Matched) and result.node.terminal:
            return result.node.value
        return None

    def contains_key(self, key: str) -> bool:
        """Check if a value is stored under the key."""
        if not _is_key(key):
            return False
        result = self._walk(key)
        return isinstance(result, Matched) and result.node.terminal

    def contains_value(self, value: Any) -> bool:
        """Check if any key stores the value, including an explicitly stored None.

        Values match by identity, or by equality when both are scalars of the
        same type. Integers and floats compare with each other, so a stored
        ``2`` matches ``2.0``, while booleans only match booleans and
        containers only match themselves.
        """
        stack = [self.root]
        while stack:
            node = stack.pop()
            if node.terminal and _same_value(node.value, value):  # type:ignore[attr-defined]
                return True
            stack.extend(child for _, _, child in self.iter_children(node))
        return False

    def contains_prefix(self, prefix: str) -> bool:
        """Check if any stored key starts with the prefix.

        The empty string is a prefix of every key, so it's only contained
        when the tree is not empty.
        """
        if not isinstance(prefix, str):
            return False
        if prefix == "":
            return self.size() > 0
        return isinstance(self._walk(prefix), (Matched, PrefixExtendsIntoEdge))

    def get_entries_with_prefix(self, prefix: str) -> list[Entry]:
        """Get the ``(key, value)`` pairs for all keys starting with the prefix."""
        if not isinstance(prefix, str):
            return []
        if prefix == "":
            return self.entries()
        result = self._walk(prefix)
        if isinstance(result, (Matched, PrefixExtendsIntoEdge)):
            return self._collect(result.node, result.word)
        return []

    def get_keys_with_prefix(self, prefix: str) -> list[str]:
        """Get all keys starting with the prefix."""
        return [key for key, _ in self.get_entries_with_prefix(prefix)]

    def get_values_with_prefix(self, prefix: str) -> list[Any]:
        """Get the values of all keys starting with the prefix."""
        return [value for _, value in self.get_entries_with_prefix(prefix)]

    def entries(self) -> list[Entry]:
        """Get all ``(key, value)`` pairs, in depth-first order."""
        return self._collect(self.root, "")

    def keys(self) -> list[str]:
        """Get all keys, in depth-first order."""
        return [key for key, _ in self.entries()]

    def values(self) -> list[Any]:
        """Get all values, in depth-first order."""
        return [value for _, value in self.entries()]

    def size(self) -> int:
        """Count the stored keys. This traverses the whole tree on each call."""
        return len(self.entries())

    def clear(self) -> None:
        """Remove everything by replacing the root with an empty one."""
        self.root = self._new_root()

    def update(self, entries: Mapping[str, Any] | Iterable[Entry]) -> None:
        """Put all items from a mapping or an iterable of pairs."""
        items = entries.items() if isinstance(entries, Mapping) else entries
        for key, value in items:
            self.put(key, value)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: Any) -> bool:
        return self.contains_key(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({dict(self.entries())!r})"
