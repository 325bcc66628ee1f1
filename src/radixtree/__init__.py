"""An in-memory radix tree that maps strings to values and shares common prefixes."""

from .base import (
    BaseRadixTree,
    EdgeDiverges,
    Entry,
    Matched,
    NoEdge,
    PrefixExtendsIntoEdge,
    WalkResult,
)
from .compact import CompactRadixTree
from .dump import pretty_print
from .invariants import InvariantError, check_invariants, count_nodes, iter_violations
from .loaders import load_mapping, load_tree
from .tree import RadixTree
from .version import get_version

__all__ = [
    "RadixTree",
    "CompactRadixTree",
    "BaseRadixTree",
    "Entry",
    "get_version",
    # walk outcomes
    "Matched",
    "NoEdge",
    "EdgeDiverges",
    "PrefixExtendsIntoEdge",
    "WalkResult",
    # diagnostics
    "pretty_print",
    "InvariantError",
    "check_invariants",
    "count_nodes",
    "iter_violations",
    # i/o
    "load_mapping",
    "load_tree",
]
