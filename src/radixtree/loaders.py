"""Build trees from mappings and local files."""

from __future__ import annotations

import csv
import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Union

from typing_extensions import TypeAlias

from .base import BaseRadixTree
from .compact import CompactRadixTree
from .tree import RadixTree

__all__ = [
    "ENCODINGS",
    "FORMATS",
    "load_mapping",
    "load_tree",
]

logger = logging.getLogger(__name__)

LocationOr: TypeAlias = Union[str, Path, Mapping[str, Any]]

#: Tree classes by the name used on the command line
ENCODINGS: Mapping[str, type[BaseRadixTree]] = {
    "edge": RadixTree,
    "compact": CompactRadixTree,
}

FORMATS = ("json", "tsv")


def _read_json(path: Path) -> dict[str, Any]:
    with path.open() as file:
        data = json.load(file)
    if isinstance(data, dict):
        return data
    if isinstance(data, list) and all(isinstance(item, list) and len(item) == 2 for item in data):
        return {key: value for key, value in data}
    raise ValueError(f"{path} should contain a JSON object or a list of pairs")


def _read_tsv(path: Path) -> dict[str, Any]:
    rv = {}
    with path.open(newline="") as file:
        for row in csv.reader(file, delimiter="\t"):
            if not row:
                continue
            key, value = row[0], "\t".join(row[1:])
            rv[key] = value
    return rv


def load_mapping(location: LocationOr, *, format: str = "json") -> Mapping[str, Any]:
    """Get the keys and values to put in a tree.

    :param location:
        One of the following:

        - A mapping from keys to values, which is returned as-is
        - A string or :class:`pathlib.Path` object corresponding to a local file
    :param format: Either ``json`` for a file containing an object or a list
        of ``[key, value]`` pairs, or ``tsv`` for a file with one
        tab-separated key and value per line
    :returns: A mapping from keys to values, in the order they appear
    :raises ValueError: If the format is not handled
    """
    if isinstance(location, Mapping):
        return location
    path = Path(location)
    if format == "json":
        rv = _read_json(path)
    elif format == "tsv":
        rv = _read_tsv(path)
    else:
        raise ValueError(f"Unhandled format: {format}")
    logger.debug("loaded %d entries from %s", len(rv), path)
    return rv


def load_tree(
    location: LocationOr, *, format: str = "json", encoding: str = "edge"
) -> BaseRadixTree:
    """Get a tree holding the entries from a mapping or a local file.

    :param location: A mapping, or the path to a file (see :func:`load_mapping`)
    :param format: The file format (see :func:`load_mapping`)
    :param encoding: Either ``edge`` for a :class:`radixtree.RadixTree` or
        ``compact`` for a :class:`radixtree.CompactRadixTree`
    :returns: A tree
    :raises ValueError: If the format or the encoding is not handled

    >>> tree = load_tree({"slow": 1, "slower": 2}, encoding="compact")
    >>> tree.keys()
    ['slow', 'slower']
    """
    if encoding not in ENCODINGS:
        raise ValueError(f"Unhandled encoding: {encoding}")
    return ENCODINGS[encoding](load_mapping(location, format=format))
