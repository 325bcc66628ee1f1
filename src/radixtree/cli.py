# type:ignore

"""This package comes with a built-in CLI for inspecting radix trees built from files.

.. code-block::

    $ radixtree dump words.json
    $ radixtree keys --prefix wa words.json
    $ radixtree lookup --format tsv words.tsv water

The positional argument is a local file path. JSON files hold an object or a
list of ``[key, value]`` pairs, TSV files hold one key and value per line.
The tree's node layout can be swapped with ``--encoding``. These
functionalities are also available programmatically (see
:func:`radixtree.load_tree` and :func:`radixtree.pretty_print`).
"""

import logging
import sys

import click

from .dump import pretty_print
from .invariants import InvariantError, check_invariants
from .loaders import ENCODINGS, FORMATS, load_tree

__all__ = [
    "main",
]

LOCATION_ARGUMENT = click.argument("location", type=click.Path(exists=True, dir_okay=False))
FORMAT_OPTION = click.option(
    "--format",
    default="json",
    type=click.Choice(FORMATS),
    show_default=True,
    help="The file format of the tree's entries.",
)
ENCODING_OPTION = click.option(
    "--encoding",
    default="edge",
    type=click.Choice(list(ENCODINGS)),
    show_default=True,
    help="The node layout used to build the tree. Both give the same results.",
)
VERBOSE_OPTION = click.option("-v", "--verbose", is_flag=True, help="Log splits and merges")


def _get_tree(location, format, encoding, verbose):
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        return load_tree(location, format=format, encoding=encoding)
    except ValueError as e:
        click.secho(f"could not load {location}: {e}", fg="red")
        return sys.exit(1)


@click.group()
def main():
    """Run the `radixtree` CLI."""


@main.command()
@LOCATION_ARGUMENT
@FORMAT_OPTION
@ENCODING_OPTION
@VERBOSE_OPTION
def dump(location, format: str, encoding: str, verbose: bool):
    """Draw the tree built from a file."""
    tree = _get_tree(location, format, encoding, verbose)
    click.echo(pretty_print(tree))


@main.command()
@LOCATION_ARGUMENT
@FORMAT_OPTION
@ENCODING_OPTION
@VERBOSE_OPTION
@click.option("--prefix", default="", help="Only show keys starting with this prefix")
def keys(location, format: str, encoding: str, verbose: bool, prefix: str):
    """List the keys in a file, optionally restricted to a prefix."""
    tree = _get_tree(location, format, encoding, verbose)
    for key in tree.get_keys_with_prefix(prefix):
        click.echo(key)


@main.command()
@LOCATION_ARGUMENT
@click.argument("key")
@FORMAT_OPTION
@ENCODING_OPTION
@VERBOSE_OPTION
def lookup(location, key: str, format: str, encoding: str, verbose: bool):
    """Show the value stored under a key."""
    tree = _get_tree(location, format, encoding, verbose)
    if not tree.contains_key(key):
        click.secho(f"{key} is not in {location}", fg="red")
        return sys.exit(1)
    click.echo(tree.lookup(key))


@main.command()
@LOCATION_ARGUMENT
@FORMAT_OPTION
@ENCODING_OPTION
@VERBOSE_OPTION
def check(location, format: str, encoding: str, verbose: bool):
    """Check that the tree built from a file is fully compressed."""
    tree = _get_tree(location, format, encoding, verbose)
    try:
        check_invariants(tree)
    except InvariantError as e:
        click.secho(str(e), fg="red")
        return sys.exit(1)
    click.echo("ok")


if __name__ == "__main__":
    main()
