"""
Merkle funnel CLI entry point.

Compute the Merkle root and depth of an ordered list of items.

Usage::

    python -m merkle_funnel "alice->bob:10" "bob->charlie:5"
    python -m merkle_funnel --file transactions.txt --layers
    cat transactions.txt | python -m merkle_funnel --json

Options:
    ITEM        Items to reduce, in order (takes precedence over --file and stdin)
    --file      Path to a file with one item per line
    --layers    Also print every layer, leaf layer first
    --json      Print the whole tree as JSON instead
    --verbose   Enable debug logging
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Sequence

from merkle_funnel import config
from merkle_funnel.funnel import FunnelTree, construct
from merkle_funnel.types import EmptyInputError

SEPARATOR = "-" * 39

logger = logging.getLogger(__name__)


def read_items(lines: Iterable[str]) -> list[str]:
    """
    Turn raw lines into items.

    Trailing newlines are stripped and blank lines are skipped.
    Leading and inner whitespace is part of the item.
    """
    items = [line.rstrip("\r\n") for line in lines]
    return [item for item in items if item.strip()]


def render(tree: FunnelTree, show_layers: bool = False) -> str:
    """Format the root and depth of `tree` for humans."""
    out = [
        SEPARATOR,
        f"Merkle Root: {tree.root().hex()}",
        f"Tree Depth:  {tree.depth()} levels",
        SEPARATOR,
    ]
    if show_layers:
        for level, layer in enumerate(tree.layers):
            out.append(f"Layer {level} ({len(layer)}):")
            out.extend(f"  {fingerprint.hex()}" for fingerprint in layer)
    return "\n".join(out)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""
    parser = argparse.ArgumentParser(
        prog="merkle_funnel",
        description="Compute the Merkle root of an ordered list of items.",
    )
    parser.add_argument("items", nargs="*", metavar="ITEM", help="Items to reduce, in order")
    parser.add_argument("--file", type=Path, help="Read items from a file, one per line")
    parser.add_argument("--layers", action="store_true", help="Print every layer")
    parser.add_argument("--json", action="store_true", help="Print the tree as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.FUNNEL_LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.items:
        items = list(args.items)
    elif args.file is not None:
        try:
            with args.file.open(encoding="utf-8") as handle:
                items = read_items(handle)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Cannot read items from %s: %s", args.file, e)
            return 1
    else:
        items = read_items(sys.stdin)

    logger.info("Reducing %d items", len(items))

    try:
        tree = construct(items)
    except EmptyInputError as e:
        logger.error("%s", e)
        return 1

    if args.json:
        print(tree.model_dump_json(indent=2))
    else:
        print(render(tree, show_layers=args.layers))
    return 0


if __name__ == "__main__":
    sys.exit(main())
