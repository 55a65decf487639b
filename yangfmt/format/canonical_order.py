"""Sorting statements into the canonical order described by the ABNF.

The formatter is meant to run while editing (for example on save), so it has
to balance strictness with friendliness: a line that jumps off screen when
the user saves is a bad experience. Only statement lists that are almost
certain to fit on one screen are sorted, such as the substatements of a leaf.

Comments and empty lines stay where they are; statements are permuted among
the positions occupied by statements, taking their post-comments along.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from yangfmt.ast import Node, Statement

OrderMapping = Mapping[str, int]

UNKNOWN_RANK: Final[int] = 255

# Substatements of "leaf" and "leaf-list" blocks
LEAF_CANONICAL_ORDER: Final[OrderMapping] = MappingProxyType(
    {
        "when": 1,
        "if-feature": 2,
        "type": 3,
        "units": 4,
        "must": 5,
        "default": 6,
        "config": 7,
        "min-elements": 8,
        "max-elements": 9,
        "ordered-by": 10,
        "mandatory": 11,
        "status": 12,
        "description": 13,
        "reference": 14,
    }
)

# Parent keyword -> order of its direct children
SORTED_BLOCKS: Final[Mapping[str, OrderMapping]] = MappingProxyType(
    {
        "leaf": LEAF_CANONICAL_ORDER,
        "leaf-list": LEAF_CANONICAL_ORDER,
    }
)


def rank_of(order_mapping: OrderMapping, node: Node) -> int:
    if isinstance(node, Statement):
        return order_mapping.get(node.keyword.text, UNKNOWN_RANK)
    return UNKNOWN_RANK


def is_sorted(order_mapping: OrderMapping, nodes: list[Node]) -> bool:
    """Check if the statements in the list are in canonical order.

    Comments and empty lines are ignored.
    """
    ranks = [rank_of(order_mapping, node) for node in nodes if isinstance(node, Statement)]
    return all(a <= b for a, b in zip(ranks, ranks[1:]))


def sort_statements(parent_keyword: str | None, nodes: list[Node]) -> None:
    """Sort the list in place if its parent is one of the sorted block types."""
    if parent_keyword is None:
        return
    order_mapping = SORTED_BLOCKS.get(parent_keyword)
    if order_mapping is None:
        return
    sort_statements_with(order_mapping, nodes)


def sort_statements_with(order_mapping: OrderMapping, nodes: list[Node]) -> None:
    slots = [i for i, node in enumerate(nodes) if isinstance(node, Statement)]
    statements = sorted((nodes[i] for i in slots), key=lambda node: rank_of(order_mapping, node))
    for i, statement in zip(slots, statements):
        nodes[i] = statement
