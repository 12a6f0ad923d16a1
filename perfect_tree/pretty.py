# perfect_tree/pretty.py
"""
Pretty-print helpers for perfect trees.

This does NOT change Leaf/Branch __str__ or __repr__. It gives a compact,
bounded rendering for trees too large to print in full.

Usage:

    from perfect_tree import pretty_tree, tindices

    print(pretty_tree(tindices(10), max_depth=1))
    # d10 <<…,…>,<…,…>>
"""

from __future__ import annotations

from .core.tree import Leaf, PerfectTree
from .validate import assert_tree


def _clip(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[: max(limit - 1, 0)] + "…"


def pretty_tree(
    tree: PerfectTree,
    *,
    max_depth: int = 6,
    max_leaf_chars: int = 16,
    show_depth: bool = True,
) -> str:
    """Render a tree into a compact, human-oriented string.

    Conventions
    -----------
    * Branches are rendered as ``<left,right>``, leaves as ``repr(value)``.
    * Nodes more than ``max_depth`` levels below the root are rendered as ``…``.
    * Leaf renderings longer than ``max_leaf_chars`` are clipped with ``…``.
    * With ``show_depth`` the output is prefixed by the depth witness, ``d3``.
    """
    assert_tree(tree, "tree")

    def rec(node: PerfectTree, level: int) -> str:
        if level > max_depth:
            return "…"
        if isinstance(node, Leaf):
            return _clip(repr(node.value), max_leaf_chars)
        return f"<{rec(node.left, level + 1)},{rec(node.right, level + 1)}>"

    body = rec(tree, 0)
    if show_depth:
        return f"{tree.witness()!r} {body}"
    return body
