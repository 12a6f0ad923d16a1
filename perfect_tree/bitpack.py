# perfect_tree/bitpack.py
"""
Packing trees into flat bit strings.

An element codec describes a fixed-width element:

    bit_size            number of bits per element
    pack(value) -> int  value as a non-negative int below 2**bit_size
    unpack(int) -> value

A tree packs to the concatenation of its leaves' bits in left-to-right
order, leaf 0 in the most significant position, for a total width of
2**depth * bit_size. Bit strings are plain Python ints.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol

from .core.tree import PerfectTree, dfold
from .errors import LengthMismatch
from .flat import v2t
from .validate import assert_tree, check_depth

logger = logging.getLogger(__name__)


class ElementCodec(Protocol):
    bit_size: int

    def pack(self, value: Any) -> int: ...

    def unpack(self, bits: int) -> Any: ...


@dataclass(frozen=True)
class UnsignedCodec:
    """Unsigned integers of a fixed bit width."""
    bit_size: int

    def __post_init__(self) -> None:
        if isinstance(self.bit_size, bool) or not isinstance(self.bit_size, int):
            raise TypeError(f"bit_size must be an int, got {type(self.bit_size).__name__}")
        if self.bit_size < 1:
            raise ValueError(f"bit_size must be >= 1, got {self.bit_size}")

    def pack(self, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"UnsignedCodec packs ints, got {type(value).__name__}")
        if not 0 <= value < (1 << self.bit_size):
            raise ValueError(f"{value} does not fit in {self.bit_size} unsigned bits")
        return value

    def unpack(self, bits: int) -> int:
        return bits


def tree_bit_size(depth, codec: ElementCodec) -> int:
    """Total packed width of a depth-d tree of codec elements."""
    d = check_depth(depth, "depth")
    return (1 << d) * codec.bit_size


def pack_tree(tree: PerfectTree, codec: ElementCodec) -> int:
    """
    Pack tree into an int of tree_bit_size(tree.depth, codec) bits.

    At level l each sub-branch occupies 2**l * bit_size bits, so the join
    shifts the left half up by exactly that much.
    """
    assert_tree(tree, "tree")
    width = codec.bit_size

    def leaf(a):
        bits = codec.pack(a)
        if not 0 <= bits < (1 << width):
            raise ValueError(f"codec produced {bits}, which is not a {width}-bit pattern")
        return bits

    def branch(level, l, r):
        return (l << ((1 << level) * width)) | r

    packed = dfold(leaf, branch, tree)
    logger.debug("packed depth %d tree into %d bits", tree.depth, (1 << tree.depth) * width)
    return packed


def unpack_tree(depth, codec: ElementCodec, bits: int) -> PerfectTree:
    """Inverse of pack_tree for a bit string of exactly the tree's width."""
    d = check_depth(depth, "depth")
    if isinstance(bits, bool) or not isinstance(bits, int):
        raise TypeError(f"bits must be an int, got {type(bits).__name__}")
    width = codec.bit_size
    total = (1 << d) * width
    if bits < 0 or bits.bit_length() > total:
        raise LengthMismatch(f"bit string does not fit in {total} bits for depth {d}")

    count = 1 << d
    mask = (1 << width) - 1
    elements = [
        codec.unpack((bits >> ((count - 1 - i) * width)) & mask)
        for i in range(count)
    ]
    return v2t(d, elements)
