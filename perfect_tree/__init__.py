"""
perfect_tree public API surface.

This module exposes a small, coherent core:

    - Witnesses: NaturalWitness, witness, to_integer, with_witness,
                 add_witness, sub_witness, mul_witness, pow_witness, D0, D1, D2
    - Inductive naturals: InductiveNatural, Zero, Succ, ZERO, from_int,
                          from_witness, to_int, add_inductive,
                          mul_inductive, pow_inductive
    - Trees: PerfectTree, Leaf, Branch, replicate, dfold, textract, tsplit
    - Operations: tfold, tmap, tzip_with, tzip, tunzip, tindices
    - Access: index_tree, replace_tree, adjust_tree
    - Flat conversion: t2v, v2t, flatten, unflatten, from_sequence,
                       depth_for_length
    - Bit packing: UnsignedCodec, pack_tree, unpack_tree, tree_bit_size
    - Reductions: Unsigned, population_count, tree_sum
    - Helpers: pretty_tree, is_tree, assert_tree, check_depth
    - Errors: TreeError and subclasses
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Natural numbers
# ---------------------------------------------------------------------------

from .core.nat import (
    NaturalWitness,
    witness,
    to_integer,
    with_witness,
    add_witness,
    sub_witness,
    mul_witness,
    pow_witness,
    D0,
    D1,
    D2,
    InductiveNatural,
    Zero,
    Succ,
    ZERO,
    from_int,
    from_witness,
    to_int,
    add_inductive,
    mul_inductive,
    pow_inductive,
)

# ---------------------------------------------------------------------------
# Trees and the depth-dependent fold
# ---------------------------------------------------------------------------

from .core.tree import PerfectTree, Leaf, Branch, replicate, dfold, textract, tsplit

from .ops import tfold, tmap, tzip_with, tzip, tunzip, tindices
from .access import index_tree, replace_tree, adjust_tree
from .flat import t2v, v2t, flatten, unflatten, from_sequence, depth_for_length

# ---------------------------------------------------------------------------
# Bit packing / reductions
# ---------------------------------------------------------------------------

from .bitpack import UnsignedCodec, pack_tree, unpack_tree, tree_bit_size
from .reductions import Unsigned, population_count, tree_sum

# ---------------------------------------------------------------------------
# Helpers / errors
# ---------------------------------------------------------------------------

from .pretty import pretty_tree
from .validate import is_tree, assert_tree, check_depth
from .errors import (
    TreeError,
    IndexOutOfRange,
    LengthMismatch,
    ShapeMismatch,
    WitnessError,
    WitnessUnderflow,
    MotiveViolation,
    DepthLimitExceeded,
)


__all__ = [
    # witnesses
    "NaturalWitness",
    "witness",
    "to_integer",
    "with_witness",
    "add_witness",
    "sub_witness",
    "mul_witness",
    "pow_witness",
    "D0",
    "D1",
    "D2",

    # inductive naturals
    "InductiveNatural",
    "Zero",
    "Succ",
    "ZERO",
    "from_int",
    "from_witness",
    "to_int",
    "add_inductive",
    "mul_inductive",
    "pow_inductive",

    # trees
    "PerfectTree",
    "Leaf",
    "Branch",
    "replicate",
    "dfold",
    "textract",
    "tsplit",

    # operations
    "tfold",
    "tmap",
    "tzip_with",
    "tzip",
    "tunzip",
    "tindices",

    # access
    "index_tree",
    "replace_tree",
    "adjust_tree",

    # flat conversion
    "t2v",
    "v2t",
    "flatten",
    "unflatten",
    "from_sequence",
    "depth_for_length",

    # bit packing
    "UnsignedCodec",
    "pack_tree",
    "unpack_tree",
    "tree_bit_size",

    # reductions
    "Unsigned",
    "population_count",
    "tree_sum",

    # helpers
    "pretty_tree",
    "is_tree",
    "assert_tree",
    "check_depth",

    # errors
    "TreeError",
    "IndexOutOfRange",
    "LengthMismatch",
    "ShapeMismatch",
    "WitnessError",
    "WitnessUnderflow",
    "MotiveViolation",
    "DepthLimitExceeded",
]
