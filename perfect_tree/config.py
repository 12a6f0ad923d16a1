"""
Runtime configuration for perfect_tree.

Flags are read from the environment once, at import time:

    PERFECT_TREE_MAX_DEPTH=64     depth ceiling for tree construction
    PERFECT_TREE_TRACE_FOLDS=1    per-level debug logging inside dfold

Read them through the module (``config.MAX_DEPTH``), not by copying the
value, so tests can monkeypatch them.
"""

from __future__ import annotations

import os

DEFAULT_MAX_DEPTH = 64


def _int_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")
    return value


# Recursive algorithms use one Python frame per level, so this also bounds
# stack usage well below the interpreter's recursion limit.
MAX_DEPTH = _int_from_env("PERFECT_TREE_MAX_DEPTH", DEFAULT_MAX_DEPTH)

# Feature flag
TRACE_FOLDS_ENABLED = os.environ.get("PERFECT_TREE_TRACE_FOLDS", "0") == "1"
