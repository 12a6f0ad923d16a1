"""
Pytest configuration for perfect_tree tests.

Provides:
- Hypothesis configuration for deterministic fuzzing
- Shared tree fixtures (the depth-2 <<1,2>,<3,4>> example tree)
"""

import os
import pytest

from perfect_tree import Branch, Leaf

# =============================================================================
# Hypothesis Configuration
# =============================================================================
# - Database caches found examples for faster reruns (uses .hypothesis/ by default)
# - print_blob=True makes failures easy to reproduce
# NOTE: Do NOT set database=None - that DISABLES the database. Omit to use default.

try:
    from hypothesis import settings

    settings.register_profile(
        "default",
        print_blob=True,
        derandomize=False,
    )

    # CI profile: fixed seed so a red build reproduces locally
    settings.register_profile(
        "ci",
        print_blob=True,
        derandomize=True,
    )

    # Load profile from HYPOTHESIS_PROFILE env var, default to "default"
    profile = os.environ.get("HYPOTHESIS_PROFILE", "default")
    settings.load_profile(profile)

except ImportError:
    pass  # hypothesis not installed, fuzzer modules skip themselves


# =============================================================================
# Shared Fixtures
# =============================================================================

@pytest.fixture
def tree4():
    """Depth-2 tree <<1,2>,<3,4>>."""
    return Branch(Branch(Leaf(1), Leaf(2)), Branch(Leaf(3), Leaf(4)))
