# perfect_tree/core/__init__.py
# No re-exports here: validate imports core.nat while core.tree imports validate.
