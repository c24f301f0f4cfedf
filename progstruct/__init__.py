"""Dominator trees, SSA construction interfaces, scoped environments and curve constants."""

__version__ = "0.1.0"
__all__ = ["constants", "nonempty", "dominator_tree", "environment", "ssa_errors", "ssa_traits", "ssa"]