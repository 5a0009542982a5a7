"""
Flat forest encoding.

This package provides the read-only ``Hierarchy`` contract, its NumPy-backed
implementation, and conversions to networkx, pandas and plain text.
"""

from .base import Hierarchy
from .array_hierarchy import ArrayHierarchy
from .io import (
    extract_branch,
    hierarchy_from_digraph,
    hierarchy_from_frame,
    hierarchy_to_digraph,
    hierarchy_to_frame,
    render_forest,
)

__all__ = [
    "Hierarchy",
    "ArrayHierarchy",
    "hierarchy_from_digraph",
    "hierarchy_from_frame",
    "hierarchy_to_digraph",
    "hierarchy_to_frame",
    "extract_branch",
    "render_forest",
]
