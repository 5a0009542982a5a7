"""Tree utility functions for flat DFS-ordered hierarchies.

Low-level structural queries that only rely on the :class:`Hierarchy`
accessors, so both the filter and the conversion helpers can use them
without importing each other.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import numpy as np

if TYPE_CHECKING:
    from forest_filter.hierarchy.base import Hierarchy


def compute_parent_indices(hierarchy: Hierarchy) -> np.ndarray:
    """Compute the parent position of each entry.

    The parent of the entry at position ``i`` with depth ``d > 0`` is the
    nearest preceding position with depth ``d - 1``.

    Parameters
    ----------
    hierarchy
        Well-formed flat hierarchy.

    Returns
    -------
    np.ndarray
        Integer array of length ``hierarchy.size()``; ``-1`` marks roots.

    Raises
    ------
    ValueError
        If an entry has no preceding entry one level up (the depth jumped by
        more than one, or the first entry is not a root).
    """
    n = hierarchy.size()
    parents = np.full(n, -1, dtype=np.int64)
    # open_path[d] is the most recent position seen at depth d
    open_path: List[int] = []
    for i in range(n):
        d = hierarchy.depth(i)
        if d > len(open_path):
            raise ValueError(
                f"Entry {i} has depth {d} but no open ancestor at depth {d - 1}"
            )
        del open_path[d:]
        if d > 0:
            parents[i] = open_path[d - 1]
        open_path.append(i)
    return parents


def ancestor_indices(hierarchy: Hierarchy, index: int) -> List[int]:
    """Return the ancestor positions of ``index``, nearest first."""
    target = hierarchy.depth(index)
    ancestors: List[int] = []
    for j in range(index - 1, -1, -1):
        if target == 0:
            break
        if hierarchy.depth(j) == target - 1:
            ancestors.append(j)
            target -= 1
    return ancestors


def branch_end(hierarchy: Hierarchy, index: int) -> int:
    """Exclusive end position of the branch rooted at ``index``.

    The branch is ``index`` plus the contiguous run of following entries
    that are strictly deeper.
    """
    d = hierarchy.depth(index)
    end = index + 1
    n = hierarchy.size()
    while end < n and hierarchy.depth(end) > d:
        end += 1
    return end


def is_well_formed(hierarchy: Hierarchy) -> bool:
    """Check the full depth-step invariant.

    The first entry must have depth 0, depths must be non-negative, and
    each depth may exceed the previous one by at most 1. An empty
    hierarchy is well-formed.
    """
    previous = -1
    for i in range(hierarchy.size()):
        d = hierarchy.depth(i)
        if d < 0 or d > previous + 1:
            return False
        previous = d
    return True


__all__ = [
    "compute_parent_indices",
    "ancestor_indices",
    "branch_end",
    "is_well_formed",
]
