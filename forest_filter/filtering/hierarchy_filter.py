"""Ancestor-closed filtering of flat DFS-ordered forests.

A node survives :func:`filter_hierarchy` iff its id passes the predicate and
every one of its ancestors passes it as well. The result is a new
:class:`~forest_filter.hierarchy.array_hierarchy.ArrayHierarchy`; the input
is only read.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Set

import numpy as np

from forest_filter import config
from forest_filter.filtering.errors import InconsistentStructureError, NullInputError
from forest_filter.filtering.logging import (
    log_filter_completion,
    log_filter_rejected,
    log_filter_start,
)
from forest_filter.hierarchy.array_hierarchy import ArrayHierarchy
from forest_filter.hierarchy.base import Hierarchy

logger = logging.getLogger(__name__)

NodeIdPredicate = Callable[[int], bool]


def _probe_size(hierarchy: Hierarchy) -> int:
    """Return ``hierarchy.size()`` after reading its last entry.

    Only the last position is probed: a length mismatch between backing
    arrays surfaces there as an :class:`IndexError`, an absent array as a
    :class:`TypeError` or :class:`AttributeError`. Empty hierarchies have
    nothing to probe.
    """
    try:
        n = hierarchy.size()
        if n > 0:
            hierarchy.node_id(n - 1)
            hierarchy.depth(n - 1)
    except (IndexError, TypeError, AttributeError) as exc:
        log_filter_rejected(f"{type(exc).__name__}: {exc}", logger)
        raise InconsistentStructureError() from exc
    return n


def _collect_excluded_ids(
    node_ids: np.ndarray,
    depths: np.ndarray,
    predicate: NodeIdPredicate,
) -> Set[int]:
    """Single scan marking failing nodes and everything below them.

    The scan is either healthy or inside a failed branch opened at
    ``failed_depth``. Strictly deeper entries inherit the failure without
    consulting the predicate; the next entry at or above ``failed_depth`` is
    evaluated afresh and either closes the branch or opens a new one.
    """
    excluded: Set[int] = set()
    failed = False
    failed_depth = 0
    for node, depth in zip(node_ids.tolist(), depths.tolist()):
        if failed and depth > failed_depth:
            excluded.add(node)
            continue
        if predicate(node):
            failed = False
        else:
            excluded.add(node)
            failed = True
            failed_depth = depth
    return excluded


def filter_hierarchy(
    hierarchy: Optional[Hierarchy],
    predicate: Optional[NodeIdPredicate],
) -> ArrayHierarchy:
    """Keep the nodes that pass ``predicate`` together with all their ancestors.

    Parameters
    ----------
    hierarchy
        Flat forest in DFS pre-order.
    predicate
        Called with a node id; a falsy result removes that node and its whole
        branch. Exceptions raised by the predicate propagate unchanged.

    Returns
    -------
    ArrayHierarchy
        Surviving entries in input order with their original depths.

    Raises
    ------
    NullInputError
        If ``hierarchy`` or ``predicate`` is ``None``.
    InconsistentStructureError
        If the last entry of a non-empty ``hierarchy`` cannot be read.

    Notes
    -----
    Exclusion is recorded per node id, not per position: when an id occurs
    more than once, all of its occurrences are dropped or kept together.
    """
    if hierarchy is None or predicate is None:
        log_filter_rejected(config.MSG_NULL_INPUT, logger)
        raise NullInputError()

    n = _probe_size(hierarchy)
    log_filter_start(n, logger)

    node_ids = np.empty(n, dtype=config.NODE_ID_DTYPE)
    depths = np.empty(n, dtype=config.DEPTH_DTYPE)
    for i in range(n):
        node_ids[i] = hierarchy.node_id(i)
        depths[i] = hierarchy.depth(i)

    excluded = _collect_excluded_ids(node_ids, depths, predicate)

    keep = ~np.isin(
        node_ids,
        np.fromiter(excluded, dtype=config.NODE_ID_DTYPE, count=len(excluded)),
    )
    result = ArrayHierarchy(node_ids[keep], depths[keep])

    log_filter_completion(n, result.size(), excluded, logger)
    return result


__all__ = ["filter_hierarchy", "NodeIdPredicate"]
