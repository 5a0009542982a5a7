"""I/O helpers for moving a :class:`Hierarchy` to and from other representations.

Each public function either flattens an external representation (a
``networkx`` forest, a ``pandas`` table) into an :class:`ArrayHierarchy` or
expands a hierarchy back out. Parent links are always derived with
:func:`~forest_filter.core_utils.tree_utils.compute_parent_indices`.
"""

from __future__ import annotations

from typing import List

import networkx as nx
import numpy as np
import pandas as pd

from forest_filter import config
from forest_filter.core_utils.tree_utils import branch_end, compute_parent_indices
from forest_filter.hierarchy.array_hierarchy import ArrayHierarchy
from forest_filter.hierarchy.base import Hierarchy

FRAME_COLUMNS = ("node_id", "depth", "parent_id")


def _require_int_label(node) -> int:
    if isinstance(node, (bool, np.bool_)) or not isinstance(node, (int, np.integer)):
        raise ValueError(f"Node labels must be integers, got {node!r}")
    return int(node)


# ---------------------------------------------------------------------------
# networkx
# ---------------------------------------------------------------------------


def hierarchy_from_digraph(graph: nx.DiGraph) -> ArrayHierarchy:
    """Flatten a directed forest into DFS pre-order.

    Parameters
    ----------
    graph
        Directed graph whose edges point from parent to child. Every node
        must have at most one parent and the graph must be acyclic. Node
        labels become node ids and must be integers.

    Returns
    -------
    ArrayHierarchy
        Roots (in-degree 0) appear in graph insertion order; children follow
        successor order.
    """
    if graph.number_of_nodes() == 0:
        return ArrayHierarchy.empty()
    if not nx.is_branching(graph):
        raise ValueError("Graph is not a forest (cycle or node with several parents)")

    roots = [n for n in graph.nodes if graph.in_degree(n) == 0]
    node_ids: List[int] = []
    depths: List[int] = []
    for root in roots:
        root_depths = nx.single_source_shortest_path_length(graph, root)
        for node in nx.dfs_preorder_nodes(graph, root):
            node_ids.append(_require_int_label(node))
            depths.append(root_depths[node])
    return ArrayHierarchy(node_ids, depths)


def hierarchy_to_digraph(hierarchy: Hierarchy) -> nx.DiGraph:
    """Expand a hierarchy into a directed forest.

    Nodes carry ``depth`` and ``position`` (DFS index) attributes and
    ``graph.graph["roots"]`` lists the root ids in order.

    Raises
    ------
    ValueError
        If node ids repeat, since graph nodes are keyed by id.
    """
    parents = compute_parent_indices(hierarchy)
    G = nx.DiGraph()
    roots: List[int] = []
    for i, (node, depth) in enumerate(hierarchy):
        if node in G:
            raise ValueError(f"Duplicate node id {node} at position {i}")
        G.add_node(node, depth=depth, position=i)
        if parents[i] < 0:
            roots.append(node)
        else:
            G.add_edge(hierarchy.node_id(int(parents[i])), node)
    G.graph["roots"] = roots
    return G


# ---------------------------------------------------------------------------
# pandas
# ---------------------------------------------------------------------------


def hierarchy_to_frame(hierarchy: Hierarchy) -> pd.DataFrame:
    """Tabulate a hierarchy as ``node_id``, ``depth`` and ``parent_id`` columns.

    The index is the DFS position. ``parent_id`` uses the nullable ``Int64``
    dtype so roots hold ``<NA>``.
    """
    entries = hierarchy.entries()
    node_ids = np.array([e[0] for e in entries], dtype=config.NODE_ID_DTYPE)
    depths = np.array([e[1] for e in entries], dtype=config.DEPTH_DTYPE)
    parents = compute_parent_indices(hierarchy)

    parent_ids = pd.array(
        [node_ids[p] if p >= 0 else pd.NA for p in parents], dtype="Int64"
    )
    frame = pd.DataFrame(
        {"node_id": node_ids, "depth": depths, "parent_id": parent_ids},
        columns=list(FRAME_COLUMNS),
    )
    frame.index.name = "position"
    return frame


def hierarchy_from_frame(frame: pd.DataFrame) -> ArrayHierarchy:
    """Rebuild a hierarchy from the ``node_id`` and ``depth`` columns of ``frame``.

    Rows are taken in their current order; ``parent_id`` is ignored.
    """
    missing = [c for c in ("node_id", "depth") if c not in frame.columns]
    if missing:
        raise ValueError(f"Frame is missing columns: {missing}")
    return ArrayHierarchy(frame["node_id"].to_numpy(), frame["depth"].to_numpy())


# ---------------------------------------------------------------------------
# Branches
# ---------------------------------------------------------------------------


def extract_branch(hierarchy: Hierarchy, index: int) -> ArrayHierarchy:
    """Copy the branch rooted at position ``index`` into a new hierarchy.

    Depths are shifted so the branch root sits at depth 0.
    """
    end = branch_end(hierarchy, index)
    offset = hierarchy.depth(index)
    return ArrayHierarchy(
        [hierarchy.node_id(i) for i in range(index, end)],
        [hierarchy.depth(i) - offset for i in range(index, end)],
    )


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------


def render_forest(hierarchy: Hierarchy) -> str:
    """Draw the forest one node per line, indenting by depth.

    >>> render_forest(ArrayHierarchy([1, 2, 3, 4], [0, 1, 1, 0]))
    '1\\n- 2\\n- 3\\n4'
    """
    return "\n".join(f"{config.RENDER_INDENT * depth}{node}" for node, depth in hierarchy)


__all__ = [
    "hierarchy_from_digraph",
    "hierarchy_to_digraph",
    "hierarchy_to_frame",
    "hierarchy_from_frame",
    "extract_branch",
    "render_forest",
]
