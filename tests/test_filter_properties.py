"""Randomized structural checks of filter_hierarchy over well-formed forests."""

from __future__ import annotations

import networkx as nx
import numpy as np
import pytest

from forest_filter.core_utils.tree_utils import ancestor_indices, is_well_formed
from forest_filter.filtering import filter_hierarchy
from forest_filter.hierarchy.array_hierarchy import ArrayHierarchy
from forest_filter.hierarchy.io import hierarchy_to_digraph

SEEDS = list(range(12))


def _random_forest(rng: np.random.Generator, n: int) -> ArrayHierarchy:
    depths = [0]
    for _ in range(n - 1):
        depths.append(int(rng.integers(0, depths[-1] + 2)))
    node_ids = (rng.permutation(n) + 1).tolist()
    return ArrayHierarchy(node_ids, depths)


def _random_case(seed: int) -> tuple[ArrayHierarchy, set[int]]:
    rng = np.random.default_rng(seed)
    n = int(rng.integers(1, 60))
    h = _random_forest(rng, n)
    n_failing = int(rng.integers(0, n + 1))
    failing = set(rng.choice(h.node_ids, size=n_failing, replace=False).tolist())
    return h, failing


@pytest.mark.parametrize("seed", SEEDS)
def test_matches_ancestor_closure_reference(seed):
    h, failing = _random_case(seed)
    graph = hierarchy_to_digraph(h)

    expected = [
        (node, depth)
        for node, depth in h
        if node not in failing and not (nx.ancestors(graph, node) & failing)
    ]
    actual = filter_hierarchy(h, lambda node_id: node_id not in failing)
    assert actual.entries() == expected


@pytest.mark.parametrize("seed", SEEDS)
def test_output_is_ancestor_closed_and_well_formed(seed):
    h, failing = _random_case(seed)
    actual = filter_hierarchy(h, lambda node_id: node_id not in failing)
    kept = {node for node, _ in actual}

    assert is_well_formed(actual)
    for i in range(h.size()):
        node = h.node_id(i)
        ancestors = [h.node_id(j) for j in ancestor_indices(h, i)]
        if node in kept:
            assert all(a in kept for a in ancestors)
        else:
            assert node in failing or any(a not in kept for a in ancestors)


@pytest.mark.parametrize("seed", SEEDS)
def test_parent_links_survive_filtering(seed):
    h, failing = _random_case(seed)
    actual = filter_hierarchy(h, lambda node_id: node_id not in failing)

    original_edges = set(hierarchy_to_digraph(h).edges)
    filtered_edges = set(hierarchy_to_digraph(actual).edges)
    assert filtered_edges <= original_edges


@pytest.mark.parametrize("seed", SEEDS)
def test_depths_preserved_and_size_bounded(seed):
    h, failing = _random_case(seed)
    actual = filter_hierarchy(h, lambda node_id: node_id not in failing)
    original_depth = dict(h.entries())

    assert actual.size() <= h.size()
    assert all(original_depth[node] == depth for node, depth in actual)
    if failing:
        assert actual.size() < h.size()
    else:
        assert actual == h


@pytest.mark.parametrize("seed", SEEDS)
def test_constant_predicates(seed):
    h, _ = _random_case(seed)
    assert filter_hierarchy(h, lambda node_id: True).entries() == h.entries()
    assert filter_hierarchy(h, lambda node_id: False).size() == 0
