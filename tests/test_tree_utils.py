import numpy as np
import pytest

from forest_filter.core_utils.tree_utils import (
    ancestor_indices,
    branch_end,
    compute_parent_indices,
    is_well_formed,
)
from forest_filter.hierarchy.array_hierarchy import ArrayHierarchy


def test_compute_parent_indices(sample_hierarchy):
    parents = compute_parent_indices(sample_hierarchy)
    np.testing.assert_array_equal(
        parents, np.array([-1, 0, 1, 2, 0, -1, 5, -1, 7, 7, 9])
    )


def test_compute_parent_indices_rejects_depth_jump():
    with pytest.raises(ValueError, match="no open ancestor"):
        compute_parent_indices(ArrayHierarchy([1, 2], [0, 2]))


def test_compute_parent_indices_empty():
    assert compute_parent_indices(ArrayHierarchy.empty()).shape == (0,)


def test_ancestor_indices_nearest_first(sample_hierarchy):
    assert ancestor_indices(sample_hierarchy, 3) == [2, 1, 0]
    assert ancestor_indices(sample_hierarchy, 10) == [9, 7]
    assert ancestor_indices(sample_hierarchy, 5) == []


def test_branch_end(sample_hierarchy):
    assert branch_end(sample_hierarchy, 0) == 5
    assert branch_end(sample_hierarchy, 1) == 4
    assert branch_end(sample_hierarchy, 5) == 7
    assert branch_end(sample_hierarchy, 8) == 9
    assert branch_end(sample_hierarchy, 10) == 11


@pytest.mark.parametrize(
    "depths, expected",
    [
        ([], True),
        ([0, 1, 2, 0, 1, 1], True),
        ([1], False),
        ([0, 2], False),
        ([0, -1], False),
        ([0, 1, 2, 3, 0], True),
    ],
)
def test_is_well_formed(depths, expected):
    h = ArrayHierarchy(list(range(len(depths))), depths)
    assert is_well_formed(h) is expected
