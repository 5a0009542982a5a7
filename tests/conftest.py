import os
import sys

import pytest

# Ensure the repository root is on sys.path so tests can import
# ``forest_filter`` without installing the package.
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from forest_filter.hierarchy.array_hierarchy import ArrayHierarchy  # noqa: E402

# 1
# - 2
# - - 3
# - - - 4
# - 5
# 6
# - 7
# 8
# - 9
# - 10
# - - 11
SAMPLE_NODE_IDS = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11]
SAMPLE_DEPTHS = [0, 1, 2, 3, 1, 0, 1, 0, 1, 1, 2]


@pytest.fixture
def sample_hierarchy() -> ArrayHierarchy:
    """Three-tree forest used throughout the filter tests."""
    return ArrayHierarchy(SAMPLE_NODE_IDS, SAMPLE_DEPTHS)
