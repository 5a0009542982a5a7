"""
Central configuration for the forest-filter library.
"""

import numpy as np

# --- Error Messages ---

# Raised when the hierarchy or the predicate passed to the filter is None.
MSG_NULL_INPUT: str = "Hierarchy or predicate argument is absent."

# Raised when the backing arrays of a hierarchy cannot be probed consistently
# (mismatched lengths or an absent array).
MSG_INCONSISTENT: str = "Hierarchy arrays are inconsistent."

# --- Storage ---

# Dtype of the node id array held by ArrayHierarchy.
NODE_ID_DTYPE = np.int64

# Dtype of the depth array held by ArrayHierarchy.
DEPTH_DTYPE = np.int64

# --- Formatting ---

# Tokens used by Hierarchy.format_string(): "[1:0, 2:1]"
FORMAT_OPEN: str = "["
FORMAT_CLOSE: str = "]"
FORMAT_ENTRY_SEPARATOR: str = ", "
FORMAT_PAIR_SEPARATOR: str = ":"

# One indent unit per depth level in render_forest():
# 1
# - 2
# - - 3
RENDER_INDENT: str = "- "

# --- Logging ---

# Maximum number of excluded node ids listed in a single debug message.
LOG_PREVIEW_LIMIT: int = 10
