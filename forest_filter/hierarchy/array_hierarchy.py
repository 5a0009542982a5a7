"""NumPy-backed :class:`Hierarchy` implementation."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple

import numpy as np

from forest_filter import config
from forest_filter.hierarchy.base import Hierarchy


def _as_readonly(values: Optional[Sequence[int]], dtype) -> Optional[np.ndarray]:
    """Copy ``values`` into a 1-D read-only array; ``None`` stays ``None``."""
    if values is None:
        return None
    arr = np.array(values, dtype=dtype)
    if arr.ndim != 1:
        raise ValueError(f"Expected a 1-D sequence, got shape {arr.shape}")
    arr.setflags(write=False)
    return arr


class ArrayHierarchy(Hierarchy):
    """Hierarchy stored as two parallel integer arrays.

    Parameters
    ----------
    node_ids
        Node identifiers in DFS pre-order. ``None`` marks an absent array.
    depths
        Depth of each entry (root = 0). ``None`` marks an absent array.

    Notes
    -----
    Both inputs are copied and the copies are flagged read-only, so later
    changes to the caller's sequences are not visible here.

    The two arrays are not required to have the same length. When they
    differ, :meth:`size` reports the longer one and the trailing positions
    raise :class:`IndexError` on the shorter array; when one is absent,
    :meth:`size` raises :class:`TypeError`. The filter reports both
    situations as an inconsistent structure.
    """

    def __init__(
        self,
        node_ids: Optional[Sequence[int]],
        depths: Optional[Sequence[int]],
    ):
        self._node_ids = _as_readonly(node_ids, config.NODE_ID_DTYPE)
        self._depths = _as_readonly(depths, config.DEPTH_DTYPE)

    # ---------------- Constructors ----------------

    @classmethod
    def from_entries(cls, entries: Iterable[Tuple[int, int]]) -> "ArrayHierarchy":
        """Build from an iterable of ``(node_id, depth)`` pairs."""
        pairs = list(entries)
        return cls([p[0] for p in pairs], [p[1] for p in pairs])

    @classmethod
    def empty(cls) -> "ArrayHierarchy":
        """Return a hierarchy with no entries."""
        return cls([], [])

    # ---------------- Hierarchy contract ----------------

    def size(self) -> int:
        if self._node_ids is None or self._depths is None:
            raise TypeError("Hierarchy backing array is absent")
        return max(self._node_ids.shape[0], self._depths.shape[0])

    def node_id(self, index: int) -> int:
        self._check_index(index)
        return int(self._node_ids[index])

    def depth(self, index: int) -> int:
        self._check_index(index)
        return int(self._depths[index])

    def _check_index(self, index: int) -> None:
        # Negative positions would silently wrap around in numpy.
        if not 0 <= index < self.size():
            raise IndexError(f"Index {index} out of range for size {self.size()}")

    # ---------------- Array access ----------------

    @property
    def node_ids(self) -> Optional[np.ndarray]:
        """Read-only node id array (``None`` when absent)."""
        return self._node_ids

    @property
    def depths(self) -> Optional[np.ndarray]:
        """Read-only depth array (``None`` when absent)."""
        return self._depths

    # ---------------- Dunder helpers ----------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hierarchy):
            return NotImplemented
        return self.entries() == other.entries()

    def __hash__(self) -> int:
        return hash(tuple(self.entries()))

    def __repr__(self) -> str:
        if self._node_ids is None or self._depths is None:
            return "<ArrayHierarchy absent>"
        if self._node_ids.shape != self._depths.shape:
            return (
                f"<ArrayHierarchy inconsistent ids={self._node_ids.shape[0]} "
                f"depths={self._depths.shape[0]}>"
            )
        return f"<ArrayHierarchy {self.format_string()}>"


__all__ = ["ArrayHierarchy"]
