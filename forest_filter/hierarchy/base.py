"""Abstract flat-array view of a forest.

A :class:`Hierarchy` stores an ordered collection of ordered trees as a
sequence of ``(node_id, depth)`` entries laid out in DFS pre-order. Roots
have depth 0, their children depth 1, and so on. If the entry at position
``i`` has depth ``D``, the next entry has depth

* ``D + 1`` when it is a child of entry ``i``;
* ``D`` when it is a sibling of entry ``i``;
* ``d < D`` when it continues a branch opened higher up the forest.

Example::

    node ids: 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11
    depths:   0, 1, 2, 3, 1, 0, 1, 0, 1,  1,  2

    1
    - 2
    - - 3
    - - - 4
    - 5
    6
    - 7
    8
    - 9
    - 10
    - - 11
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator, List, Tuple

from forest_filter import config


class Hierarchy(ABC):
    """Read-only, index-addressed forest encoding.

    Implementations answer three queries and must not change their answers
    over the lifetime of the instance. ``node_id`` and ``depth`` raise
    :class:`IndexError` for positions outside ``[0, size())``.
    """

    @abstractmethod
    def size(self) -> int:
        """Number of entries."""

    @abstractmethod
    def node_id(self, index: int) -> int:
        """Node id stored at DFS position ``index``."""

    @abstractmethod
    def depth(self, index: int) -> int:
        """Depth (root = 0) stored at DFS position ``index``."""

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        for i in range(self.size()):
            yield self.node_id(i), self.depth(i)

    def entries(self) -> List[Tuple[int, int]]:
        """Return the ``(node_id, depth)`` pairs in DFS order."""
        return list(self)

    def format_string(self) -> str:
        """Render as ``"[id:depth, id:depth, ...]"``.

        Intended for test assertions and log messages; the format carries no
        meaning beyond the entry order it shows.
        """
        body = config.FORMAT_ENTRY_SEPARATOR.join(
            f"{node}{config.FORMAT_PAIR_SEPARATOR}{depth}" for node, depth in self
        )
        return f"{config.FORMAT_OPEN}{body}{config.FORMAT_CLOSE}"


__all__ = ["Hierarchy"]
