"""Exceptions raised by :func:`~forest_filter.filtering.hierarchy_filter.filter_hierarchy`."""

from __future__ import annotations

from forest_filter import config


class NullInputError(ValueError):
    """The hierarchy or the predicate argument is ``None``."""

    def __init__(self, message: str = config.MSG_NULL_INPUT):
        super().__init__(message)


class InconsistentStructureError(ValueError):
    """The backing arrays of a hierarchy cannot be read consistently."""

    def __init__(self, message: str = config.MSG_INCONSISTENT):
        super().__init__(message)


__all__ = ["NullInputError", "InconsistentStructureError"]
