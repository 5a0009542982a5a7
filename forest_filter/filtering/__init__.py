"""Ancestor-closed filtering of flat hierarchies."""

from .errors import InconsistentStructureError, NullInputError
from .hierarchy_filter import NodeIdPredicate, filter_hierarchy

__all__ = [
    "filter_hierarchy",
    "NodeIdPredicate",
    "NullInputError",
    "InconsistentStructureError",
]
