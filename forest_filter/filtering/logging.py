"""Small logging helpers for hierarchy filtering.

Functions are kept separate so callers can reuse the same messages without
pulling in the filter module itself.
"""

from __future__ import annotations

import logging
from typing import Collection

from forest_filter import config


def _default_filter_logger() -> logging.Logger:
    return logging.getLogger("forest_filter.filtering")


def log_filter_start(n_entries: int, logger: logging.Logger | None = None) -> None:
    """Log the start of a filter run."""
    logger = logger or _default_filter_logger()
    logger.debug("Filtering hierarchy with %d entries.", n_entries)


def log_filter_rejected(reason: str, logger: logging.Logger | None = None) -> None:
    """Log an input rejected before filtering."""
    logger = logger or _default_filter_logger()
    logger.warning("Rejected hierarchy filter input: %s", reason)


def log_filter_completion(
    n_entries: int,
    n_kept: int,
    excluded_ids: Collection[int],
    logger: logging.Logger | None = None,
) -> None:
    """Log the outcome of a filter run, previewing the excluded ids."""
    logger = logger or _default_filter_logger()
    if not logger.isEnabledFor(logging.DEBUG):
        return
    preview = sorted(excluded_ids)[: config.LOG_PREVIEW_LIMIT]
    suffix = ", ..." if len(excluded_ids) > config.LOG_PREVIEW_LIMIT else ""
    logger.debug(
        "Kept %d of %d entries; excluded ids: [%s%s]",
        n_kept,
        n_entries,
        ", ".join(str(i) for i in preview),
        suffix,
    )
