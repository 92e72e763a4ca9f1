"""Filter merge - add attribute filters and a date filter to an AFM.

Date filter handling:
    - a new date filter replaces the existing one for the same dataset
    - a new date filter for another dataset is added alongside
    - an all-time date filter removes the restriction for its dataset

Attribute filter handling:
    - all new attribute filters are appended, never deduplicated
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum

from afm_patterns.core.classifiers import (
    date_filters_data_sets_match,
    is_all_time,
    is_date_filter,
)
from afm_patterns.core.normalizer import normalize
from afm_patterns.domain import (
    Afm,
    AttributeFilter,
    DateFilter,
    FilterItem,
    NormalizedAfm,
    resolve_id,
)

logger = logging.getLogger(__name__)


class MergeStrategy(str, Enum):
    """Which existing date filters take part in a merge."""

    PER_DATASET = "per_dataset"  # every existing date filter, keyed by dataset
    FIRST_ONLY = "first_only"  # only the first one; later ones are dropped


def append_filters(
    afm: Afm | NormalizedAfm,
    attribute_filters: Sequence[AttributeFilter],
    date_filter: DateFilter | None = None,
    *,
    strategy: MergeStrategy = MergeStrategy.PER_DATASET,
) -> NormalizedAfm:
    """
    Return a new AFM with the given filters merged into its filter list.

    Result order: filters already present that are not date filters, then
    `attribute_filters`, then `date_filter` (unless it is all-time), then
    the existing date filters that survive the merge.

    Args:
        afm: AFM to merge into; may be partial
        attribute_filters: Attribute filters to append
        date_filter: Optional date filter replacing the one for its dataset
        strategy: Which existing date filters are consulted

    Returns:
        NormalizedAfm with only `filters` changed
    """
    normalized = normalize(afm)

    preserved: list[FilterItem] = []
    existing_date_filters: list[DateFilter] = []
    for item in normalized.filters:
        if is_date_filter(item):
            existing_date_filters.append(item)
        else:
            preserved.append(item)

    if strategy == MergeStrategy.FIRST_ONLY:
        if len(existing_date_filters) > 1:
            logger.debug(
                "Dropping %d date filters after the first one",
                len(existing_date_filters) - 1,
            )
        existing_date_filters = existing_date_filters[:1]

    filters: list[FilterItem] = [*preserved, *attribute_filters]

    if date_filter is not None and is_all_time(date_filter):
        logger.debug(
            "All-time filter clears date restriction for dataset %s",
            resolve_id(date_filter.data_set),
        )
    elif date_filter is not None:
        filters.append(date_filter)

    for existing in existing_date_filters:
        if date_filter is not None and date_filters_data_sets_match(existing, date_filter):
            logger.debug(
                "Replacing date filter for dataset %s", resolve_id(existing.data_set)
            )
            continue
        filters.append(existing)

    return normalized.model_copy(update={"filters": filters})
