"""Core layer - pure operations over AFM values.

Nothing here performs I/O or keeps state between calls.
"""

from afm_patterns.core.classifiers import (
    FilterCategory,
    date_filter_data_set,
    date_filters_data_sets_match,
    filter_category,
    has_filters,
    is_all_time,
    is_attribute_filter,
    is_date_filter,
    is_date_filter_absolute,
    is_date_filter_relative,
    is_period_over_period,
    unwrap_pop_measure,
    unwrap_simple_measure,
)
from afm_patterns.core.merge import MergeStrategy, append_filters
from afm_patterns.core.normalizer import normalize
from afm_patterns.core.queries import (
    global_date_filters,
    has_global_date_filter,
    has_metric_date_filters,
    is_afm_executable,
    measure_date_filters,
)

__all__ = [
    # Classifiers
    "date_filter_data_set",
    "date_filters_data_sets_match",
    "FilterCategory",
    "filter_category",
    "has_filters",
    "is_all_time",
    "is_attribute_filter",
    "is_date_filter",
    "is_date_filter_absolute",
    "is_date_filter_relative",
    "is_period_over_period",
    "unwrap_pop_measure",
    "unwrap_simple_measure",
    # Merge
    "MergeStrategy",
    "append_filters",
    # Normalizer
    "normalize",
    # Queries
    "global_date_filters",
    "has_global_date_filter",
    "has_metric_date_filters",
    "is_afm_executable",
    "measure_date_filters",
]
