"""
afm-patterns: normalize and merge filters of an Analytical Form Model (AFM).

Architecture:
    JSON/YAML → Ingestion (AfmBuilder) → Domain (Afm) → Core → Adapter → dict

Layers:
    - domain/: Frozen AFM types (qualifiers, attributes, measures, filters)
    - core/: Pure operations (classifiers, normalizer, queries, filter merge)
    - ingestion/: Wire-format loading and domain object construction
    - adapters/: Rendering back to the wire format

Key Concepts:
    - AFMs are values; every operation returns a new AFM
    - One date filter per dataset; ALL_TIME_GRANULARITY clears a restriction
"""

from afm_patterns.core import (
    MergeStrategy,
    append_filters,
    global_date_filters,
    has_global_date_filter,
    has_metric_date_filters,
    is_afm_executable,
    is_all_time,
    is_attribute_filter,
    is_date_filter,
    is_period_over_period,
    measure_date_filters,
    normalize,
)
from afm_patterns.domain import ALL_TIME_GRANULARITY, Afm, NormalizedAfm, resolve_id

__version__ = "0.1.0"

__all__ = [
    "ALL_TIME_GRANULARITY",
    "Afm",
    "MergeStrategy",
    "NormalizedAfm",
    "append_filters",
    "global_date_filters",
    "has_global_date_filter",
    "has_metric_date_filters",
    "is_afm_executable",
    "is_all_time",
    "is_attribute_filter",
    "is_date_filter",
    "is_period_over_period",
    "measure_date_filters",
    "normalize",
    "resolve_id",
]
