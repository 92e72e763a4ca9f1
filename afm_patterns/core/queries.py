"""Read-only projections over an AFM."""

from __future__ import annotations

from afm_patterns.core.classifiers import (
    has_filters,
    is_date_filter,
    unwrap_simple_measure,
)
from afm_patterns.core.normalizer import normalize
from afm_patterns.domain import Afm, DateFilter, NormalizedAfm


def global_date_filters(afm: Afm | NormalizedAfm) -> list[DateFilter]:
    """Date filters of the AFM-level filter list, in original order."""
    return [f for f in normalize(afm).filters if is_date_filter(f)]


def has_global_date_filter(afm: Afm | NormalizedAfm) -> bool:
    return any(is_date_filter(f) for f in normalize(afm).filters)


def measure_date_filters(afm: Afm | NormalizedAfm) -> list[DateFilter]:
    """
    Date filters attached directly to simple measures.

    Period-over-Period measures are skipped. Ordered by measure, then by
    position within each measure's filters.
    """
    date_filters: list[DateFilter] = []
    for measure in normalize(afm).measures:
        definition = unwrap_simple_measure(measure)
        if definition is None or not has_filters(definition):
            continue
        date_filters.extend(f for f in definition.filters or [] if is_date_filter(f))
    return date_filters


def has_metric_date_filters(afm: Afm | NormalizedAfm) -> bool:
    """True when any simple measure carries a date filter."""
    return bool(measure_date_filters(afm))


def is_afm_executable(afm: Afm | NormalizedAfm) -> bool:
    """
    True when the AFM has something to compute.

    Filters and native totals alone describe a restriction of nothing,
    so only measures or attributes make an AFM executable.
    """
    normalized = normalize(afm)
    return len(normalized.measures) > 0 or len(normalized.attributes) > 0
