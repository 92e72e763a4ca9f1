"""Variant classifiers for filters and measures.

These predicates are the single place where filter and measure variants
are told apart. Functions that dispatch over a union end with
`assert_never`, so a new variant added to the domain is reported by the
type checker at every site that has to handle it.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from typing_extensions import TypeGuard, assert_never

from afm_patterns.domain import (
    ALL_TIME_GRANULARITY,
    AbsoluteDateFilter,
    AttributeFilter,
    DateFilter,
    ExpressionFilter,
    Measure,
    NegativeAttributeFilter,
    ObjQualifier,
    PopMeasureDefinition,
    PositiveAttributeFilter,
    RelativeDateFilter,
    SimpleMeasureDefinition,
    resolve_id,
)

AnyFilter = Union[
    PositiveAttributeFilter,
    NegativeAttributeFilter,
    AbsoluteDateFilter,
    RelativeDateFilter,
    ExpressionFilter,
]


class FilterCategory(str, Enum):
    """Which family a filter variant belongs to."""

    ATTRIBUTE = "attribute"
    ABSOLUTE_DATE = "absolute_date"
    RELATIVE_DATE = "relative_date"
    EXPRESSION = "expression"


def filter_category(filter_item: AnyFilter) -> FilterCategory:
    """Classify a filter; every variant of the union must be listed here."""
    if isinstance(filter_item, PositiveAttributeFilter):
        return FilterCategory.ATTRIBUTE
    if isinstance(filter_item, NegativeAttributeFilter):
        return FilterCategory.ATTRIBUTE
    if isinstance(filter_item, AbsoluteDateFilter):
        return FilterCategory.ABSOLUTE_DATE
    if isinstance(filter_item, RelativeDateFilter):
        return FilterCategory.RELATIVE_DATE
    if isinstance(filter_item, ExpressionFilter):
        return FilterCategory.EXPRESSION
    assert_never(filter_item)


def is_attribute_filter(filter_item: AnyFilter) -> TypeGuard[AttributeFilter]:
    """True for positive and negative attribute filters."""
    return filter_category(filter_item) == FilterCategory.ATTRIBUTE


def is_date_filter(filter_item: AnyFilter) -> TypeGuard[DateFilter]:
    """True for absolute and relative date filters."""
    return filter_category(filter_item) in (
        FilterCategory.ABSOLUTE_DATE,
        FilterCategory.RELATIVE_DATE,
    )


def is_date_filter_absolute(filter_item: AnyFilter) -> TypeGuard[AbsoluteDateFilter]:
    return filter_category(filter_item) == FilterCategory.ABSOLUTE_DATE


def is_date_filter_relative(filter_item: AnyFilter) -> TypeGuard[RelativeDateFilter]:
    return filter_category(filter_item) == FilterCategory.RELATIVE_DATE


def is_all_time(date_filter: DateFilter | None) -> bool:
    """True when the filter is relative with the all-time granularity."""
    if date_filter is not None and is_date_filter_relative(date_filter):
        return date_filter.granularity == ALL_TIME_GRANULARITY
    return False


def unwrap_simple_measure(measure: Measure) -> SimpleMeasureDefinition | None:
    definition = measure.definition
    if isinstance(definition, SimpleMeasureDefinition):
        return definition
    if isinstance(definition, PopMeasureDefinition):
        return None
    assert_never(definition)


def unwrap_pop_measure(measure: Measure) -> PopMeasureDefinition | None:
    definition = measure.definition
    if isinstance(definition, PopMeasureDefinition):
        return definition
    if isinstance(definition, SimpleMeasureDefinition):
        return None
    assert_never(definition)


def is_period_over_period(measure: Measure) -> bool:
    """True when the measure is derived over a shifted period."""
    return unwrap_pop_measure(measure) is not None


def has_filters(definition: SimpleMeasureDefinition) -> bool:
    """True when a simple measure has at least one filter of its own."""
    return bool(definition.filters)


def date_filter_data_set(date_filter: DateFilter) -> ObjQualifier:
    """Return the qualifier of the date dataset a date filter restricts."""
    if isinstance(date_filter, AbsoluteDateFilter):
        return date_filter.data_set
    if isinstance(date_filter, RelativeDateFilter):
        return date_filter.data_set
    assert_never(date_filter)


def date_filters_data_sets_match(first: DateFilter, second: DateFilter) -> bool:
    """
    True when both filters restrict the same dataset.

    A dataset whose qualifier resolves to nothing never matches.
    """
    first_id = resolve_id(date_filter_data_set(first))
    second_id = resolve_id(date_filter_data_set(second))
    return first_id is not None and second_id is not None and first_id == second_id
