"""Tests for filter and measure variant classifiers."""

from typing import get_args

import pytest

from afm_patterns.core import (
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
from afm_patterns.domain import (
    ALL_TIME_GRANULARITY,
    AbsoluteDateFilter,
    ExpressionFilter,
    FilterItem,
    Measure,
    NegativeAttributeFilter,
    ObjQualifier,
    PopMeasureDefinition,
    PositiveAttributeFilter,
    RelativeDateFilter,
    SimpleMeasureDefinition,
)

POSITIVE = PositiveAttributeFilter(
    display_form=ObjQualifier(identifier="label.country"), in_values=["CZ"]
)
NEGATIVE = NegativeAttributeFilter(
    display_form=ObjQualifier(uri="/obj/7"), not_in=["Prague"]
)
ABSOLUTE = AbsoluteDateFilter(
    data_set=ObjQualifier(identifier="ds1"), from_date="2017-01-01", to_date="2017-12-31"
)
RELATIVE = RelativeDateFilter(
    data_set=ObjQualifier(identifier="ds1"),
    granularity="GDC.time.year",
    from_offset=-1,
    to_offset=0,
)
EXPRESSION = ExpressionFilter(value="[/obj/1] = [/obj/2]")

SIMPLE = Measure(
    local_identifier="m1",
    definition=SimpleMeasureDefinition(item=ObjQualifier(identifier="metric.revenue")),
)
POP = Measure(
    local_identifier="m1_pop",
    definition=PopMeasureDefinition(
        measure_identifier="m1", pop_attribute=ObjQualifier(identifier="date.year")
    ),
)


class TestFilterClassifiers:
    """Tests for filter predicates."""

    def test_attribute_filters(self):
        assert is_attribute_filter(POSITIVE)
        assert is_attribute_filter(NEGATIVE)
        assert not is_attribute_filter(ABSOLUTE)
        assert not is_attribute_filter(RELATIVE)

    def test_date_filters(self):
        assert is_date_filter(ABSOLUTE)
        assert is_date_filter(RELATIVE)
        assert not is_date_filter(POSITIVE)
        assert not is_date_filter(NEGATIVE)

    def test_expression_filter_is_neither(self):
        assert not is_attribute_filter(EXPRESSION)
        assert not is_date_filter(EXPRESSION)

    def test_absolute_vs_relative(self):
        assert is_date_filter_absolute(ABSOLUTE)
        assert not is_date_filter_absolute(RELATIVE)
        assert is_date_filter_relative(RELATIVE)
        assert not is_date_filter_relative(ABSOLUTE)


class TestIsAllTime:
    """Tests for the all-time sentinel check."""

    def test_relative_with_sentinel(self):
        f = RelativeDateFilter(
            data_set=ObjQualifier(identifier="ds1"), granularity=ALL_TIME_GRANULARITY
        )
        assert is_all_time(f)

    def test_relative_with_real_granularity(self):
        assert not is_all_time(RELATIVE)

    def test_absolute_is_never_all_time(self):
        assert not is_all_time(ABSOLUTE)

    def test_none(self):
        assert not is_all_time(None)


class TestMeasureClassifiers:
    """Tests for measure predicates and unwrapping."""

    def test_is_period_over_period(self):
        assert is_period_over_period(POP)
        assert not is_period_over_period(SIMPLE)

    def test_unwrap(self):
        assert unwrap_simple_measure(SIMPLE) is SIMPLE.definition
        assert unwrap_simple_measure(POP) is None
        assert unwrap_pop_measure(POP) is POP.definition
        assert unwrap_pop_measure(SIMPLE) is None

    def test_has_filters(self):
        assert not has_filters(SimpleMeasureDefinition(item=ObjQualifier(identifier="m")))
        assert not has_filters(
            SimpleMeasureDefinition(item=ObjQualifier(identifier="m"), filters=[])
        )
        assert has_filters(
            SimpleMeasureDefinition(item=ObjQualifier(identifier="m"), filters=[POSITIVE])
        )


class TestDataSetMatching:
    """Tests for dataset extraction and comparison."""

    def test_data_set(self):
        assert date_filter_data_set(ABSOLUTE).identifier == "ds1"
        assert date_filter_data_set(RELATIVE).identifier == "ds1"

    def test_same_dataset_across_variants(self):
        assert date_filters_data_sets_match(ABSOLUTE, RELATIVE)

    def test_different_datasets(self):
        other = RELATIVE.model_copy(update={"data_set": ObjQualifier(identifier="ds2")})
        assert not date_filters_data_sets_match(RELATIVE, other)

    def test_uri_and_identifier_do_not_cross_match(self):
        by_uri = RELATIVE.model_copy(update={"data_set": ObjQualifier(uri="ds1x")})
        assert not date_filters_data_sets_match(RELATIVE, by_uri)

    def test_unresolvable_never_matches(self):
        empty = RELATIVE.model_copy(update={"data_set": ObjQualifier()})
        assert not date_filters_data_sets_match(empty, empty)


class TestFilterCategory:
    """Every filter variant is classified explicitly."""

    @pytest.mark.parametrize(
        "filter_item, category, attribute, date, absolute, relative",
        [
            (POSITIVE, FilterCategory.ATTRIBUTE, True, False, False, False),
            (NEGATIVE, FilterCategory.ATTRIBUTE, True, False, False, False),
            (ABSOLUTE, FilterCategory.ABSOLUTE_DATE, False, True, True, False),
            (RELATIVE, FilterCategory.RELATIVE_DATE, False, True, False, True),
            (EXPRESSION, FilterCategory.EXPRESSION, False, False, False, False),
        ],
    )
    def test_truth_table(self, filter_item, category, attribute, date, absolute, relative):
        assert filter_category(filter_item) == category
        assert is_attribute_filter(filter_item) is attribute
        assert is_date_filter(filter_item) is date
        assert is_date_filter_absolute(filter_item) is absolute
        assert is_date_filter_relative(filter_item) is relative

    def test_every_variant_covered(self):
        variants = {
            type(f) for f in (POSITIVE, NEGATIVE, ABSOLUTE, RELATIVE, EXPRESSION)
        }
        assert variants == set(get_args(get_args(FilterItem)[0]))

    def test_unknown_variant_is_not_silently_classified(self):
        with pytest.raises(AssertionError):
            filter_category(SIMPLE)

        with pytest.raises(AssertionError):
            is_date_filter(SIMPLE)
