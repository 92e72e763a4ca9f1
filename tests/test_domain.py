"""Tests for AFM domain types and qualifier resolution."""

import pytest
from pydantic import ValidationError

from afm_patterns.domain import (
    ALL_TIME_GRANULARITY,
    Afm,
    Attribute,
    Measure,
    NormalizedAfm,
    ObjQualifier,
    PopMeasureDefinition,
    PositiveAttributeFilter,
    RelativeDateFilter,
    SimpleMeasureDefinition,
    resolve_id,
)


class TestResolveId:
    """Tests for resolve_id."""

    def test_uri(self):
        assert resolve_id(ObjQualifier(uri="/gdc/md/p/obj/1")) == "/gdc/md/p/obj/1"

    def test_identifier(self):
        assert resolve_id(ObjQualifier(identifier="date.dataset")) == "date.dataset"

    def test_uri_wins_over_identifier(self):
        qualifier = ObjQualifier(uri="/gdc/md/p/obj/1", identifier="date.dataset")
        assert resolve_id(qualifier) == "/gdc/md/p/obj/1"

    def test_neither_resolves_to_none(self):
        assert resolve_id(ObjQualifier()) is None

    def test_empty_strings_resolve_to_none(self):
        assert resolve_id(ObjQualifier(uri="", identifier="")) is None

    def test_none_qualifier(self):
        assert resolve_id(None) is None

    def test_factories(self):
        assert ObjQualifier.by_uri("/obj/2").uri == "/obj/2"
        assert ObjQualifier.by_identifier("ds").identifier == "ds"


class TestFilters:
    """Tests for filter variants."""

    def test_relative_date_filter_defaults(self):
        f = RelativeDateFilter(
            data_set=ObjQualifier(identifier="ds1"), granularity="GDC.time.year"
        )
        assert f.kind == "relativeDateFilter"
        assert f.from_offset == 0
        assert f.to_offset == 0

    def test_all_time_constant(self):
        assert ALL_TIME_GRANULARITY == "ALL_TIME_GRANULARITY"

    def test_filters_are_frozen(self):
        f = PositiveAttributeFilter(
            display_form=ObjQualifier(identifier="label.country"), in_values=["CZ"]
        )
        with pytest.raises(ValidationError):
            f.in_values = ["US"]

    def test_discriminated_parsing(self):
        afm = Afm.model_validate(
            {
                "filters": [
                    {
                        "kind": "relativeDateFilter",
                        "data_set": {"identifier": "ds1"},
                        "granularity": "GDC.time.month",
                    },
                    {
                        "kind": "negativeAttributeFilter",
                        "display_form": {"uri": "/obj/5"},
                        "not_in": ["a"],
                    },
                ]
            }
        )
        assert isinstance(afm.filters[0], RelativeDateFilter)
        assert afm.filters[1].kind == "negativeAttributeFilter"

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            Afm.model_validate({"filters": [{"kind": "fancyFilter"}]})


class TestMeasures:
    """Tests for measure variants."""

    def test_simple_measure(self):
        measure = Measure(
            local_identifier="m1",
            definition=SimpleMeasureDefinition(item=ObjQualifier(identifier="metric.revenue")),
        )
        assert measure.definition.kind == "measure"
        assert measure.definition.filters is None

    def test_pop_measure(self):
        measure = Measure(
            local_identifier="m1_pop",
            definition=PopMeasureDefinition(
                measure_identifier="m1",
                pop_attribute=ObjQualifier(identifier="date.year"),
            ),
        )
        assert measure.definition.kind == "popMeasure"

    def test_pop_measure_has_no_filters(self):
        with pytest.raises(ValidationError):
            PopMeasureDefinition(
                measure_identifier="m1",
                pop_attribute=ObjQualifier(identifier="date.year"),
                filters=[],
            )


class TestAfm:
    """Tests for Afm and NormalizedAfm."""

    def test_afm_sections_default_to_none(self):
        afm = Afm()
        assert afm.attributes is None
        assert afm.measures is None
        assert afm.filters is None
        assert afm.native_totals is None

    def test_normalized_sections_default_to_empty(self):
        afm = NormalizedAfm()
        assert afm.attributes == []
        assert afm.measures == []
        assert afm.filters == []
        assert afm.native_totals == []

    def test_attribute(self):
        attribute = Attribute(
            local_identifier="a1", display_form=ObjQualifier(identifier="label.city")
        )
        assert Afm(attributes=[attribute]).attributes == [attribute]
