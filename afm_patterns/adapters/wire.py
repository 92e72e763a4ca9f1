"""Render AFM domain objects back to the execute-AFM wire format."""

from __future__ import annotations

from typing import Any

from typing_extensions import assert_never

from afm_patterns.domain import (
    AbsoluteDateFilter,
    Afm,
    Attribute,
    ExpressionFilter,
    FilterItem,
    Measure,
    NativeTotal,
    NegativeAttributeFilter,
    NormalizedAfm,
    ObjQualifier,
    PopMeasureDefinition,
    PositiveAttributeFilter,
    RelativeDateFilter,
    SimpleMeasureDefinition,
)


def render_afm(afm: Afm | NormalizedAfm) -> dict[str, Any]:
    """Render an AFM; sections that are None are omitted."""
    result: dict[str, Any] = {}
    if afm.attributes is not None:
        result["attributes"] = [render_attribute(a) for a in afm.attributes]
    if afm.measures is not None:
        result["measures"] = [render_measure(m) for m in afm.measures]
    if afm.filters is not None:
        result["filters"] = [render_filter(f) for f in afm.filters]
    if afm.native_totals is not None:
        result["nativeTotals"] = [render_native_total(t) for t in afm.native_totals]
    return result


def render_qualifier(qualifier: ObjQualifier) -> dict[str, str]:
    result: dict[str, str] = {}
    if qualifier.uri is not None:
        result["uri"] = qualifier.uri
    if qualifier.identifier is not None:
        result["identifier"] = qualifier.identifier
    return result


def render_attribute(attribute: Attribute) -> dict[str, Any]:
    result: dict[str, Any] = {
        "localIdentifier": attribute.local_identifier,
        "displayForm": render_qualifier(attribute.display_form),
    }
    if attribute.alias is not None:
        result["alias"] = attribute.alias
    return result


def render_native_total(total: NativeTotal) -> dict[str, Any]:
    return {
        "measureIdentifier": total.measure_identifier,
        "attributeIdentifiers": list(total.attribute_identifiers),
    }


def render_measure(measure: Measure) -> dict[str, Any]:
    definition = measure.definition
    if isinstance(definition, SimpleMeasureDefinition):
        body: dict[str, Any] = {"item": render_qualifier(definition.item)}
        if definition.aggregation is not None:
            body["aggregation"] = definition.aggregation.value
        if definition.filters is not None:
            body["filters"] = [render_filter(f) for f in definition.filters]
        if definition.compute_ratio:
            body["computeRatio"] = True
        rendered_definition = {"measure": body}
    elif isinstance(definition, PopMeasureDefinition):
        rendered_definition = {
            "popMeasure": {
                "measureIdentifier": definition.measure_identifier,
                "popAttribute": render_qualifier(definition.pop_attribute),
            }
        }
    else:
        assert_never(definition)

    result: dict[str, Any] = {
        "localIdentifier": measure.local_identifier,
        "definition": rendered_definition,
    }
    if measure.alias is not None:
        result["alias"] = measure.alias
    if measure.format is not None:
        result["format"] = measure.format
    return result


def render_filter(filter_item: FilterItem) -> dict[str, Any]:
    """Render one filter as its single-key wire object."""
    if isinstance(filter_item, PositiveAttributeFilter):
        return {
            "positiveAttributeFilter": {
                "displayForm": render_qualifier(filter_item.display_form),
                "in": list(filter_item.in_values),
            }
        }
    if isinstance(filter_item, NegativeAttributeFilter):
        return {
            "negativeAttributeFilter": {
                "displayForm": render_qualifier(filter_item.display_form),
                "notIn": list(filter_item.not_in),
            }
        }
    if isinstance(filter_item, AbsoluteDateFilter):
        return {
            "absoluteDateFilter": {
                "dataSet": render_qualifier(filter_item.data_set),
                "from": filter_item.from_date,
                "to": filter_item.to_date,
            }
        }
    if isinstance(filter_item, RelativeDateFilter):
        return {
            "relativeDateFilter": {
                "dataSet": render_qualifier(filter_item.data_set),
                "granularity": filter_item.granularity,
                "from": filter_item.from_offset,
                "to": filter_item.to_offset,
            }
        }
    if isinstance(filter_item, ExpressionFilter):
        return {"value": filter_item.value}
    assert_never(filter_item)
