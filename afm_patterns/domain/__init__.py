"""Domain layer - AFM value types.

This layer only describes shapes. Operations over them live in core/,
wire-format handling in ingestion/ and adapters/.
"""

from afm_patterns.domain.afm import Afm, Attribute, NativeTotal, NormalizedAfm
from afm_patterns.domain.filter import (
    ALL_TIME_GRANULARITY,
    AbsoluteDateFilter,
    AttributeFilter,
    DateFilter,
    ExpressionFilter,
    FilterItem,
    NegativeAttributeFilter,
    PositiveAttributeFilter,
    RelativeDateFilter,
)
from afm_patterns.domain.measure import (
    AggregationType,
    Measure,
    MeasureDefinition,
    PopMeasureDefinition,
    SimpleMeasureDefinition,
)
from afm_patterns.domain.qualifier import ObjQualifier, resolve_id

__all__ = [
    # AFM
    "Afm",
    "Attribute",
    "NativeTotal",
    "NormalizedAfm",
    # Filter
    "ALL_TIME_GRANULARITY",
    "AbsoluteDateFilter",
    "AttributeFilter",
    "DateFilter",
    "ExpressionFilter",
    "FilterItem",
    "NegativeAttributeFilter",
    "PositiveAttributeFilter",
    "RelativeDateFilter",
    # Measure
    "AggregationType",
    "Measure",
    "MeasureDefinition",
    "PopMeasureDefinition",
    "SimpleMeasureDefinition",
    # Qualifier
    "ObjQualifier",
    "resolve_id",
]
