"""Measure domain - simple and period-over-period measures."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from afm_patterns.domain.filter import FilterItem
from afm_patterns.domain.qualifier import ObjQualifier


class AggregationType(str, Enum):
    """Aggregations applicable to a fact in a simple measure."""

    SUM = "sum"
    COUNT = "count"
    AVG = "avg"
    MIN = "min"
    MAX = "max"
    MEDIAN = "median"
    RUNSUM = "runsum"


class SimpleMeasureDefinition(BaseModel):
    """A metric or aggregated fact, optionally with its own filters."""

    kind: Literal["measure"] = "measure"
    item: ObjQualifier
    aggregation: AggregationType | None = None
    filters: list[FilterItem] | None = None
    compute_ratio: bool = False

    model_config = {"frozen": True, "extra": "forbid"}


class PopMeasureDefinition(BaseModel):
    """
    Period-over-Period measure derived from another measure of the AFM.

    Carries no filters of its own; it is shifted by `pop_attribute`.
    """

    kind: Literal["popMeasure"] = "popMeasure"
    measure_identifier: str  # local identifier of the base measure
    pop_attribute: ObjQualifier

    model_config = {"frozen": True, "extra": "forbid"}


MeasureDefinition = Annotated[
    Union[SimpleMeasureDefinition, PopMeasureDefinition],
    Field(discriminator="kind"),
]


class Measure(BaseModel):
    """A measure of the AFM, addressed by its local identifier."""

    local_identifier: str
    definition: MeasureDefinition
    alias: str | None = None
    format: str | None = None

    model_config = {"frozen": True, "extra": "forbid"}
