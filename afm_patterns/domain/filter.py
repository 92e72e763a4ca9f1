"""Filter domain - attribute, date and expression filters of an AFM.

Each variant carries a `kind` literal so the union is discriminated
explicitly instead of by probing for payload keys.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from afm_patterns.domain.qualifier import ObjQualifier

# Granularity emitted by date pickers for "All time". Must stay in sync
# with the producer of relative date filters.
ALL_TIME_GRANULARITY = "ALL_TIME_GRANULARITY"


class PositiveAttributeFilter(BaseModel):
    """Keep only rows whose attribute element is in `in_values`."""

    kind: Literal["positiveAttributeFilter"] = "positiveAttributeFilter"
    display_form: ObjQualifier
    in_values: list[str] = Field(default_factory=list)

    model_config = {"frozen": True, "extra": "forbid"}


class NegativeAttributeFilter(BaseModel):
    """Drop rows whose attribute element is in `not_in`."""

    kind: Literal["negativeAttributeFilter"] = "negativeAttributeFilter"
    display_form: ObjQualifier
    not_in: list[str] = Field(default_factory=list)

    model_config = {"frozen": True, "extra": "forbid"}


class AbsoluteDateFilter(BaseModel):
    """Restrict a date dataset to a fixed range (ISO dates, inclusive)."""

    kind: Literal["absoluteDateFilter"] = "absoluteDateFilter"
    data_set: ObjQualifier
    from_date: str
    to_date: str

    model_config = {"frozen": True, "extra": "forbid"}


class RelativeDateFilter(BaseModel):
    """
    Restrict a date dataset to a window relative to today.

    Offsets count `granularity` periods, e.g. GDC.time.month from -11 to 0
    is the last twelve months. The ALL_TIME_GRANULARITY sentinel means the
    dataset is not restricted at all.
    """

    kind: Literal["relativeDateFilter"] = "relativeDateFilter"
    data_set: ObjQualifier
    granularity: str
    from_offset: int = 0
    to_offset: int = 0

    model_config = {"frozen": True, "extra": "forbid"}


class ExpressionFilter(BaseModel):
    """Raw MAQL filter expression; neither an attribute nor a date filter."""

    kind: Literal["expressionFilter"] = "expressionFilter"
    value: str

    model_config = {"frozen": True, "extra": "forbid"}


AttributeFilter = Union[PositiveAttributeFilter, NegativeAttributeFilter]
DateFilter = Union[AbsoluteDateFilter, RelativeDateFilter]

FilterItem = Annotated[
    Union[
        PositiveAttributeFilter,
        NegativeAttributeFilter,
        AbsoluteDateFilter,
        RelativeDateFilter,
        ExpressionFilter,
    ],
    Field(discriminator="kind"),
]
