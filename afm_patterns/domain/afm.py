"""AFM domain - the Analytical Form Model and its normalized shape."""

from __future__ import annotations

from pydantic import BaseModel, Field

from afm_patterns.domain.filter import FilterItem
from afm_patterns.domain.measure import Measure
from afm_patterns.domain.qualifier import ObjQualifier


class Attribute(BaseModel):
    """An attribute (by display form) to slice measures by."""

    local_identifier: str
    display_form: ObjQualifier
    alias: str | None = None

    model_config = {"frozen": True, "extra": "forbid"}


class NativeTotal(BaseModel):
    """A total computed natively by the backend for one measure."""

    measure_identifier: str
    attribute_identifiers: list[str] = Field(default_factory=list)

    model_config = {"frozen": True, "extra": "forbid"}


class Afm(BaseModel):
    """
    Analytical Form Model as supplied by callers.

    Every section is optional; use `normalize()` to get a NormalizedAfm.
    """

    attributes: list[Attribute] | None = None
    measures: list[Measure] | None = None
    filters: list[FilterItem] | None = None
    native_totals: list[NativeTotal] | None = None

    model_config = {"frozen": True, "extra": "forbid"}


class NormalizedAfm(BaseModel):
    """AFM with every section present (possibly empty)."""

    attributes: list[Attribute] = Field(default_factory=list)
    measures: list[Measure] = Field(default_factory=list)
    filters: list[FilterItem] = Field(default_factory=list)
    native_totals: list[NativeTotal] = Field(default_factory=list)

    model_config = {"frozen": True, "extra": "forbid"}
