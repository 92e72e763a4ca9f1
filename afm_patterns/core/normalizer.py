"""Normalizer - fills absent AFM sections with empty lists."""

from __future__ import annotations

from afm_patterns.domain import Afm, NormalizedAfm


def normalize(afm: Afm | NormalizedAfm) -> NormalizedAfm:
    """
    Return a NormalizedAfm where every section is a list.

    Idempotent: a NormalizedAfm comes back equal to itself. Element
    contents are not validated.
    """
    if isinstance(afm, NormalizedAfm):
        return afm

    return NormalizedAfm(
        attributes=list(afm.attributes or []),
        measures=list(afm.measures or []),
        filters=list(afm.filters or []),
        native_totals=list(afm.native_totals or []),
    )
