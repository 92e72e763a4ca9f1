"""Qualifier domain - references to metadata objects by URI or identifier."""

from __future__ import annotations

from pydantic import BaseModel


class ObjQualifier(BaseModel):
    """
    Reference to a metadata object (display form, dataset, metric).

    Exactly one of `uri` / `identifier` is expected. A qualifier carrying
    neither is still valid; it simply never matches anything.
    """

    uri: str | None = None  # e.g. /gdc/md/project/obj/123
    identifier: str | None = None  # e.g. date.dataset.dt

    @classmethod
    def by_uri(cls, uri: str) -> ObjQualifier:
        return cls(uri=uri)

    @classmethod
    def by_identifier(cls, identifier: str) -> ObjQualifier:
        return cls(identifier=identifier)

    model_config = {"frozen": True, "extra": "forbid"}


def resolve_id(qualifier: ObjQualifier | None) -> str | None:
    """Return the URI if present, else the identifier, else None."""
    if qualifier is None:
        return None
    if qualifier.uri:
        return qualifier.uri
    if qualifier.identifier:
        return qualifier.identifier
    return None
