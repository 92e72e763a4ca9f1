"""AfmBuilder - turns execute-AFM wire documents into domain objects.

The wire format is the camelCase JSON accepted by the execute-AFM
resource, where every filter and measure definition is a single-key
object naming its variant:

    {"relativeDateFilter": {"dataSet": {"identifier": "dt"},
                            "granularity": "GDC.time.year",
                            "from": -1, "to": 0}}
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, NoReturn

from afm_patterns.domain import (
    AbsoluteDateFilter,
    Afm,
    AggregationType,
    Attribute,
    DateFilter,
    ExpressionFilter,
    FilterItem,
    Measure,
    NativeTotal,
    NegativeAttributeFilter,
    ObjQualifier,
    PopMeasureDefinition,
    PositiveAttributeFilter,
    RelativeDateFilter,
    SimpleMeasureDefinition,
)
from afm_patterns.ingestion.errors import AfmFormatError
from afm_patterns.ingestion.loader import AfmLoader


class AfmBuilder:
    """
    Build domain objects from parsed JSON/YAML.

    Accepts a bare AFM, `{"afm": {...}}` or `{"execution": {"afm": {...}}}`.
    """

    def __init__(self, source: str | None = None) -> None:
        self.source = source

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Afm:
        """Build an Afm from an already parsed document."""
        return cls().build_afm(data)

    @classmethod
    def from_file(cls, path: str | Path) -> Afm:
        """Load a JSON/YAML file and build an Afm from it."""
        document = AfmLoader(path).load_dict()
        return cls(source=str(path)).build_afm(document)

    @classmethod
    def filters_from_file(cls, path: str | Path) -> list[FilterItem]:
        """Load a list of filters (or `{"filters": [...]}`) from a file."""
        document = AfmLoader(path).load()
        return cls(source=str(path)).build_filters(document)

    @classmethod
    def date_filter_from_file(cls, path: str | Path) -> DateFilter:
        """Load a single date filter from a file."""
        document = AfmLoader(path).load()
        return cls(source=str(path)).build_date_filter(document)

    # =========================================================================
    # AFM
    # =========================================================================

    def build_afm(self, data: dict[str, Any]) -> Afm:
        """Build an Afm, unwrapping execution envelopes."""
        if "execution" in data:
            data = self._expect_dict(data["execution"], "execution")
        if "afm" in data:
            data = self._expect_dict(data["afm"], "afm")

        return Afm(
            attributes=self._build_optional(data, "attributes", self._build_attribute),
            measures=self._build_optional(data, "measures", self.build_measure),
            filters=self._build_optional(data, "filters", self.build_filter),
            native_totals=self._build_optional(
                data, "nativeTotals", self._build_native_total
            ),
        )

    def _build_optional(self, data: dict[str, Any], key: str, build: Any) -> Any:
        """Build a list section, keeping None when the key is absent."""
        items = data.get(key)
        if items is None:
            return None
        if not isinstance(items, list):
            self._fail(f"'{key}' must be a list, got {type(items).__name__}")
        return [build(item) for item in items]

    def _build_attribute(self, data: Any) -> Attribute:
        data = self._expect_dict(data, "attribute")
        return Attribute(
            local_identifier=self._require(data, "localIdentifier"),
            display_form=self.build_qualifier(self._require(data, "displayForm")),
            alias=data.get("alias"),
        )

    def _build_native_total(self, data: Any) -> NativeTotal:
        data = self._expect_dict(data, "native total")
        return NativeTotal(
            measure_identifier=self._require(data, "measureIdentifier"),
            attribute_identifiers=data.get("attributeIdentifiers", []),
        )

    # =========================================================================
    # Qualifiers
    # =========================================================================

    def build_qualifier(self, data: Any) -> ObjQualifier:
        """Build a qualifier; one carrying neither key is kept as-is."""
        data = self._expect_dict(data, "object qualifier")
        return ObjQualifier(uri=data.get("uri"), identifier=data.get("identifier"))

    # =========================================================================
    # Measures
    # =========================================================================

    def build_measure(self, data: Any) -> Measure:
        """Build a Measure from `{"localIdentifier", "definition", ...}`."""
        data = self._expect_dict(data, "measure")
        definition = self._expect_dict(data.get("definition"), "measure definition")

        if "measure" in definition:
            body = self._expect_dict(definition["measure"], "measure")
            aggregation = body.get("aggregation")
            filters = body.get("filters")
            built_definition: SimpleMeasureDefinition | PopMeasureDefinition = (
                SimpleMeasureDefinition(
                    item=self.build_qualifier(self._require(body, "item")),
                    aggregation=AggregationType(aggregation) if aggregation else None,
                    filters=self.build_filters(filters) if filters is not None else None,
                    compute_ratio=body.get("computeRatio", False),
                )
            )
        elif "popMeasure" in definition:
            body = self._expect_dict(definition["popMeasure"], "popMeasure")
            built_definition = PopMeasureDefinition(
                measure_identifier=self._require(body, "measureIdentifier"),
                pop_attribute=self.build_qualifier(self._require(body, "popAttribute")),
            )
        else:
            self._fail(f"Unknown measure definition: {sorted(definition)}")

        return Measure(
            local_identifier=self._require(data, "localIdentifier"),
            definition=built_definition,
            alias=data.get("alias"),
            format=data.get("format"),
        )

    # =========================================================================
    # Filters
    # =========================================================================

    def build_filters(self, data: Any) -> list[FilterItem]:
        """Build a filter list from a list or a `{"filters": [...]}` mapping."""
        if isinstance(data, dict) and "filters" in data:
            data = data["filters"]
        if not isinstance(data, list):
            self._fail(f"Expected a list of filters, got {type(data).__name__}")
        return [self.build_filter(item) for item in data]

    def build_filter(self, data: Any) -> FilterItem:
        """Build one filter from its single-key wire object."""
        data = self._expect_dict(data, "filter")

        if "positiveAttributeFilter" in data:
            body = self._expect_dict(data["positiveAttributeFilter"], "filter")
            return PositiveAttributeFilter(
                display_form=self.build_qualifier(self._require(body, "displayForm")),
                in_values=body.get("in", []),
            )
        if "negativeAttributeFilter" in data:
            body = self._expect_dict(data["negativeAttributeFilter"], "filter")
            return NegativeAttributeFilter(
                display_form=self.build_qualifier(self._require(body, "displayForm")),
                not_in=body.get("notIn", []),
            )
        if "absoluteDateFilter" in data or "relativeDateFilter" in data:
            return self.build_date_filter(data)
        if "value" in data:
            return ExpressionFilter(value=data["value"])

        self._fail(f"Unknown filter: {sorted(data)}")

    def build_date_filter(self, data: Any) -> DateFilter:
        """Build an absolute or relative date filter."""
        data = self._expect_dict(data, "date filter")

        if "absoluteDateFilter" in data:
            body = self._expect_dict(data["absoluteDateFilter"], "date filter")
            return AbsoluteDateFilter(
                data_set=self.build_qualifier(self._require(body, "dataSet")),
                from_date=str(self._require(body, "from")),
                to_date=str(self._require(body, "to")),
            )
        if "relativeDateFilter" in data:
            body = self._expect_dict(data["relativeDateFilter"], "date filter")
            return RelativeDateFilter(
                data_set=self.build_qualifier(self._require(body, "dataSet")),
                granularity=self._require(body, "granularity"),
                from_offset=body.get("from", 0),
                to_offset=body.get("to", 0),
            )

        self._fail(f"Not a date filter: {sorted(data)}")

    # =========================================================================
    # Helpers
    # =========================================================================

    def _expect_dict(self, data: Any, what: str) -> dict[str, Any]:
        if not isinstance(data, dict):
            self._fail(f"Expected {what} object, got {type(data).__name__}")
        return data

    def _require(self, data: dict[str, Any], key: str) -> Any:
        if key not in data:
            self._fail(f"Missing required key '{key}'")
        return data[key]

    def _fail(self, message: str) -> NoReturn:
        raise AfmFormatError(message, path=self.source)
