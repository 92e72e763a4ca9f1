"""Merge command for afm-patterns CLI."""

from __future__ import annotations

from pathlib import Path

import click

from afm_patterns.cli.help_formatter import RichCommand
from afm_patterns.cli.utils import Settings, common_options, emit_afm, reported_errors
from afm_patterns.core import MergeStrategy, append_filters, is_attribute_filter
from afm_patterns.domain import AttributeFilter, DateFilter
from afm_patterns.ingestion import AfmBuilder


@click.command(cls=RichCommand)
@click.argument("afm_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--filters",
    "filters_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON/YAML list of attribute filters to append",
)
@click.option(
    "--date-filter",
    "date_filter_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON/YAML date filter replacing the one for its dataset",
)
@click.option(
    "--strategy",
    type=click.Choice([s.value for s in MergeStrategy]),
    default=None,
    help="Which existing date filters take part (default from config)",
)
@common_options
def merge(
    afm_file: Path,
    filters_file: Path | None,
    date_filter_file: Path | None,
    strategy: str | None,
    settings: Settings,
) -> None:
    """Merge attribute filters and a date filter into AFM_FILE.

    Attribute filters are appended as given. A date filter replaces the
    existing date filter for the same dataset; one with granularity
    ALL_TIME_GRANULARITY removes it.

    ## Examples

        $ afm merge execution.json --filters filters.json

        $ afm merge execution.json --date-filter last_year.yml
    """
    attribute_filters: list[AttributeFilter] = []
    date_filter: DateFilter | None = None

    with reported_errors(settings.debug):
        afm = AfmBuilder.from_file(afm_file)
        if filters_file is not None:
            for item in AfmBuilder.filters_from_file(filters_file):
                if not is_attribute_filter(item):
                    raise ValueError(
                        f"{filters_file}: only attribute filters can be appended, "
                        f"got {item.kind} (use --date-filter for date filters)"
                    )
                attribute_filters.append(item)
        if date_filter_file is not None:
            date_filter = AfmBuilder.date_filter_from_file(date_filter_file)

    merged = append_filters(
        afm,
        attribute_filters,
        date_filter,
        strategy=MergeStrategy(strategy) if strategy else settings.strategy,
    )
    emit_afm(merged, settings)
