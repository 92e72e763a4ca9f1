"""Rich formatting utilities for CLI output.

Documents are written as plain text so they can be piped; diagnostics go
to stderr through Rich panels.
"""

from __future__ import annotations

import json
from typing import Any

import yaml
from rich.panel import Panel
from rich.table import Table

from afm_patterns.core import (
    global_date_filters,
    is_afm_executable,
    is_period_over_period,
    measure_date_filters,
    normalize,
)
from afm_patterns.core.classifiers import date_filter_data_set
from afm_patterns.domain import Afm, DateFilter, NormalizedAfm, resolve_id


def format_document(data: dict[str, Any], output_format: str, indent: int) -> str:
    """Serialize a rendered AFM as JSON or YAML."""
    if output_format == "yaml":
        return yaml.safe_dump(data, sort_keys=False, indent=indent)
    return json.dumps(data, indent=indent)


def format_error(message: str, context: str | None = None) -> Panel:
    """Create formatted error panel.

    Args:
        message: Error message
        context: Optional context hint for resolution

    Returns:
        Panel with error formatting
    """
    content = f"[bold red]{message}[/bold red]"
    if context:
        content += f"\n\n[dim]{context}[/dim]"

    return Panel(
        content,
        title="[bold red]Error[/bold red]",
        border_style="red",
        width=78,
        expand=False,
    )


def _describe_date_filters(filters: list[DateFilter]) -> str:
    if not filters:
        return "-"
    datasets = [resolve_id(date_filter_data_set(f)) or "<unresolved>" for f in filters]
    return ", ".join(datasets)


def build_summary_table(afm: Afm | NormalizedAfm) -> Table:
    """Summarize an AFM: section sizes, date filters and executability."""
    normalized = normalize(afm)
    pop_count = sum(1 for m in normalized.measures if is_period_over_period(m))
    global_filters = global_date_filters(normalized)
    metric_filters = measure_date_filters(normalized)

    table = Table(title="AFM summary", show_header=True, header_style="bold")
    table.add_column("Property")
    table.add_column("Value")

    table.add_row("Attributes", str(len(normalized.attributes)))
    table.add_row("Measures", f"{len(normalized.measures)} ({pop_count} PoP)")
    table.add_row("Filters", str(len(normalized.filters)))
    table.add_row("Native totals", str(len(normalized.native_totals)))
    table.add_row("Global date filters", _describe_date_filters(global_filters))
    table.add_row("Measure date filters", _describe_date_filters(metric_filters))
    if is_afm_executable(normalized):
        table.add_row("Executable", "[green]yes[/green]")
    else:
        table.add_row("Executable", "[red]no[/red]")
    return table
