"""CLI utilities for afm-patterns.

Rich-based formatting utilities and custom Click help formatters.
"""

from __future__ import annotations

from afm_patterns.cli.formatting import build_summary_table, format_document, format_error
from afm_patterns.cli.help_formatter import RichCommand, RichGroup

__all__ = [
    "build_summary_table",
    "format_document",
    "format_error",
    "RichCommand",
    "RichGroup",
]
