"""Adapters - render domain objects to output formats."""

from afm_patterns.adapters.wire import render_afm, render_filter, render_measure

__all__ = ["render_afm", "render_filter", "render_measure"]
