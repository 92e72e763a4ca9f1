"""Ingestion layer - JSON/YAML loading and domain building."""

from afm_patterns.ingestion.builder import AfmBuilder
from afm_patterns.ingestion.errors import AfmFormatError
from afm_patterns.ingestion.loader import AfmLoader

__all__ = ["AfmBuilder", "AfmFormatError", "AfmLoader"]
