"""Normalize command for afm-patterns CLI."""

from __future__ import annotations

from pathlib import Path

import click

from afm_patterns.cli.help_formatter import RichCommand
from afm_patterns.cli.utils import Settings, common_options, emit_afm, reported_errors
from afm_patterns.core import normalize as normalize_afm
from afm_patterns.ingestion import AfmBuilder


@click.command(cls=RichCommand)
@click.argument("afm_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@common_options
def normalize(afm_file: Path, settings: Settings) -> None:
    """Print AFM_FILE with every section present.

    ## Examples

        $ afm normalize execution.json

        $ afm normalize execution.json --format yaml
    """
    with reported_errors(settings.debug):
        afm = AfmBuilder.from_file(afm_file)

    emit_afm(normalize_afm(afm), settings)
