"""Inspect command for afm-patterns CLI."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from afm_patterns.cli.formatting import build_summary_table
from afm_patterns.cli.help_formatter import RichCommand
from afm_patterns.cli.utils import Settings, common_options, reported_errors
from afm_patterns.core import is_afm_executable
from afm_patterns.ingestion import AfmBuilder

console = Console()


@click.command(name="inspect", cls=RichCommand)
@click.argument("afm_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--require-executable",
    is_flag=True,
    help="Exit with an error when the AFM has no measures and no attributes",
)
@common_options
def inspect(afm_file: Path, require_executable: bool, settings: Settings) -> None:
    """Summarize AFM_FILE and report whether it can be executed.

    ## Examples

        $ afm inspect execution.json

    Use as a guard before sending an execution:

        $ afm inspect execution.json --require-executable && submit ...
    """
    with reported_errors(settings.debug):
        afm = AfmBuilder.from_file(afm_file)

    console.print(build_summary_table(afm))

    if require_executable and not is_afm_executable(afm):
        raise click.ClickException("AFM is not executable: no measures or attributes")
