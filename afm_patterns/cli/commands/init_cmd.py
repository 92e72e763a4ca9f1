"""Init command for afm-patterns CLI."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from afm_patterns.cli.help_formatter import RichCommand

console = Console()

TEMPLATE = """\
# afm-patterns configuration

merge:
  # per_dataset: every existing date filter is matched by dataset
  # first_only: only the first existing date filter is considered
  strategy: per_dataset

output:
  format: json  # or yaml
  indent: 2

logging:
  level: WARNING
"""


@click.command(cls=RichCommand)
def init() -> None:
    """Create an afm.yml config file in the current directory.

    ## Examples

        $ afm init
    """
    config_path = Path("afm.yml")

    if config_path.exists():
        console.print(f"[yellow]{config_path} already exists[/yellow]")
        raise click.ClickException("Config file already exists")

    config_path.write_text(TEMPLATE, encoding="utf-8")
    console.print(f"[green]Created[/green] {config_path}")
