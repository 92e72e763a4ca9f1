"""Command-line interface for afm-patterns."""

from __future__ import annotations

import click

from afm_patterns.cli import RichGroup
from afm_patterns.cli.commands import init, inspect, merge, normalize


@click.group(cls=RichGroup)
@click.version_option(package_name="afm-patterns")
def cli() -> None:
    """Normalize, inspect and merge filters of AFM documents.

        $ afm normalize execution.json

        $ afm merge execution.json --date-filter last_year.json
    """
    pass


cli.add_command(init)
cli.add_command(inspect)
cli.add_command(merge)
cli.add_command(normalize)


if __name__ == "__main__":
    cli()
