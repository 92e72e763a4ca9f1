"""Shared plumbing for CLI commands: settings, logging, error reporting."""

from __future__ import annotations

import json
import logging
import traceback
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from functools import wraps
from pathlib import Path
from typing import Any, NoReturn

import click
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from afm_patterns.adapters import render_afm
from afm_patterns.cli.formatting import format_document, format_error
from afm_patterns.config import load_config
from afm_patterns.core import MergeStrategy
from afm_patterns.domain import Afm, NormalizedAfm
from afm_patterns.ingestion import AfmFormatError

err_console = Console(stderr=True)


@dataclass
class Settings:
    """Config file values with CLI flags applied on top."""

    output_format: str
    indent: int
    strategy: MergeStrategy
    debug: bool


def common_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add --config/--format/--verbose/--debug and pass resolved Settings."""

    @click.option(
        "--config",
        "-c",
        "config_path",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        help="Path to afm.yml config file (auto-detected if not specified)",
    )
    @click.option(
        "--format",
        "-f",
        "output_format",
        type=click.Choice(["json", "yaml"]),
        default=None,
        help="Output format (default from config, else json)",
    )
    @click.option("--verbose", "-v", is_flag=True, help="Log merge decisions")
    @click.option(
        "--debug",
        is_flag=True,
        help="Show full exception stacktraces for troubleshooting",
    )
    @wraps(func)
    def wrapper(
        *args: Any,
        config_path: Path | None,
        output_format: str | None,
        verbose: bool,
        debug: bool,
        **kwargs: Any,
    ) -> Any:
        with reported_errors(debug, "Config"):
            cfg = load_config(config_path)

        setup_logging("DEBUG" if verbose else cfg.logging.level)
        settings = Settings(
            output_format=output_format or cfg.output.format,
            indent=cfg.output.indent,
            strategy=cfg.merge.strategy,
            debug=debug,
        )
        return func(*args, settings=settings, **kwargs)

    return wrapper


def setup_logging(level: str) -> None:
    """Route log records through Rich on stderr."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@contextmanager
def reported_errors(debug: bool, what: str = "Input") -> Iterator[None]:
    """Turn loading errors into a Rich panel plus click.ClickException."""
    try:
        yield
    except FileNotFoundError as e:
        _report(debug, f"{what} file not found", e)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        _report(debug, f"{what} parsing error", e)
    except ValidationError as e:
        _report(debug, f"{what} validation error", e)
    except (AfmFormatError, ValueError) as e:
        _report(debug, f"{what} format error", e)


def _report(debug: bool, title: str, error: Exception) -> NoReturn:
    if debug:
        err_console.print(traceback.format_exc())
    err_console.print(format_error(title, str(error)))
    raise click.ClickException(str(error)) from error


def emit_afm(afm: Afm | NormalizedAfm, settings: Settings) -> None:
    """Write an AFM document to stdout."""
    document = format_document(render_afm(afm), settings.output_format, settings.indent)
    click.echo(document.rstrip("\n"))
